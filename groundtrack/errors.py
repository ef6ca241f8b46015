#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error types for the GroundTrack package.
"""


class PreconditionViolation(ValueError):
    """
    Raised when an input lies outside the domain of the orbit model.

    Examples are an eccentricity outside [0, 1), a non-positive body
    radius or gravitational parameter, or a malformed catalog row.
    Subclasses ValueError so callers validating user input can catch
    either.
    """
