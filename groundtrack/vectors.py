#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Vector and Rotation Helpers

Rotation matrices and spherical conversions in the scene frame used by
the orbit views: y is the polar axis, z points toward periapsis of an
unrotated orbit and x completes the right-handed set.
"""

import math
from typing import Sequence, Tuple

import numpy as np

# Smallest polar angle kept away from the poles
POLAR_EPSILON = 1e-6


def rotation_x(angle: float) -> np.ndarray:
    """Rotation matrix about the x axis (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, c, -s],
        [0.0, s, c],
    ])


def rotation_y(angle: float) -> np.ndarray:
    """Rotation matrix about the y (polar) axis (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c],
    ])


def rotation_z(angle: float) -> np.ndarray:
    """Rotation matrix about the z axis (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def make_safe(phi: float, epsilon: float = POLAR_EPSILON) -> float:
    """Clamp a polar angle to [epsilon, π - epsilon]."""
    return min(max(phi, epsilon), math.pi - epsilon)


def to_spherical(point: Sequence[float]) -> Tuple[float, float, float]:
    """
    Convert a Cartesian point to spherical coordinates.

    Parameters
    ----------
    point : array-like
        Position [x, y, z]

    Returns
    -------
    tuple
        (radius, theta, phi) where theta is the azimuth about the y axis
        measured from +z toward +x, and phi is the polar angle from +y.
        Both angles in radians; the origin maps to (0, 0, 0).
    """
    x, y, z = (float(v) for v in point)
    radius = math.sqrt(x * x + y * y + z * z)

    if radius == 0:
        return 0.0, 0.0, 0.0

    theta = math.atan2(x, z)
    phi = math.acos(min(max(y / radius, -1.0), 1.0))
    return radius, theta, phi


def central_angle(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Great-circle angle between two geographic points.

    Parameters
    ----------
    a, b : array-like
        (longitude, latitude) pairs in degrees

    Returns
    -------
    float
        Central angle in radians, in [0, π]
    """
    lon1, lat1 = math.radians(a[0]), math.radians(a[1])
    lon2, lat2 = math.radians(b[0]), math.radians(b[1])

    # Haversine form stays accurate for nearly coincident points
    h = (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    )
    return 2 * math.asin(math.sqrt(min(h, 1.0)))
