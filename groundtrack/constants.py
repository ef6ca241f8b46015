#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reference Body Constants

Physical parameters of the central body the orbits are computed around.
All distances in kilometers, angles in radians, time in seconds.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .errors import PreconditionViolation

# Standard gravitational parameter μ in km³/s²
EARTH_MU = 3.986e5

# Equatorial and polar radii in km
EARTH_RADIUS_KM = 6378.137
EARTH_POLAR_RADIUS_KM = 6356.752

# Sidereal rotation rate in rad/s
EARTH_ANGULAR_VELOCITY = 7.29211840505999e-5

# Body rotation about the polar axis at scene start (prime meridian facing +z)
INITIAL_BODY_ROTATION = -math.pi / 2


@dataclass(frozen=True)
class ReferenceBody:
    """
    Central body of an orbit.

    Parameters
    ----------
    radius : float
        Equatorial radius (km). Orbit geometry is normalized to this.
    mu : float
        Standard gravitational parameter (km³/s²)
    angular_velocity : float
        Rotation rate about the polar axis (rad/s)
    polar_radius : float, optional
        Polar radius (km). Defaults to ``radius`` (spherical body).
    """
    radius: float = EARTH_RADIUS_KM
    mu: float = EARTH_MU
    angular_velocity: float = EARTH_ANGULAR_VELOCITY
    polar_radius: Optional[float] = None

    def __post_init__(self):
        if self.polar_radius is None:
            object.__setattr__(self, "polar_radius", self.radius)

        if not math.isfinite(self.radius) or self.radius <= 0:
            raise PreconditionViolation("Body radius must be positive")
        if not math.isfinite(self.mu) or self.mu <= 0:
            raise PreconditionViolation("Gravitational parameter must be positive")
        if not math.isfinite(self.polar_radius) or self.polar_radius <= 0:
            raise PreconditionViolation("Polar radius must be positive")
        if not math.isfinite(self.angular_velocity):
            raise PreconditionViolation("Angular velocity must be finite")

    @property
    def polar_scale(self) -> float:
        """Ratio of polar to equatorial radius."""
        return self.polar_radius / self.radius


EARTH = ReferenceBody(
    radius=EARTH_RADIUS_KM,
    mu=EARTH_MU,
    angular_velocity=EARTH_ANGULAR_VELOCITY,
    polar_radius=EARTH_POLAR_RADIUS_KM,
)
