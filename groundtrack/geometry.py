#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Orbit Geometry

Shape, size, period and orientation of an orbit derived from its
classical elements. Lengths are normalized to the reference body's
equatorial radius.
"""

import math
from dataclasses import dataclass

import numpy as np

from .constants import EARTH, ReferenceBody
from .elements import OrbitalElements
from .vectors import rotation_y, rotation_z


@dataclass(frozen=True, eq=False)
class DerivedGeometry:
    """
    Geometry of an elliptical orbit.

    Attributes
    ----------
    semi_major_axis : float
        Half the longest diameter of the ellipse (body radii)
    semi_minor_axis : float
        Half the shortest diameter of the ellipse (body radii)
    focal_offset : float
        Distance from ellipse centre to the focus (body radii)
    periapsis_radius : float
        Distance from the body centre at closest approach (body radii)
    period : float
        Time for one complete orbit (seconds)
    orientation : np.ndarray
        3x3 rotation from perifocal to inertial (scene) coordinates
    """
    semi_major_axis: float
    semi_minor_axis: float
    focal_offset: float
    periapsis_radius: float
    period: float
    orientation: np.ndarray

    @property
    def eccentricity(self) -> float:
        """Orbit eccentricity recovered from the ellipse shape."""
        return self.focal_offset / self.semi_major_axis

    @property
    def apoapsis_radius(self) -> float:
        """Distance from the body centre at the farthest point (body radii)."""
        return self.semi_major_axis + self.focal_offset

    @property
    def mean_motion(self) -> float:
        """Mean angular velocity (radians/second)."""
        return 2 * math.pi / self.period


def orientation_matrix(raan: float, inclination: float, argument_of_perigee: float) -> np.ndarray:
    """
    Get rotation matrix from perifocal to inertial coordinates.

    Composed as Ry(raan) · Rz(inclination) · Ry(argument_of_perigee).

    Parameters
    ----------
    raan, inclination, argument_of_perigee : float
        Euler angles (degrees)

    Returns
    -------
    np.ndarray
        3x3 rotation matrix
    """
    return (
        rotation_y(math.radians(raan))
        @ rotation_z(math.radians(inclination))
        @ rotation_y(math.radians(argument_of_perigee))
    )


def derive_geometry(elements: OrbitalElements, body: ReferenceBody = EARTH) -> DerivedGeometry:
    """
    Derive orbit geometry from orbital elements.

    Parameters
    ----------
    elements : OrbitalElements
        Orbit to describe
    body : ReferenceBody
        Central body; distances are normalized to its radius

    Returns
    -------
    DerivedGeometry
        Geometry of the orbit

    Raises
    ------
    PreconditionViolation
        If periapsis would lie at or below the body centre.
    """
    elements.validate_for(body.radius)

    e = elements.eccentricity
    periapsis_radius = (body.radius + elements.perigee_altitude) / body.radius

    a = periapsis_radius / (1 - e)
    c = a * e
    b = math.sqrt(a ** 2 - c ** 2)

    # Kepler's third law on the dimensional semi-major axis
    period = math.sqrt((a * body.radius) ** 3 * 4 * math.pi ** 2 / body.mu)

    return DerivedGeometry(
        semi_major_axis=a,
        semi_minor_axis=b,
        focal_offset=c,
        periapsis_radius=periapsis_radius,
        period=period,
        orientation=orientation_matrix(
            elements.raan, elements.inclination, elements.argument_of_perigee
        ),
    )
