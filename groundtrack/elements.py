#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Classical Orbital Elements

The six scalars describing an orbit and its phase. Elements are
immutable; a changed element produces a new instance via ``replace``,
which re-runs validation.
"""

import dataclasses
import math
import numbers
from dataclasses import dataclass

from .errors import PreconditionViolation


@dataclass(frozen=True)
class OrbitalElements:
    """
    Classical orbital elements of a closed orbit.

    Attributes
    ----------
    eccentricity : float
        Shape of the ellipse, in [0, 1)
    perigee_altitude : float
        Altitude above the body surface at closest approach (km)
    raan : float
        Right ascension of the ascending node (degrees)
    inclination : float
        Orbital plane tilt (degrees)
    argument_of_perigee : float
        Angle from ascending node to periapsis (degrees)
    mean_anomaly : float
        Mean anomaly at the reference epoch (radians)
    """
    eccentricity: float = 0.3
    perigee_altitude: float = 480.0
    raan: float = 65.0
    inclination: float = 46.0
    argument_of_perigee: float = 270.0
    mean_anomaly: float = 0.0

    def __post_init__(self):
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise PreconditionViolation(f"{f.name} must be a finite number, got {value!r}")

        if not 0 <= self.eccentricity < 1:
            raise PreconditionViolation(
                f"Eccentricity must be in [0, 1), got {self.eccentricity}"
            )

    def replace(self, **changes) -> "OrbitalElements":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def validate_for(self, body_radius: float) -> None:
        """
        Check that periapsis lies outside the body centre.

        Raises
        ------
        PreconditionViolation
            If ``body_radius + perigee_altitude`` is not positive.
        """
        if body_radius + self.perigee_altitude <= 0:
            raise PreconditionViolation(
                f"Perigee altitude {self.perigee_altitude} km places periapsis "
                f"at or below the body centre"
            )

    def __repr__(self) -> str:
        return (
            f"OrbitalElements(e={self.eccentricity:.4f}, "
            f"hp={self.perigee_altitude:.1f} km, "
            f"RAAN={self.raan:.2f}°, i={self.inclination:.2f}°, "
            f"ω={self.argument_of_perigee:.2f}°, "
            f"M={math.degrees(self.mean_anomaly):.2f}°)"
        )
