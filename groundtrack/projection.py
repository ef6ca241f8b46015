#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Geographic Projection

Converts inertial scene positions into longitude/latitude on the
rotating, polar-flattened reference body, and holds ground-track samples.
"""

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .constants import EARTH, ReferenceBody
from .vectors import central_angle, make_safe, rotation_y, to_spherical

# Central angle (radians) below which a track counts as a fixed point
NEAR_REPEAT_THRESHOLD = 0.05

# Azimuth of the prime meridian in the body's local frame (degrees)
PRIME_MERIDIAN_OFFSET = 90.0

LonLat = Tuple[float, float]


def wrap_longitude(longitude: float) -> float:
    """Wrap a longitude in degrees into [-180, 180)."""
    wrapped = (longitude + 180.0) % 360.0 - 180.0
    # float modulo can round up to exactly 360
    return wrapped - 360.0 if wrapped >= 180.0 else wrapped


class GeoProjector:
    """
    Projects Cartesian points onto a rotating reference body.

    Parameters
    ----------
    body : ReferenceBody
        Body whose rotation and polar flattening are applied
    """

    def __init__(self, body: ReferenceBody = EARTH):
        self.body = body

    def to_body_frame(
        self,
        inertial: Sequence[float],
        body_rotation: float,
        elapsed_rotation: float = 0.0,
    ) -> np.ndarray:
        """
        Express an inertial point in the body-fixed frame.

        Parameters
        ----------
        inertial : array-like
            Position [x, y, z] in the inertial scene frame
        body_rotation : float
            Current rotation of the body about its polar axis (radians)
        elapsed_rotation : float
            Additional rotation the body has made between the current
            instant and the sample's instant (radians)

        Returns
        -------
        np.ndarray
            Position in the body frame, polar axis rescaled to a unit sphere
        """
        local = rotation_y(-(body_rotation + elapsed_rotation)) @ np.asarray(inertial, dtype=float)
        local[1] /= self.body.polar_scale
        return local

    @staticmethod
    def to_geographic(body_point: Sequence[float]) -> LonLat:
        """
        Convert a body-frame point to longitude and latitude.

        Parameters
        ----------
        body_point : array-like
            Position [x, y, z] in the body frame

        Returns
        -------
        tuple
            (longitude, latitude) in degrees. Longitude in [-180, 180),
            latitude in [-90, 90] with the poles clamped.
        """
        _, theta, phi = to_spherical(body_point)
        phi = make_safe(phi)

        longitude = wrap_longitude(math.degrees(theta) - PRIME_MERIDIAN_OFFSET)
        latitude = 90.0 - math.degrees(phi)
        return longitude, latitude

    def project(
        self,
        inertial: Sequence[float],
        body_rotation: float,
        elapsed_rotation: float = 0.0,
    ) -> LonLat:
        """Project an inertial point straight to (longitude, latitude)."""
        return self.to_geographic(self.to_body_frame(inertial, body_rotation, elapsed_rotation))


@dataclass
class GroundTrack:
    """
    Ordered ground-track samples, most recent first.

    Attributes
    ----------
    points : list
        (longitude, latitude) pairs in degrees
    sample_spacing : float
        Time between consecutive samples (seconds, negative for history)
    """
    points: List[LonLat] = field(default_factory=list)
    sample_spacing: float = 0.0

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[LonLat]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def closure_angle(self) -> float:
        """Central angle between the first and last sample (radians)."""
        if not self.points:
            return math.nan
        return central_angle(self.points[0], self.points[-1])

    def is_near_repeating(self, threshold: float = NEAR_REPEAT_THRESHOLD) -> bool:
        """
        Check whether the track collapses onto a fixed point.

        A geosynchronous orbit keeps returning to the same spot; such a
        track is drawn as a small circle rather than a path.
        """
        if not self.points:
            return False
        return self.closure_angle < threshold

    def as_array(self) -> np.ndarray:
        """Samples as an (N, 2) array of [longitude, latitude]."""
        return np.array(self.points, dtype=float).reshape(-1, 2)
