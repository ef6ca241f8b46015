#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Orbit Propagator

Closed-form Keplerian propagation: position of a satellite at a given
mean anomaly, and its trailing ground track over the rotating body.

The propagator is stateless. The only quantity carried between frames,
the mean anomaly, lives in a PropagationState owned by the caller and
threaded explicitly through ``advance``.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

import numpy as np

from .constants import EARTH, INITIAL_BODY_ROTATION, ReferenceBody
from .elements import OrbitalElements
from .errors import PreconditionViolation
from .geometry import DerivedGeometry
from .kepler import DEFAULT_ITERATIONS, KeplerSolver
from .projection import NEAR_REPEAT_THRESHOLD, GeoProjector, GroundTrack


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropagatorConfig:
    """
    Configuration for an OrbitPropagator.

    Attributes
    ----------
    kepler_iterations : int
        Newton-Raphson iterations per Kepler solve.
    kepler_tolerance : float, optional
        Early-exit step size; None runs every iteration.
    sample_spacing : float
        Time between ground-track samples (seconds). Negative values walk
        back in time to build a trailing track.
    max_samples : int
        Upper bound on ground-track samples.
    track_periods : float
        Orbital periods of history covered by a full ground track.
    near_repeat_threshold : float
        Central angle (radians) under which a track is treated as a
        fixed point.
    """
    kepler_iterations: int = DEFAULT_ITERATIONS
    kepler_tolerance: Optional[float] = None
    sample_spacing: float = -300.0
    max_samples: int = 200
    track_periods: float = 2.0
    near_repeat_threshold: float = NEAR_REPEAT_THRESHOLD

    def __post_init__(self):
        if self.kepler_iterations <= 0:
            raise PreconditionViolation("kepler_iterations must be positive")
        if self.kepler_tolerance is not None and self.kepler_tolerance < 0:
            raise PreconditionViolation("kepler_tolerance must be non-negative")
        if self.sample_spacing == 0 or not math.isfinite(self.sample_spacing):
            raise PreconditionViolation("sample_spacing must be finite and non-zero")
        if self.max_samples <= 0:
            raise PreconditionViolation("max_samples must be positive")
        if self.track_periods <= 0:
            raise PreconditionViolation("track_periods must be positive")
        if self.near_repeat_threshold <= 0:
            raise PreconditionViolation("near_repeat_threshold must be positive")


@dataclass(frozen=True)
class PropagationState:
    """
    State carried between frames.

    Attributes
    ----------
    mean_anomaly : float
        Accumulated mean anomaly (radians). Not wrapped.
    body_rotation : float
        Rotation of the reference body about its polar axis (radians)
    elapsed_time : float
        Total simulated time (seconds)
    """
    mean_anomaly: float = 0.0
    body_rotation: float = INITIAL_BODY_ROTATION
    elapsed_time: float = 0.0


@dataclass(frozen=True, eq=False)
class OrbitPosition:
    """
    Instantaneous position of a satellite on its orbit.

    Attributes
    ----------
    mean_anomaly : float
        Mean anomaly the position was computed for (radians)
    eccentric_anomaly : float
        Eccentric anomaly (radians)
    true_anomaly : float
        True anomaly (radians)
    radius : float
        Distance from the body centre (body radii)
    perifocal : tuple
        (x, z) in the orbital plane, z toward periapsis (body radii)
    inertial : np.ndarray
        Position [x, y, z] after applying the orbit orientation
    spin_angle : float
        Display rotation of the satellite model, E - π/2 (radians)
    """
    mean_anomaly: float
    eccentric_anomaly: float
    true_anomaly: float
    radius: float
    perifocal: Tuple[float, float]
    inertial: np.ndarray = field(repr=False)
    spin_angle: float


class OrbitPropagator:
    """
    Computes satellite positions and ground tracks from orbital elements.

    Parameters
    ----------
    config : PropagatorConfig, optional
        Solver and sampling configuration
    body : ReferenceBody
        Central body for rotation and projection
    """

    def __init__(self, config: Optional[PropagatorConfig] = None, body: ReferenceBody = EARTH):
        self.config = config or PropagatorConfig()
        self.body = body
        self.solver = KeplerSolver(self.config.kepler_iterations, self.config.kepler_tolerance)
        self.projector = GeoProjector(body)

    def position_at(
        self,
        mean_anomaly: float,
        geometry: DerivedGeometry,
        elements: OrbitalElements,
    ) -> OrbitPosition:
        """
        Calculate the satellite position at a mean anomaly.

        Parameters
        ----------
        mean_anomaly : float
            Mean anomaly (radians)
        geometry : DerivedGeometry
            Geometry derived from ``elements``
        elements : OrbitalElements
            Orbit being propagated

        Returns
        -------
        OrbitPosition
            Perifocal and inertial position plus the anomalies
        """
        e = elements.eccentricity
        a = geometry.semi_major_axis

        E = self.solver.solve(mean_anomaly, e)
        f = self.solver.true_anomaly(E, e)
        r = a * (1 - e ** 2) / (1 + e * math.cos(f))

        x = r * math.sin(f)
        z = r * math.cos(f)
        inertial = geometry.orientation @ np.array([x, 0.0, z])

        return OrbitPosition(
            mean_anomaly=mean_anomaly,
            eccentric_anomaly=E,
            true_anomaly=f,
            radius=r,
            perifocal=(x, z),
            inertial=inertial,
            spin_angle=E - math.pi / 2,
        )

    def sample_count(self, geometry: DerivedGeometry, sample_spacing: Optional[float] = None) -> int:
        """
        Number of ground-track samples for an orbit.

        Covers ``track_periods`` orbital periods, capped at ``max_samples``.
        """
        spacing = self.config.sample_spacing if sample_spacing is None else sample_spacing
        if spacing == 0:
            raise PreconditionViolation("sample_spacing must be non-zero")

        wanted = self.config.track_periods * geometry.period / abs(spacing)
        return int(min(self.config.max_samples, math.ceil(wanted)))

    def ground_track(
        self,
        mean_anomaly: float,
        geometry: DerivedGeometry,
        elements: OrbitalElements,
        body_rotation: float = INITIAL_BODY_ROTATION,
        sample_spacing: Optional[float] = None,
        sample_count: Optional[int] = None,
    ) -> GroundTrack:
        """
        Sample the ground track around the current position.

        Sample ``i`` is taken ``i * sample_spacing`` seconds from now; its
        inertial position is rotated back by the angle the body turns in
        that time before being projected.

        Parameters
        ----------
        mean_anomaly : float
            Current mean anomaly (radians)
        geometry : DerivedGeometry
            Geometry derived from ``elements``
        elements : OrbitalElements
            Orbit being propagated
        body_rotation : float
            Current rotation of the body about its polar axis (radians)
        sample_spacing : float, optional
            Seconds between samples; defaults to the configured spacing
        sample_count : int, optional
            Number of samples; defaults to ``sample_count(geometry)``

        Returns
        -------
        GroundTrack
            (longitude, latitude) samples, most recent first
        """
        spacing = self.config.sample_spacing if sample_spacing is None else sample_spacing
        if sample_count is None:
            sample_count = self.sample_count(geometry, spacing)

        mean_motion = geometry.mean_motion
        omega = self.body.angular_velocity

        points = []
        for i in range(sample_count):
            offset = i * spacing
            position = self.position_at(mean_anomaly + mean_motion * offset, geometry, elements)
            points.append(
                self.projector.project(position.inertial, body_rotation, omega * offset)
            )

        track = GroundTrack(points=points, sample_spacing=spacing)
        logger.debug(f"Ground track: {len(track)} samples, closure {track.closure_angle:.4f} rad")
        return track

    def is_near_repeating(self, track: GroundTrack) -> bool:
        """Check a track against the configured near-repeat threshold."""
        return track.is_near_repeating(self.config.near_repeat_threshold)

    def advance(
        self,
        state: PropagationState,
        geometry: DerivedGeometry,
        time_delta: float,
    ) -> PropagationState:
        """
        Advance a propagation state by a time step.

        Parameters
        ----------
        state : PropagationState
            State at the start of the step
        geometry : DerivedGeometry
            Geometry of the orbit being propagated
        time_delta : float
            Simulated seconds to advance

        Returns
        -------
        PropagationState
            New state; the input is not modified
        """
        return replace(
            state,
            mean_anomaly=state.mean_anomaly + geometry.mean_motion * time_delta,
            body_rotation=state.body_rotation + self.body.angular_velocity * time_delta,
            elapsed_time=state.elapsed_time + time_delta,
        )
