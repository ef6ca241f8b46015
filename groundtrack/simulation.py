#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Simulation Module

Frame-by-frame driver for a single orbit view. Holds the current orbital
elements, their derived geometry and the propagation state, and steps
them forward one rendering frame at a time.

The simulation can run independently of any rendering surface; each
step returns a SimulationFrame with everything a 3-D view and a 2-D map
need to draw.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from .catalog import CatalogEntry
from .constants import EARTH, INITIAL_BODY_ROTATION, ReferenceBody
from .elements import OrbitalElements
from .geometry import DerivedGeometry, derive_geometry
from .projection import GroundTrack
from .propagator import OrbitPosition, OrbitPropagator, PropagationState, PropagatorConfig


logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """
    Configuration for a simulation.

    Attributes
    ----------
    simulation_speed : float
        Simulated seconds per wall-clock second.
    elements : OrbitalElements
        Initial orbital elements.
    body : ReferenceBody
        Central body.
    initial_body_rotation : float
        Body rotation about its polar axis at start (radians).
    propagator : PropagatorConfig
        Kepler solver and ground-track sampling settings.
    """

    simulation_speed: float = 500.0
    elements: OrbitalElements = field(default_factory=OrbitalElements)
    body: ReferenceBody = EARTH
    initial_body_rotation: float = INITIAL_BODY_ROTATION
    propagator: PropagatorConfig = field(default_factory=PropagatorConfig)


@dataclass
class SimulationFrame:
    """
    Output of one simulation step.

    Attributes
    ----------
    time : float
        Simulated time after the step (seconds).
    step_count : int
        Number of steps executed.
    position : OrbitPosition
        Satellite position.
    ground_track : GroundTrack
        Trailing ground track, most recent sample first.
    body_rotation : float
        Body rotation about its polar axis (radians).
    near_repeating : bool
        Whether the ground track collapses onto a fixed point.
    """

    time: float
    step_count: int
    position: OrbitPosition
    ground_track: GroundTrack
    body_rotation: float
    near_repeating: bool


class GroundTrackSimulation:
    """
    Single-orbit simulation driven by a render loop.

    Parameters
    ----------
    config : SimulationConfig, optional
        Simulation configuration.

    Attributes
    ----------
    elements : OrbitalElements
        Current orbital elements.
    geometry : DerivedGeometry
        Geometry derived from the current elements.
    state : PropagationState
        Mean anomaly, body rotation and elapsed time.
    step_count : int
        Number of steps executed.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()
        self.propagator = OrbitPropagator(self.config.propagator, self.config.body)

        self.elements = self.config.elements
        self.geometry: DerivedGeometry = derive_geometry(self.elements, self.config.body)
        self.state = PropagationState(
            mean_anomaly=self.elements.mean_anomaly,
            body_rotation=self.config.initial_body_rotation,
        )
        self.step_count = 0

    @property
    def simulation_time(self) -> float:
        return self.state.elapsed_time

    def update_elements(self, **changes) -> DerivedGeometry:
        """
        Change one or more orbital elements and re-derive the geometry.

        A changed ``mean_anomaly`` also resets the propagation phase.

        Raises
        ------
        PreconditionViolation
            If the new elements are invalid. The simulation is unchanged.
        """
        elements = self.elements.replace(**changes)
        geometry = derive_geometry(elements, self.config.body)

        self.elements = elements
        self.geometry = geometry
        if "mean_anomaly" in changes:
            self.state = PropagationState(
                mean_anomaly=elements.mean_anomaly,
                body_rotation=self.state.body_rotation,
                elapsed_time=self.state.elapsed_time,
            )

        logger.info(f"Elements updated: {elements!r}")
        logger.debug(
            f"Geometry: a={geometry.semi_major_axis:.4f} b={geometry.semi_minor_axis:.4f} "
            f"c={geometry.focal_offset:.4f} T={geometry.period:.1f} s"
        )
        return geometry

    def select(self, entry: CatalogEntry) -> None:
        """
        Load a catalogued object.

        Replaces the elements and mean anomaly, and orients the body by
        the object's sidereal angle.

        Raises
        ------
        PreconditionViolation
            If the entry's orbit is invalid for the body. The simulation
            is unchanged.
        """
        geometry = derive_geometry(entry.elements, self.config.body)

        self.elements = entry.elements
        self.geometry = geometry
        self.state = PropagationState(
            mean_anomaly=entry.elements.mean_anomaly,
            body_rotation=INITIAL_BODY_ROTATION + entry.sidereal_time,
            elapsed_time=self.state.elapsed_time,
        )
        logger.info(f"Selected {entry.name} ({entry.object_id})")

    def step(self, wall_delta: float) -> SimulationFrame:
        """
        Advance the simulation by one frame.

        Parameters
        ----------
        wall_delta : float
            Wall-clock seconds since the previous frame; scaled by
            ``simulation_speed``.

        Returns
        -------
        SimulationFrame
            Position and ground track after the step
        """
        time_delta = wall_delta * self.config.simulation_speed
        self.state = self.propagator.advance(self.state, self.geometry, time_delta)
        self.step_count += 1

        return self._frame()

    def current_frame(self) -> SimulationFrame:
        """Frame for the current state without advancing."""
        return self._frame()

    def _frame(self) -> SimulationFrame:
        position = self.propagator.position_at(self.state.mean_anomaly, self.geometry, self.elements)
        track = self.propagator.ground_track(
            self.state.mean_anomaly,
            self.geometry,
            self.elements,
            body_rotation=self.state.body_rotation,
        )
        near_repeating = self.propagator.is_near_repeating(track)

        logger.debug(
            f"Step {self.step_count}: t={self.state.elapsed_time:.1f} s, "
            f"M={math.degrees(self.state.mean_anomaly) % 360:.2f}°, r={position.radius:.4f}"
        )

        return SimulationFrame(
            time=self.state.elapsed_time,
            step_count=self.step_count,
            position=position,
            ground_track=track,
            body_rotation=self.state.body_rotation,
            near_repeating=near_repeating,
        )
