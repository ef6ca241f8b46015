#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GroundTrack - Orbit Propagation for Orbit Visualizations

Closed-form Keplerian propagation of a single satellite and projection of
its trajectory onto a rotating, polar-flattened reference body, producing
the positions and ground tracks an orbit view draws each frame.

Rendering is left to the caller; everything here is pure computation.

Example usage:

    from groundtrack import GroundTrackSimulation, SimulationConfig, OrbitalElements

    config = SimulationConfig(
        elements=OrbitalElements(eccentricity=0.3, perigee_altitude=480),
    )
    sim = GroundTrackSimulation(config)
    frame = sim.step(1 / 60)  # one frame at 60 fps
    print(frame.position.inertial, frame.ground_track[0])
"""

from .errors import PreconditionViolation

from .constants import (
    EARTH,
    EARTH_MU,
    EARTH_RADIUS_KM,
    EARTH_POLAR_RADIUS_KM,
    EARTH_ANGULAR_VELOCITY,
    INITIAL_BODY_ROTATION,
    ReferenceBody,
)

from .elements import OrbitalElements

from .kepler import (
    KeplerSolver,
    solve_kepler,
    true_anomaly_from_eccentric,
)

from .geometry import (
    DerivedGeometry,
    derive_geometry,
    orientation_matrix,
)

from .projection import (
    GeoProjector,
    GroundTrack,
    NEAR_REPEAT_THRESHOLD,
)

from .propagator import (
    OrbitPropagator,
    OrbitPosition,
    PropagationState,
    PropagatorConfig,
)

from .catalog import (
    CatalogEntry,
    catalog_from_rows,
)

from .scatter import (
    Dimension,
    ScatterCatalog,
    ScatterObject,
    ScatterPoint,
)

from .simulation import (
    GroundTrackSimulation,
    SimulationConfig,
    SimulationFrame,
)


__all__ = [
    # Errors
    "PreconditionViolation",

    # Constants
    "EARTH",
    "EARTH_MU",
    "EARTH_RADIUS_KM",
    "EARTH_POLAR_RADIUS_KM",
    "EARTH_ANGULAR_VELOCITY",
    "INITIAL_BODY_ROTATION",
    "ReferenceBody",

    # Elements and geometry
    "OrbitalElements",
    "KeplerSolver",
    "solve_kepler",
    "true_anomaly_from_eccentric",
    "DerivedGeometry",
    "derive_geometry",
    "orientation_matrix",

    # Propagation
    "GeoProjector",
    "GroundTrack",
    "NEAR_REPEAT_THRESHOLD",
    "OrbitPropagator",
    "OrbitPosition",
    "PropagationState",
    "PropagatorConfig",

    # Catalogs
    "CatalogEntry",
    "catalog_from_rows",
    "Dimension",
    "ScatterCatalog",
    "ScatterObject",
    "ScatterPoint",

    # Simulation
    "GroundTrackSimulation",
    "SimulationConfig",
    "SimulationFrame",
]

__version__ = "1.0.0"
