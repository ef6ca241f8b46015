#!/usr/bin/env python3
"""
Example: Propagating Orbits and Ground Tracks

Demonstrates how to use the propagation core programmatically without a
rendering surface. Useful for:
- Precomputing ground tracks for a map
- Checking whether an orbit is geosynchronous
- Preparing catalog and scatter data for the views
"""

import math
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from groundtrack import (
    EARTH,
    CatalogEntry,
    Dimension,
    GroundTrackSimulation,
    OrbitalElements,
    OrbitPropagator,
    ScatterCatalog,
    SimulationConfig,
    derive_geometry,
)


def example_basic_propagation():
    """
    Position and ground track of a single orbit, stepped like a render loop.
    """
    print("=" * 70)
    print("Example 1: Frame Loop")
    print("=" * 70)

    sim = GroundTrackSimulation(SimulationConfig(simulation_speed=500))
    print(f"\nElements: {sim.elements!r}")
    print(f"Period: {sim.geometry.period / 60:.1f} min")

    # 60 frames at 60 fps is 500 simulated seconds
    for _ in range(60):
        frame = sim.step(1 / 60)

    x, z = frame.position.perifocal
    print(f"\nAfter {frame.time:.0f} s:")
    print(f"  Perifocal position: x={x:.4f} z={z:.4f}")
    print(f"  Inertial position: {frame.position.inertial.round(4)}")
    print(f"  Sub-satellite point: lon={frame.ground_track[0][0]:+.2f}° "
          f"lat={frame.ground_track[0][1]:+.2f}°")
    print(f"  Track samples: {len(frame.ground_track)}")


def example_geostationary():
    """
    A geostationary orbit collapses its ground track onto one point.
    """
    print("\n" + "=" * 70)
    print("Example 2: Geostationary Orbit")
    print("=" * 70)

    radius = (EARTH.mu / EARTH.angular_velocity ** 2) ** (1 / 3)
    elements = OrbitalElements(
        eccentricity=0.0,
        perigee_altitude=radius - EARTH.radius,
        raan=0.0,
        inclination=0.0,
        argument_of_perigee=0.0,
    )

    propagator = OrbitPropagator()
    geometry = derive_geometry(elements)
    track = propagator.ground_track(elements.mean_anomaly, geometry, elements)

    print(f"\nAltitude: {radius - EARTH.radius:.0f} km")
    print(f"Period: {geometry.period / 3600:.3f} h")
    print(f"Closure angle: {track.closure_angle:.2e} rad")
    print(f"Near-repeating: {propagator.is_near_repeating(track)}")


def example_catalog_selection():
    """
    Load a catalogued object into a running simulation.
    """
    print("\n" + "=" * 70)
    print("Example 3: Catalog Selection")
    print("=" * 70)

    row = ["25544", "ISS (ZARYA)", 120.0, 0.0005, 210.0, 51.64, 80.0, 415.0, 1.2]
    entry = CatalogEntry.from_row(row)

    sim = GroundTrackSimulation()
    sim.select(entry)
    frame = sim.current_frame()

    print(f"\nSelected: {entry.name}")
    print(f"  Period: {sim.geometry.period / 60:.1f} min")
    print(f"  Sub-satellite point: lon={frame.ground_track[0][0]:+.2f}° "
          f"lat={frame.ground_track[0][1]:+.2f}°")


def example_scatter():
    """
    Classify tracked objects for the scatter view.
    """
    print("\n" + "=" * 70)
    print("Example 4: Scatter Classification")
    print("=" * 70)

    rows = [
        ["PAY", "US", "LEO", 7000.0, 0.0, 0.0],
        ["DEB", "CIS", "LEO", 0.0, 7100.0, 0.0],
        ["R/B", "PRC", "MEO", 0.0, 0.0, 26000.0],
        ["PAY", "US", "HEO/GEO", 42164.0, 0.0, 0.0],
        ["UNK", "FR", "LEO", 6900.0, 100.0, 0.0],
    ]
    catalog = ScatterCatalog.from_rows(rows)

    for dimension in Dimension:
        legend = ", ".join(label for label, _ in catalog.legend(dimension))
        print(f"\n{dimension.name.title()} legend: {legend}")
        for point in catalog.points(dimension):
            print(f"  {point.label:8s} {point.color} {point.position.round(3)}")


if __name__ == "__main__":
    example_basic_propagation()
    example_geostationary()
    example_catalog_selection()
    example_scatter()
