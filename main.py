#!/usr/bin/env python3
"""
GroundTrack - Orbit and Ground-Track Simulator

Command-line entry point for propagating a single orbit headlessly and
reporting its position and ground track.

Usage:
    python main.py                                  # Default elements
    python main.py -e 0 --perigee-altitude 35786 -i 0   # Geostationary
    python main.py --duration 20 --track            # Print the ground track
    python main.py --help                           # Show all options
"""

import argparse
import logging
import math
import sys


logger = logging.getLogger("groundtrack")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Orbit propagation and ground-track simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                    # Default elements
  %(prog)s -e 0.7 --perigee-altitude 500      # Highly elliptical orbit
  %(prog)s -e 0 --perigee-altitude 35786 -i 0 # Geostationary orbit
  %(prog)s --duration 10 --timestep 0.5       # 20 frames of half a second
  %(prog)s --track                            # Print the final ground track
        """,
    )

    # -------------------------------------------------------------------------
    # Orbital elements
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--eccentricity",
        "-e",
        type=float,
        default=0.3,
        help="Orbit eccentricity, 0 <= e < 1 (default: 0.3)",
    )
    parser.add_argument(
        "--perigee-altitude",
        type=float,
        default=480.0,
        help="Perigee altitude in km (default: 480)",
    )
    parser.add_argument(
        "--raan",
        type=float,
        default=65.0,
        help="Right ascension of ascending node in degrees (default: 65)",
    )
    parser.add_argument(
        "--inclination",
        "-i",
        type=float,
        default=46.0,
        help="Orbital inclination in degrees (default: 46)",
    )
    parser.add_argument(
        "--aop",
        type=float,
        default=270.0,
        help="Argument of perigee in degrees (default: 270)",
    )
    parser.add_argument(
        "--mean-anomaly",
        type=float,
        default=0.0,
        help="Initial mean anomaly in degrees (default: 0)",
    )

    # -------------------------------------------------------------------------
    # Simulation control
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--simulation-speed",
        type=float,
        default=500.0,
        help="Simulated seconds per wall-clock second (default: 500)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=60.0,
        help="Wall-clock duration to simulate in seconds (default: 60)",
    )
    parser.add_argument(
        "--timestep",
        type=float,
        default=1.0,
        help="Wall-clock seconds per frame (default: 1)",
    )

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--track",
        action="store_true",
        help="Print the ground track of the final frame",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    from groundtrack import (
        GroundTrackSimulation,
        OrbitalElements,
        PreconditionViolation,
        SimulationConfig,
    )

    if args.timestep <= 0:
        logger.error("Timestep must be positive")
        return 1

    # -------------------------------------------------------------------------
    # Create simulation
    # -------------------------------------------------------------------------
    try:
        elements = OrbitalElements(
            eccentricity=args.eccentricity,
            perigee_altitude=args.perigee_altitude,
            raan=args.raan,
            inclination=args.inclination,
            argument_of_perigee=args.aop,
            mean_anomaly=math.radians(args.mean_anomaly),
        )
        sim = GroundTrackSimulation(
            SimulationConfig(simulation_speed=args.simulation_speed, elements=elements)
        )
    except PreconditionViolation as err:
        logger.error(f"Invalid orbit: {err}")
        return 1

    geometry = sim.geometry

    # -------------------------------------------------------------------------
    # Print configuration summary
    # -------------------------------------------------------------------------
    print("=" * 60)
    print("GroundTrack - Orbit and Ground-Track Simulator")
    print("=" * 60)
    print(f"\nElements: {elements!r}")
    print(f"Semi-major axis: {geometry.semi_major_axis:.4f} R")
    print(f"Semi-minor axis: {geometry.semi_minor_axis:.4f} R")
    print(f"Periapsis / apoapsis: {geometry.periapsis_radius:.4f} R / {geometry.apoapsis_radius:.4f} R")
    print(f"Orbital Period: {geometry.period / 60:.1f} min")
    print(f"Simulation speed: {args.simulation_speed:.0f}x")

    # -------------------------------------------------------------------------
    # Run simulation
    # -------------------------------------------------------------------------
    print(f"\n{'=' * 60}")
    print(f"Running {args.duration:.0f} s of wall-clock time...")
    print(f"{'=' * 60}")

    frame = sim.current_frame()
    elapsed = 0.0
    report_interval = max(args.timestep, args.duration / 10)
    next_report = report_interval

    while elapsed < args.duration:
        frame = sim.step(args.timestep)
        elapsed += args.timestep

        if elapsed >= next_report:
            lon, lat = frame.ground_track[0]
            print(
                f"  t={frame.time / 60:8.1f} min  r={frame.position.radius:.4f} R  "
                f"lat={lat:+6.1f}°  lon={lon:+7.1f}°"
            )
            next_report += report_interval

    # Final summary
    print(f"\n{'=' * 60}")
    print("Simulation Complete!")
    print(f"{'=' * 60}")
    print(f"Final simulation time: {frame.time:.0f} seconds")
    print(f"Steps executed: {frame.step_count}")
    print(f"Ground track samples: {len(frame.ground_track)}")
    if frame.near_repeating:
        print("Ground track is near-repeating (geosynchronous): drawn as a fixed point")

    if args.track:
        print("\nGround track (most recent first):")
        for lon, lat in frame.ground_track:
            print(f"  {lon:+8.3f} {lat:+7.3f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
