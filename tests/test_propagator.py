#!/usr/bin/env python3
"""
Tests for the orbit propagator: positions, ground tracks and state threading.
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from groundtrack import (
    INITIAL_BODY_ROTATION,
    OrbitalElements,
    OrbitPropagator,
    PreconditionViolation,
    PropagationState,
    PropagatorConfig,
    derive_geometry,
)


class TestPositionAt:
    """Tests for the instantaneous satellite position."""

    def test_starts_at_periapsis(self, propagator, default_geometry, default_elements):
        """Periapsis lies on +z of the perifocal frame."""
        pos = propagator.position_at(0.0, default_geometry, default_elements)
        x, z = pos.perifocal
        assert x == pytest.approx(0.0, abs=1e-12)
        assert z == pytest.approx(default_geometry.periapsis_radius)
        assert pos.radius == pytest.approx(default_geometry.periapsis_radius)

    def test_apoapsis_radius(self, propagator, default_geometry, default_elements):
        pos = propagator.position_at(math.pi, default_geometry, default_elements)
        a, e = default_geometry.semi_major_axis, default_elements.eccentricity
        assert pos.radius == pytest.approx(a * (1 + e))
        assert pos.perifocal[1] == pytest.approx(-a * (1 + e))

    def test_periodicity(self, propagator, default_geometry, default_elements):
        for M in np.linspace(0.0, 2 * math.pi, 17):
            first = propagator.position_at(M, default_geometry, default_elements)
            later = propagator.position_at(M + 2 * math.pi, default_geometry, default_elements)
            assert later.perifocal[0] == pytest.approx(first.perifocal[0], abs=1e-9)
            assert later.perifocal[1] == pytest.approx(first.perifocal[1], abs=1e-9)

    def test_positions_trace_closed_ellipse(self, propagator, default_geometry, default_elements):
        """Perifocal points lie on the ellipse centred at z = -c."""
        a = default_geometry.semi_major_axis
        b = default_geometry.semi_minor_axis
        c = default_geometry.focal_offset

        radii = []
        for M in np.linspace(0.0, 2 * math.pi, 73):
            pos = propagator.position_at(M, default_geometry, default_elements)
            x, z = pos.perifocal
            assert x ** 2 / b ** 2 + (z + c) ** 2 / a ** 2 == pytest.approx(1.0, abs=1e-9)
            radii.append(pos.radius)

        assert min(radii) == pytest.approx(a * (1 - 0.3))
        assert max(radii) == pytest.approx(a * (1 + 0.3))

    def test_circular_orbit_has_constant_radius(self, propagator, circular_leo_elements):
        geometry = derive_geometry(circular_leo_elements)
        for M in np.linspace(0.0, 2 * math.pi, 25, endpoint=False):
            pos = propagator.position_at(M, geometry, circular_leo_elements)
            assert pos.radius == geometry.semi_major_axis
            assert pos.eccentric_anomaly == M

    def test_inertial_position_is_rotated_perifocal(self, propagator, default_geometry, default_elements):
        pos = propagator.position_at(1.3, default_geometry, default_elements)
        x, z = pos.perifocal
        expected = default_geometry.orientation @ np.array([x, 0.0, z])
        np.testing.assert_allclose(pos.inertial, expected)
        assert np.linalg.norm(pos.inertial) == pytest.approx(pos.radius)

    def test_spin_angle(self, propagator, default_geometry, default_elements):
        pos = propagator.position_at(2.0, default_geometry, default_elements)
        assert pos.spin_angle == pytest.approx(pos.eccentric_anomaly - math.pi / 2)


class TestSampleCount:
    """Tests for the ground-track sample budget."""

    def test_short_period_covers_two_orbits(self, propagator, default_geometry):
        expected = math.ceil(2 * default_geometry.period / 300)
        assert expected < 200
        assert propagator.sample_count(default_geometry) == expected

    def test_long_period_is_capped(self, propagator):
        elements = OrbitalElements(eccentricity=0.9, perigee_altitude=35786.0)
        geometry = derive_geometry(elements)
        assert 2 * geometry.period / 300 > 200
        assert propagator.sample_count(geometry) == 200
        assert len(propagator.ground_track(0.0, geometry, elements)) == 200

    def test_spacing_override(self, propagator, default_geometry):
        expected = min(200, math.ceil(2 * default_geometry.period / 600))
        assert propagator.sample_count(default_geometry, sample_spacing=600.0) == expected

    def test_track_length_matches_count(self, propagator, default_geometry, default_elements):
        track = propagator.ground_track(0.0, default_geometry, default_elements)
        assert len(track) == propagator.sample_count(default_geometry)
        assert track.sample_spacing == -300.0

    def test_zero_spacing_rejected(self, propagator, default_geometry):
        with pytest.raises(PreconditionViolation):
            propagator.sample_count(default_geometry, sample_spacing=0.0)


class TestGroundTrack:
    """Tests for ground-track sampling and projection."""

    def test_first_sample_is_current_position(self, propagator, default_geometry, default_elements):
        M, rotation = 0.8, 0.25
        track = propagator.ground_track(M, default_geometry, default_elements, body_rotation=rotation)
        pos = propagator.position_at(M, default_geometry, default_elements)
        expected = propagator.projector.project(pos.inertial, rotation)
        assert track[0] == pytest.approx(expected)

    def test_samples_walk_back_in_time(self, propagator, default_geometry, default_elements):
        """Sample i sits at mean anomaly M - n * 300 * i, corrected for body rotation."""
        M, i = 2.0, 5
        track = propagator.ground_track(M, default_geometry, default_elements)
        offset = -300.0 * i
        pos = propagator.position_at(
            M + default_geometry.mean_motion * offset, default_geometry, default_elements
        )
        expected = propagator.projector.project(
            pos.inertial, INITIAL_BODY_ROTATION, propagator.body.angular_velocity * offset
        )
        assert track[i] == pytest.approx(expected)

    def test_geostationary_track_is_near_repeating(self, propagator, geostationary_elements):
        geometry = derive_geometry(geostationary_elements)
        track = propagator.ground_track(0.0, geometry, geostationary_elements)

        assert len(track) == 200
        assert track.closure_angle < 0.05
        assert propagator.is_near_repeating(track)

        lons, lats = track.as_array().T
        assert np.ptp(lons) < 1e-6
        np.testing.assert_allclose(lats, 0.0, atol=1e-9)

    def test_elliptical_track_is_not_near_repeating(self, propagator, default_geometry, default_elements):
        track = propagator.ground_track(0.0, default_geometry, default_elements)
        assert track.closure_angle > 0.05
        assert not propagator.is_near_repeating(track)

    def test_latitude_bounded_by_inclination(self, propagator, circular_leo_elements):
        """A circular orbit reaches a latitude close to its inclination."""
        geometry = derive_geometry(circular_leo_elements)
        track = propagator.ground_track(0.0, geometry, circular_leo_elements, sample_spacing=-30.0)
        lats = track.as_array()[:, 1]
        assert np.max(np.abs(lats)) == pytest.approx(46.0, abs=0.5)

    def test_ranges_for_random_orbits(self, propagator):
        rng = np.random.default_rng(42)
        for _ in range(25):
            elements = OrbitalElements(
                eccentricity=float(rng.uniform(0.0, 0.95)),
                perigee_altitude=float(rng.uniform(200.0, 40000.0)),
                raan=float(rng.uniform(0.0, 360.0)),
                inclination=float(rng.uniform(0.0, 180.0)),
                argument_of_perigee=float(rng.uniform(0.0, 360.0)),
                mean_anomaly=float(rng.uniform(0.0, 2 * math.pi)),
            )
            geometry = derive_geometry(elements)
            track = propagator.ground_track(
                elements.mean_anomaly,
                geometry,
                elements,
                body_rotation=float(rng.uniform(-math.pi, math.pi)),
            )
            points = track.as_array()
            assert np.all(np.isfinite(points))
            assert np.all((points[:, 0] >= -180.0) & (points[:, 0] < 180.0))
            assert np.all((points[:, 1] >= -90.0) & (points[:, 1] <= 90.0))

    def test_forward_spacing(self, propagator, default_geometry, default_elements):
        """Positive spacing samples the future track."""
        track = propagator.ground_track(
            0.0, default_geometry, default_elements, sample_spacing=300.0, sample_count=10
        )
        pos = propagator.position_at(
            default_geometry.mean_motion * 900.0, default_geometry, default_elements
        )
        expected = propagator.projector.project(
            pos.inertial, INITIAL_BODY_ROTATION, propagator.body.angular_velocity * 900.0
        )
        assert len(track) == 10
        assert track[3] == pytest.approx(expected)


class TestAdvance:
    """Tests for state threading between frames."""

    def test_advance_is_pure(self, propagator, default_geometry, earth):
        state = PropagationState(mean_anomaly=1.0)
        new = propagator.advance(state, default_geometry, 120.0)

        assert state.mean_anomaly == 1.0
        assert state.elapsed_time == 0.0
        assert new.mean_anomaly == pytest.approx(1.0 + default_geometry.mean_motion * 120.0)
        assert new.body_rotation == pytest.approx(INITIAL_BODY_ROTATION + earth.angular_velocity * 120.0)
        assert new.elapsed_time == 120.0

    def test_mean_anomaly_accumulates_monotonically(self, propagator, default_geometry):
        state = PropagationState()
        previous = state.mean_anomaly
        for _ in range(50):
            state = propagator.advance(state, default_geometry, 500.0)
            assert state.mean_anomaly > previous
            previous = state.mean_anomaly
        assert state.mean_anomaly > 2 * math.pi

    def test_one_period_returns_to_start(self, propagator, default_geometry, default_elements):
        state = propagator.advance(PropagationState(mean_anomaly=0.4), default_geometry, default_geometry.period)
        start = propagator.position_at(0.4, default_geometry, default_elements)
        end = propagator.position_at(state.mean_anomaly, default_geometry, default_elements)
        np.testing.assert_allclose(end.inertial, start.inertial, atol=1e-9)


class TestPropagatorConfig:
    """Tests for configuration validation."""

    @pytest.mark.parametrize("kwargs", [
        {"kepler_iterations": 0},
        {"kepler_tolerance": -1e-9},
        {"sample_spacing": 0.0},
        {"sample_spacing": math.inf},
        {"max_samples": 0},
        {"track_periods": 0.0},
        {"near_repeat_threshold": 0.0},
    ])
    def test_rejects_invalid_config(self, kwargs):
        with pytest.raises(PreconditionViolation):
            PropagatorConfig(**kwargs)

    def test_custom_cap(self, default_geometry):
        propagator = OrbitPropagator(PropagatorConfig(max_samples=10))
        assert propagator.sample_count(default_geometry) == 10

    def test_custom_iterations_reach_solver(self):
        propagator = OrbitPropagator(PropagatorConfig(kepler_iterations=5, kepler_tolerance=1e-12))
        assert propagator.solver.iterations == 5
        assert propagator.solver.tolerance == 1e-12
