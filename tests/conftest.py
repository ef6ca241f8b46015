#!/usr/bin/env python3
"""
Pytest Configuration and Shared Fixtures

Provides common fixtures and markers for testing the orbit propagation
core, the catalog models and the command-line runner.
"""

import math
import sys
from pathlib import Path

import pytest

# Add parent directory for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# PYTEST MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# ORBIT FIXTURES
# =============================================================================

@pytest.fixture
def earth():
    """Earth as the reference body."""
    from groundtrack import EARTH

    return EARTH


@pytest.fixture
def default_elements():
    """Elements of the default orbit view (e = 0.3, 480 km perigee)."""
    from groundtrack import OrbitalElements

    return OrbitalElements(
        eccentricity=0.3,
        perigee_altitude=480.0,
        raan=65.0,
        inclination=46.0,
        argument_of_perigee=270.0,
        mean_anomaly=0.0,
    )


@pytest.fixture
def default_geometry(default_elements, earth):
    """Geometry derived from the default elements."""
    from groundtrack import derive_geometry

    return derive_geometry(default_elements, earth)


@pytest.fixture
def propagator(earth):
    """Propagator with the default configuration."""
    from groundtrack import OrbitPropagator

    return OrbitPropagator(body=earth)


@pytest.fixture
def geostationary_elements(earth):
    """Circular equatorial orbit whose period matches Earth's rotation."""
    from groundtrack import OrbitalElements

    radius = (earth.mu / earth.angular_velocity ** 2) ** (1 / 3)
    return OrbitalElements(
        eccentricity=0.0,
        perigee_altitude=radius - earth.radius,
        raan=0.0,
        inclination=0.0,
        argument_of_perigee=0.0,
        mean_anomaly=0.0,
    )


@pytest.fixture
def circular_leo_elements():
    """Circular 550 km orbit inclined 46 degrees."""
    from groundtrack import OrbitalElements

    return OrbitalElements(
        eccentricity=0.0,
        perigee_altitude=550.0,
        raan=30.0,
        inclination=46.0,
        argument_of_perigee=0.0,
        mean_anomaly=0.0,
    )


# =============================================================================
# CATALOG FIXTURES
# =============================================================================

@pytest.fixture
def catalog_rows():
    """Ground-track catalog rows as parsed from the data file."""
    return [
        ["25544", "ISS (ZARYA)", 120.0, 0.0005, 210.0, 51.64, 80.0, 415.0, 1.2],
        ["43013", "NOAA 20", 10.0, 0.0001, 100.0, 98.7, 90.0, 825.0, 0.4],
        ["40294", "MOLNIYA 2-10", 300.0, 0.72, 60.0, 63.4, 270.0, 600.0, 2.5],
    ]


@pytest.fixture
def scatter_rows():
    """Scatter rows: utility, owner, altitude class and position (km)."""
    return [
        ["PAY", "US", "LEO", 7000.0, 0.0, 0.0],
        ["DEB", "US", "LEO", 0.0, 7100.0, 0.0],
        ["R/B", "CIS", "MEO", 0.0, 0.0, 26000.0],
        ["PAY", "CIS", "HEO/GEO", 42164.0, 0.0, 0.0],
        ["UNK", "PRC", "LEO", 6900.0, 100.0, 0.0],
        ["DEB", "US", "LEO", 6800.0, 0.0, 1200.0],
        ["PAY", "FR", "LEO", 0.0, -6900.0, 0.0],
        ["PAY", "JPN", "MEO", 0.0, 20000.0, 0.0],
        ["DEB", "PRC", "LEO", -7000.0, 0.0, 0.0],
    ]
