"""Shared pytest fixtures for trajectory solver tests."""

import pytest

from config import DEFAULT_CONFIG, default_target
from models import LaunchParameters
from solver import TrajectorySolver


# =============================================================================
# Solver Fixtures
# =============================================================================


@pytest.fixture
def solver() -> TrajectorySolver:
    """Solver with the default release point and gravity."""
    return TrajectorySolver(DEFAULT_CONFIG)


@pytest.fixture
def fastball() -> LaunchParameters:
    """95 mph with 15 in vertical and 8 in horizontal break."""
    return LaunchParameters(95.0, 15.0, 8.0)


@pytest.fixture
def straight_pitch() -> LaunchParameters:
    """95 mph with no break at all."""
    return LaunchParameters(95.0, 0.0, 0.0)


@pytest.fixture
def zone_center():
    """Strike-zone centre over the back of home plate."""
    return default_target()
