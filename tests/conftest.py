"""
Pytest fixtures shared by the cheapruler tests.

Provides:
- Rulers at a fixed reference latitude in kilometers, miles and meters
- A straight eastward test line along the equator
"""

import pytest

from cheapruler import CheapRuler, DistanceUnit

# Latitude of the sample points used throughout the tests
REFERENCE_LATITUDE = 32.8351


@pytest.fixture
def ruler():
    """Kilometer ruler at the reference latitude."""
    return CheapRuler(REFERENCE_LATITUDE, DistanceUnit.KILOMETERS)


@pytest.fixture
def ruler_miles():
    """Mile ruler at the reference latitude."""
    return CheapRuler(REFERENCE_LATITUDE, DistanceUnit.MILES)


@pytest.fixture
def equator_ruler():
    """Kilometer ruler on the equator."""
    return CheapRuler(0.0)


@pytest.fixture
def straight_line():
    """Four vertices 0.1 degree apart heading east along the equator."""
    return [(0.0, 0.0), (0.1, 0.0), (0.2, 0.0), (0.3, 0.0)]
