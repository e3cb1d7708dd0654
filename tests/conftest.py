import pytest


@pytest.fixture
def focal_length():
    """500 mm primary, the reference telescope used throughout."""
    return 500.0


@pytest.fixture
def radius():
    """100 mm semi-aperture (f/2.5)."""
    return 100.0


@pytest.fixture
def source_distance():
    """On-axis source 100 m away."""
    return 100000.0
