"""Shared fixtures for the geometry tests."""
import math

import pytest

from geom import Polygon
from vector import Vector2


@pytest.fixture
def unit_square():
    """Counter-clockwise square spanning [-1, 1] on both axes."""
    return Polygon(
        [Vector2(-1.0, -1.0), Vector2(1.0, -1.0), Vector2(1.0, 1.0), Vector2(-1.0, 1.0)]
    )


@pytest.fixture
def pentagram():
    """Five-point star whose centre is wound twice."""
    return Polygon(
        [Vector2.polar_to_cartesian(math.pi / 2 + k * 4 * math.pi / 5, 1.0) for k in range(5)]
    )
