"""
Shared fixtures for the navigation core tests.
"""

import pytest

from common.types import (
    Feature,
    FeatureCollection,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
)


@pytest.fixture
def new_york():
    return Point((-74.0060, 40.7128))


@pytest.fixture
def london():
    return Point((-0.1278, 51.5074))


@pytest.fixture
def square():
    """2x2 degree square with its lower-left corner at the origin."""
    return Polygon([[(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)]])


@pytest.fixture
def square_with_hole():
    """4x4 square with a 2x2 hole in the middle."""
    return Polygon([
        [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)],
        [(1, 1), (3, 1), (3, 3), (1, 3), (1, 1)],
    ])


@pytest.fixture
def u_shape():
    """Concave U: a 3x3 square with a notch cut down from the top middle."""
    return Polygon([[
        (0, 0), (3, 0), (3, 3), (2, 3), (2, 1),
        (1, 1), (1, 3), (0, 3), (0, 0),
    ]])


@pytest.fixture
def equator_line():
    return LineString([(0, 0), (90, 0)])


@pytest.fixture
def mixed_collection(square):
    return FeatureCollection([
        Feature(Point((10, 10))),
        Feature(LineString([(0, 0), (0, 1)])),
        Feature(square, {"name": "square"}),
    ])


@pytest.fixture
def two_squares(square):
    far = Polygon([[(10, 0), (11, 0), (11, 1), (10, 1), (10, 0)]])
    return MultiPolygon([square.coordinates, far.coordinates])
