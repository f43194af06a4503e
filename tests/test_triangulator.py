"""Tests for the triangle fan."""

import pytest

from errors import TriangulationError
from geometry import Point
from triangulator import triangulate_fan


def test_three_vertices_one_triangle():
    a, b, c = Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)
    assert triangulate_fan([a, b, c]) == [(a, b, c)]


@pytest.mark.parametrize("count", [4, 5, 51])
def test_fan_has_n_minus_two_triangles(count):
    vertices = [Point(float(i), float(i * i)) for i in range(count)]
    triangles = triangulate_fan(vertices)
    assert len(triangles) == count - 2
    assert all(triangle[0] == vertices[0] for triangle in triangles)
    assert triangles[-1][1:] == (vertices[-2], vertices[-1])


@pytest.mark.parametrize("count", [0, 1, 2])
def test_too_few_vertices(count):
    with pytest.raises(TriangulationError):
        triangulate_fan([Point(0.0, 0.0)] * count)
