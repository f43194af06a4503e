from __future__ import annotations
from typing import Sequence

from errors import TriangulationError
from geometry import Point

Triangle = tuple[Point, Point, Point]


def triangulate_fan(vertices: Sequence[Point]) -> list[Triangle]:
    # Anchored at the first vertex, so only fills that are star-shaped from it come out right
    if len(vertices) < 3:
        raise TriangulationError(f"Expected at least 3 vertices to fill but were {len(vertices)}",
                                 str(len(vertices)))

    anchor = vertices[0]
    return [(anchor, vertices[i], vertices[i + 1]) for i in range(1, len(vertices) - 1)]
