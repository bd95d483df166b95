"""Canned example graphs used as deterministic demo and test seeds.

Each fixture is loaded into an empty store in order, so vertex ids and
labels come out as ``0..n-1`` and edges keep the listed order.
"""

from __future__ import annotations

from dataclasses import dataclass

from cutgraph.domain.types import Point


@dataclass(frozen=True)
class GraphFixture:
    """Vertex positions plus an edge list over their indices."""

    name: str
    description: str
    positions: tuple[Point, ...]
    edges: tuple[tuple[int, int], ...]


SIMPLE = GraphFixture(
    name="simple",
    description="4-cycle hanging off a pendant vertex (one cut vertex, one bridge)",
    positions=(
        Point(200, 150),
        Point(350, 150),
        Point(500, 150),
        Point(350, 300),
        Point(500, 300),
    ),
    edges=((0, 1), (1, 2), (1, 3), (2, 4), (3, 4)),
)

COMPLEX = GraphFixture(
    name="complex",
    description="Two triangles joined by a bridge, plus a pendant vertex",
    positions=(
        Point(200, 200),
        Point(350, 150),
        Point(500, 200),
        Point(350, 300),
        Point(650, 200),
        Point(800, 150),
        Point(800, 300),
    ),
    edges=((0, 1), (1, 2), (1, 3), (2, 3), (2, 4), (4, 5), (4, 6), (5, 6)),
)

FIXTURES: dict[str, GraphFixture] = {f.name: f for f in (SIMPLE, COMPLEX)}
