"""Planar distance helpers for pick queries."""

from __future__ import annotations

import math

from cutgraph.domain.types import Point


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p.x - q.x, p.y - q.y)


def distance_to_segment(p: Point, start: Point, end: Point) -> float:
    """Distance from *p* to the closed segment ``start``..``end``.

    The projection is clamped to the segment, so points beyond either end
    measure to the nearest endpoint. A zero-length segment degrades to a
    point distance.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return distance(p, start)

    t = ((p.x - start.x) * dx + (p.y - start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return distance(p, Point(start.x + t * dx, start.y + t * dy))
