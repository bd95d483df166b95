"""Core value types for the graph model.

INVARIANT: An EdgeKey is always canonical (``low <= high``), so ``(u, v)``
and ``(v, u)`` hash and compare equal everywhere an edge is looked up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

VertexId: TypeAlias = int


@dataclass(frozen=True)
class Point:
    """A 2D position owned by the editing layer."""

    x: float
    y: float


@dataclass(frozen=True, order=True)
class EdgeKey:
    """Canonical unordered vertex pair used for set membership."""

    low: VertexId
    high: VertexId

    def __post_init__(self) -> None:
        if self.low > self.high:
            msg = f"EdgeKey endpoints out of order: {self.low} > {self.high}"
            raise ValueError(msg)

    @classmethod
    def of(cls, a: VertexId, b: VertexId) -> EdgeKey:
        """Build the canonical key for the unordered pair ``{a, b}``."""
        return cls(a, b) if a <= b else cls(b, a)

    @classmethod
    def parse(cls, text: str) -> EdgeKey:
        """Parse ``"a-b"`` into a canonical key.

        Raises:
            ValueError: If *text* is not two non-negative integers joined by ``-``.
        """
        left, sep, right = text.strip().partition("-")
        if not sep or not left.strip().isdigit() or not right.strip().isdigit():
            msg = f"Expected an edge written as A-B, got {text!r}"
            raise ValueError(msg)
        return cls.of(int(left), int(right))

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id == self.low or vertex_id == self.high

    def __str__(self) -> str:
        return f"{self.low}-{self.high}"

    def other(self, vertex_id: VertexId) -> VertexId:
        """Return the endpoint opposite *vertex_id*."""
        return self.high if vertex_id == self.low else self.low


@dataclass(frozen=True)
class Vertex:
    """A vertex record.

    ``label`` is the vertex count at creation time and is never renumbered
    when other vertices are deleted.
    """

    id: VertexId
    label: int
    position: Point


@dataclass(frozen=True)
class Edge:
    """An undirected edge, endpoints kept in insertion order."""

    a: VertexId
    b: VertexId

    @property
    def key(self) -> EdgeKey:
        return EdgeKey.of(self.a, self.b)
