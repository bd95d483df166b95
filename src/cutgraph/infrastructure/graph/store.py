"""GraphStore: the source of truth for vertices and edges.

Invalid mutations (self-loops, duplicate pairs, missing endpoints, absent
ids) are silent no-ops: they return ``False`` or ``None`` and leave the
store untouched. Callers re-query counts to detect that nothing happened.

INVARIANT: Vertex ids are allocated monotonically and never reused until
:meth:`GraphStore.clear` resets the allocator.
"""

from __future__ import annotations

import logging

from cutgraph.domain.geometry import distance, distance_to_segment
from cutgraph.domain.types import Edge, EdgeKey, Point, Vertex, VertexId

logger = logging.getLogger(__name__)

DEFAULT_VERTEX_PICK_RADIUS = 20.0
DEFAULT_EDGE_PICK_RADIUS = 10.0


class GraphStore:
    """Mutable undirected simple graph with pick queries.

    Vertices iterate in ascending id order (ids are monotonic, so insertion
    order is id order). Edges iterate in insertion order.
    """

    def __init__(
        self,
        *,
        vertex_pick_radius: float = DEFAULT_VERTEX_PICK_RADIUS,
        edge_pick_radius: float = DEFAULT_EDGE_PICK_RADIUS,
    ) -> None:
        self.vertex_pick_radius = vertex_pick_radius
        self.edge_pick_radius = edge_pick_radius
        self._vertices: dict[VertexId, Vertex] = {}
        self._edges: dict[EdgeKey, Edge] = {}
        self._next_id: VertexId = 0

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._vertices.values())

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges.values())

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._vertices

    def has_edge(self, a: VertexId, b: VertexId) -> bool:
        return EdgeKey.of(a, b) in self._edges

    def get_vertex(self, vertex_id: VertexId) -> Vertex | None:
        return self._vertices.get(vertex_id)

    def neighbors(self, vertex_id: VertexId) -> list[VertexId]:
        """Neighbours of *vertex_id* in edge insertion order."""
        return [e.key.other(vertex_id) for e in self._edges.values() if vertex_id in e.key]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert_vertex(self, position: Point) -> VertexId:
        """Add a vertex at *position* and return its fresh id."""
        vertex_id = self._next_id
        self._next_id += 1
        self._vertices[vertex_id] = Vertex(
            id=vertex_id,
            label=len(self._vertices),
            position=position,
        )
        return vertex_id

    def remove_vertex(self, vertex_id: VertexId) -> bool:
        """Remove a vertex and every incident edge.

        Returns False (no-op) when the id is absent.
        """
        if vertex_id not in self._vertices:
            logger.debug("Ignored vertex removal: %s not present", vertex_id)
            return False
        del self._vertices[vertex_id]
        incident = [key for key in self._edges if vertex_id in key]
        for key in incident:
            del self._edges[key]
        return True

    def insert_edge(self, a: VertexId, b: VertexId) -> bool:
        """Connect *a* and *b*.

        Returns False (no-op) for a self-loop, an existing pair, or a
        missing endpoint.
        """
        if a == b:
            logger.debug("Ignored edge insert: self-loop on %s", a)
            return False
        if a not in self._vertices or b not in self._vertices:
            logger.debug("Ignored edge insert: missing endpoint in %s-%s", a, b)
            return False
        key = EdgeKey.of(a, b)
        if key in self._edges:
            logger.debug("Ignored edge insert: %s already present", key)
            return False
        self._edges[key] = Edge(a, b)
        return True

    def remove_edge(self, a: VertexId, b: VertexId) -> bool:
        """Remove the edge between *a* and *b* if present."""
        key = EdgeKey.of(a, b)
        if key not in self._edges:
            logger.debug("Ignored edge removal: %s not present", key)
            return False
        del self._edges[key]
        return True

    def remove_edge_at(self, point: Point) -> EdgeKey | None:
        """Remove the edge under *point*, returning its key."""
        edge = self.edge_at(point)
        if edge is None:
            return None
        del self._edges[edge.key]
        return edge.key

    def clear(self) -> None:
        """Drop every vertex and edge and reset the id allocator."""
        self._vertices.clear()
        self._edges.clear()
        self._next_id = 0

    # ------------------------------------------------------------------
    # Pick queries (first match wins)
    # ------------------------------------------------------------------

    def vertex_at(self, point: Point) -> Vertex | None:
        """First vertex, by ascending id, strictly within the pick radius."""
        for vertex in self._vertices.values():
            if distance(vertex.position, point) < self.vertex_pick_radius:
                return vertex
        return None

    def edge_at(self, point: Point) -> Edge | None:
        """First edge, by insertion order, strictly within the edge pick radius."""
        for edge in self._edges.values():
            start = self._vertices[edge.a].position
            end = self._vertices[edge.b].position
            if distance_to_segment(point, start, end) < self.edge_pick_radius:
                return edge
        return None
