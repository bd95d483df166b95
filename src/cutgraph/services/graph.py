"""GraphService: graph editing entry points and status counters.

Invalid edits are silent no-ops: the result is still ``ok`` with
``changed: False`` and a warning, so editors can ignore them while
scripts can still notice. An edit that changes the graph clears the
current analysis result; a no-op leaves it alone.
"""

from __future__ import annotations

from typing import Any

from cutgraph.domain.fixtures import FIXTURES
from cutgraph.domain.types import Point, VertexId
from cutgraph.services.base import BaseService
from cutgraph.services.result import ServiceResult
from cutgraph.services.telemetry import trace_span, traced


class GraphService(BaseService):
    """Handles vertex and edge edits, fixtures, and counters."""

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    @traced
    def add_vertex(self, x: float, y: float) -> ServiceResult:
        """Insert a vertex at ``(x, y)``."""
        with self._workspace.mutate() as store:
            vertex_id = store.insert_vertex(Point(x, y))
            vertex = store.get_vertex(vertex_id)
            assert vertex is not None

        return ServiceResult(
            ok=True,
            op="add_vertex",
            data={"id": vertex.id, "label": vertex.label, "x": x, "y": y},
        )

    @traced
    def remove_vertex(self, vertex_id: VertexId) -> ServiceResult:
        """Remove a vertex and its incident edges."""
        with self._workspace.locked() as store:
            before = store.edge_count
            changed = store.remove_vertex(vertex_id)
            removed = before - store.edge_count
            if changed:
                self._workspace.invalidate()

        warnings = [] if changed else [f"Vertex {vertex_id} not found; nothing removed"]
        return ServiceResult(
            ok=True,
            op="remove_vertex",
            data={"id": vertex_id, "changed": changed, "edges_removed": removed},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    @traced
    def add_edge(self, a: VertexId, b: VertexId) -> ServiceResult:
        """Connect two vertices. Self-loops, duplicates and dangling ends are ignored."""
        warnings: list[str] = []
        with self._workspace.locked() as store:
            changed = store.insert_edge(a, b)
            if changed:
                self._workspace.invalidate()
            else:
                warnings.append(f"Edge {a}-{b} not added: {self._edge_rejection(a, b)}")

        return ServiceResult(
            ok=True,
            op="add_edge",
            data={"key": [min(a, b), max(a, b)], "changed": changed},
            warnings=warnings,
        )

    def _edge_rejection(self, a: VertexId, b: VertexId) -> str:
        with self._workspace.locked() as store:
            if a == b:
                return "self-loop"
            missing = [v for v in (a, b) if not store.has_vertex(v)]
            if missing:
                return f"missing vertex {missing[0]}"
            return "already connected"

    @traced
    def remove_edge(self, a: VertexId, b: VertexId) -> ServiceResult:
        """Remove the edge between two vertices."""
        with self._workspace.locked() as store:
            changed = store.remove_edge(a, b)
            if changed:
                self._workspace.invalidate()

        warnings = [] if changed else [f"Edge {a}-{b} not found; nothing removed"]
        return ServiceResult(
            ok=True,
            op="remove_edge",
            data={"key": [min(a, b), max(a, b)], "changed": changed},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Point-based editing
    # ------------------------------------------------------------------

    @traced
    def pick(self, x: float, y: float) -> ServiceResult:
        """Report the vertex or edge under ``(x, y)``; vertices take priority."""
        point = Point(x, y)
        data: dict[str, Any] = {"x": x, "y": y, "vertex": None, "edge": None}
        with self._workspace.locked() as store:
            vertex = store.vertex_at(point)
            if vertex is not None:
                data["vertex"] = vertex.id
            else:
                edge = store.edge_at(point)
                if edge is not None:
                    data["edge"] = [edge.key.low, edge.key.high]
        return ServiceResult(ok=True, op="pick", data=data)

    @traced
    def remove_at(self, x: float, y: float) -> ServiceResult:
        """Delete whatever sits under ``(x, y)``: a vertex first, else an edge."""
        point = Point(x, y)
        data: dict[str, Any] = {"x": x, "y": y, "removed": None}
        with self._workspace.locked() as store:
            vertex = store.vertex_at(point)
            if vertex is not None:
                store.remove_vertex(vertex.id)
                self._workspace.invalidate()
                data.update(removed="vertex", id=vertex.id)
            else:
                key = store.remove_edge_at(point)
                if key is not None:
                    self._workspace.invalidate()
                    data.update(removed="edge", key=[key.low, key.high])

        return ServiceResult(ok=True, op="remove_at", data=data)

    # ------------------------------------------------------------------
    # Whole-graph operations
    # ------------------------------------------------------------------

    @traced
    def load_example(self, name: str) -> ServiceResult:
        """Clear the graph and load a canned fixture by name."""
        fixture = FIXTURES.get(name)
        if fixture is None:
            return ServiceResult.failure(
                "load_example",
                "UNKNOWN_EXAMPLE",
                f"Unknown example '{name}'",
                available=sorted(FIXTURES),
            )

        with trace_span("load_fixture") as span, self._workspace.mutate() as store:
            store.clear()
            for position in fixture.positions:
                store.insert_vertex(position)
            for a, b in fixture.edges:
                store.insert_edge(a, b)
            if span:
                span.annotate("vertices", store.vertex_count)
                span.annotate("edges", store.edge_count)
            counts = {"vertex_count": store.vertex_count, "edge_count": store.edge_count}

        return ServiceResult(ok=True, op="load_example", data={"name": name, **counts})

    @traced
    def list_examples(self) -> ServiceResult:
        """Describe the available fixtures."""
        items = [
            {
                "name": f.name,
                "description": f.description,
                "vertex_count": len(f.positions),
                "edge_count": len(f.edges),
            }
            for f in FIXTURES.values()
        ]
        return ServiceResult(
            ok=True,
            op="list_examples",
            data={"count": len(items), "items": items},
        )

    @traced
    def clear(self) -> ServiceResult:
        """Empty the graph and the analysis result; ids restart from 0."""
        self._workspace.clear()
        return ServiceResult(ok=True, op="clear", data={"vertex_count": 0, "edge_count": 0})

    @traced
    def stats(self) -> ServiceResult:
        """Counters for a status display."""
        ws = self._workspace
        with ws.locked():
            data = {
                "vertex_count": ws.vertex_count,
                "edge_count": ws.edge_count,
                "articulation_count": ws.articulation_count,
                "bridge_count": ws.bridge_count,
                "component_color_count": ws.component_color_count,
                "analysis": ws.result.kind,
            }
        return ServiceResult(ok=True, op="stats", data=data)
