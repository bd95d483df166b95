"""Workspace: single-writer holder of a graph and its current analysis.

The Workspace is the single dependency injected into every service. It
owns one :class:`GraphStore` and the :class:`AnalysisResult` last published
for it:

- **Mutation**: :meth:`mutate` yields the store under the lock and clears
  the current result on exit (success or failure), so a stale result is
  never shown against a changed graph.
- **Analysis**: services take a :meth:`snapshot`, compute a new result
  outside the store, and :meth:`publish` it. The lock is re-entrant so a
  service can hold it across snapshot, compute and publish.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

from cutgraph.analysis.result import AnalysisResult
from cutgraph.infrastructure.graph.store import (
    DEFAULT_EDGE_PICK_RADIUS,
    DEFAULT_VERTEX_PICK_RADIUS,
    GraphStore,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cutgraph.config.settings import CutgraphSettings
    from cutgraph.domain.types import Edge, Vertex

logger = logging.getLogger(__name__)


class Workspace:
    """One graph instance plus its current analysis result."""

    def __init__(
        self,
        *,
        vertex_pick_radius: float = DEFAULT_VERTEX_PICK_RADIUS,
        edge_pick_radius: float = DEFAULT_EDGE_PICK_RADIUS,
        palette: tuple[str, ...] | None = None,
    ) -> None:
        self._store = GraphStore(
            vertex_pick_radius=vertex_pick_radius,
            edge_pick_radius=edge_pick_radius,
        )
        self._result = AnalysisResult.empty()
        self._lock = threading.RLock()
        self.palette = palette

    @classmethod
    def from_settings(cls, settings: CutgraphSettings) -> Workspace:
        return cls(
            vertex_pick_radius=settings.picking.vertex_radius,
            edge_pick_radius=settings.picking.edge_radius,
            palette=tuple(settings.components.palette),
        )

    # ------------------------------------------------------------------
    # Locking
    # ------------------------------------------------------------------

    @contextmanager
    def locked(self) -> Iterator[GraphStore]:
        """Hold the writer lock without invalidating the result."""
        with self._lock:
            yield self._store

    @contextmanager
    def mutate(self) -> Iterator[GraphStore]:
        """Yield the store for mutation; the current result is cleared on exit."""
        with self._lock:
            try:
                yield self._store
            finally:
                self._result = AnalysisResult.empty()

    # ------------------------------------------------------------------
    # Snapshot / publish
    # ------------------------------------------------------------------

    def snapshot(self) -> tuple[tuple[Vertex, ...], tuple[Edge, ...]]:
        """Consistent copy of the vertex and edge sequences."""
        with self._lock:
            return self._store.vertices, self._store.edges

    def publish(self, result: AnalysisResult) -> None:
        """Replace the current result."""
        with self._lock:
            self._result = result
        logger.debug("Published %s analysis result", result.kind)

    @property
    def result(self) -> AnalysisResult:
        return self._result

    def invalidate(self) -> None:
        """Drop the current result after an edit made outside :meth:`mutate`."""
        with self._lock:
            self._result = AnalysisResult.empty()

    def reset(self) -> None:
        """Clear the analysis result, leaving the graph alone."""
        self.publish(AnalysisResult.empty())

    def clear(self) -> None:
        """Empty the graph, the result, and the id allocator."""
        with self.mutate() as store:
            store.clear()

    # ------------------------------------------------------------------
    # Counters for status displays
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return self._store.vertex_count

    @property
    def edge_count(self) -> int:
        return self._store.edge_count

    @property
    def articulation_count(self) -> int:
        return self._result.articulation_count

    @property
    def bridge_count(self) -> int:
        return self._result.bridge_count

    @property
    def component_color_count(self) -> int:
        return self._result.component_color_count
