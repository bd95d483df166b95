"""BaseService: foundation for all cutgraph services.

Every service receives a :class:`Workspace` at construction time. The
Workspace owns the graph store and the current analysis result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cutgraph.infrastructure.graph.adjacency import AdjacencyView, build_adjacency

if TYPE_CHECKING:
    from cutgraph.infrastructure.workspace import Workspace


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class AnalysisService(BaseService):
            def find_bridges(self) -> ServiceResult:
                with self._workspace.locked():
                    adj = self._adjacency()
                    ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _adjacency(self) -> AdjacencyView:
        """Fresh adjacency view from a consistent snapshot."""
        vertices, edges = self._workspace.snapshot()
        return build_adjacency(vertices, edges)
