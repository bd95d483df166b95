"""AnalysisService: runs the analysis passes and publishes their results.

Each entry point starts from a cleared result and replaces it atomically
with the new one. ``find_bridges`` deliberately runs the same combined
traversal as ``find_articulation_points``: bridges fall out of the same
low-link computation.
"""

from __future__ import annotations

from cutgraph.analysis.components import DEFAULT_PALETTE, label_components
from cutgraph.analysis.result import AnalysisResult
from cutgraph.analysis.structural import analyze_structure
from cutgraph.services.base import BaseService
from cutgraph.services.result import ServiceResult
from cutgraph.services.telemetry import trace_span, traced


class AnalysisService(BaseService):
    """Handles structural analysis and component colouring."""

    def _run_structural(self, op: str) -> ServiceResult:
        with self._workspace.locked():
            self._workspace.reset()
            with trace_span("build_adjacency") as span:
                adj = self._adjacency()
                if span:
                    span.annotate("vertices", len(adj))
            with trace_span("dfs"):
                result = analyze_structure(adj)
            self._workspace.publish(result)

        return ServiceResult(ok=True, op=op, data=result.to_payload())

    @traced
    def find_articulation_points(self) -> ServiceResult:
        """Find cut vertices (bridges and edge classes come from the same pass)."""
        return self._run_structural("find_articulation_points")

    @traced
    def find_bridges(self) -> ServiceResult:
        """Find bridges via the combined articulation-point traversal."""
        return self._run_structural("find_bridges")

    @traced
    def color_components(self) -> ServiceResult:
        """Label connected components with palette colours."""
        palette = self._workspace.palette or DEFAULT_PALETTE
        warnings: list[str] = []

        with self._workspace.locked():
            self._workspace.reset()
            with trace_span("build_adjacency"):
                adj = self._adjacency()
            with trace_span("flood_fill"):
                result = label_components(adj, palette)
            self._workspace.publish(result)

        if result.component_count > len(palette):
            warnings.append(
                f"{result.component_count} components share {len(palette)} colours; "
                "colours repeat"
            )
        return ServiceResult(
            ok=True,
            op="color_components",
            data=result.to_payload(),
            warnings=warnings,
        )

    @traced
    def reset(self) -> ServiceResult:
        """Clear the analysis result without touching the graph."""
        self._workspace.reset()
        return ServiceResult(ok=True, op="reset", data=AnalysisResult.empty().to_payload())

    @traced
    def current(self) -> ServiceResult:
        """Return the currently published result."""
        return ServiceResult(ok=True, op="current", data=self._workspace.result.to_payload())
