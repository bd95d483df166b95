"""CheckService: integrity checks for the analysis engine.

Runs a fresh structural pass and a component labeling without publishing
either, then reports two categories of issue:

- **invariants**: properties every correct traversal must satisfy
  (bridges are tree edges, tree and back edges are disjoint, low-link
  never exceeds discovery time, every edge classified, no stale ids).
- **cross_check**: disagreement with the NetworkX implementations of
  articulation points, bridges, and connected components.

A healthy engine reports zero issues. Issues are defects in cutgraph, not
problems with the user's graph.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx

from cutgraph.analysis.components import DEFAULT_PALETTE, label_components
from cutgraph.analysis.structural import analyze_structure
from cutgraph.domain.types import EdgeKey
from cutgraph.infrastructure.graph.adjacency import build_adjacency
from cutgraph.infrastructure.graph.engine import to_networkx
from cutgraph.services.base import BaseService
from cutgraph.services.result import ServiceResult
from cutgraph.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from cutgraph.analysis.result import AnalysisResult
    from cutgraph.domain.types import Edge, Vertex

CAT_INVARIANT = "invariants"
CAT_CROSS_CHECK = "cross_check"


def _issue(category: str, code: str, message: str, **detail: Any) -> dict[str, Any]:
    return {"category": category, "code": code, "message": message, "detail": detail}


def check_invariants(
    structural: AnalysisResult,
    vertices: tuple[Vertex, ...],
    edges: tuple[Edge, ...],
) -> list[dict[str, Any]]:
    """Verify the structural-pass invariants against the graph it ran on."""
    issues: list[dict[str, Any]] = []
    all_keys = {e.key for e in edges}
    live_ids = {v.id for v in vertices}

    stray = structural.bridges - structural.tree_edges
    if stray:
        issues.append(
            _issue(
                CAT_INVARIANT,
                "BRIDGE_NOT_TREE",
                "Bridges outside the tree-edge set",
                edges=[str(k) for k in sorted(stray)],
            )
        )

    overlap = structural.tree_edges & structural.back_edges
    if overlap:
        issues.append(
            _issue(
                CAT_INVARIANT,
                "TREE_BACK_OVERLAP",
                "Edges classified as both tree and back edges",
                edges=[str(k) for k in sorted(overlap)],
            )
        )

    classified = structural.tree_edges | structural.back_edges
    unclassified = all_keys - classified
    if unclassified:
        issues.append(
            _issue(
                CAT_INVARIANT,
                "UNCLASSIFIED_EDGE",
                "Edges never reached by the traversal",
                edges=[str(k) for k in sorted(unclassified)],
            )
        )
    unknown = classified - all_keys
    if unknown:
        issues.append(
            _issue(
                CAT_INVARIANT,
                "UNKNOWN_EDGE",
                "Classified edges that are not in the graph",
                edges=[str(k) for k in sorted(unknown)],
            )
        )

    bad_low = sorted(
        v for v, low in structural.low_link.items() if low > structural.discovery.get(v, low)
    )
    if bad_low:
        issues.append(
            _issue(
                CAT_INVARIANT,
                "LOW_ABOVE_DISCOVERY",
                "Low-link value greater than discovery time",
                vertices=bad_low,
            )
        )

    stale = sorted(structural.vertex_ids() - live_ids)
    if stale:
        issues.append(
            _issue(
                CAT_INVARIANT,
                "STALE_VERTEX",
                "Result refers to vertices no longer in the graph",
                vertices=stale,
            )
        )
    return issues


def cross_check(
    structural: AnalysisResult,
    components: AnalysisResult,
    g: nx.Graph,
) -> list[dict[str, Any]]:
    """Compare both passes against NetworkX on the same graph."""
    issues: list[dict[str, Any]] = []

    expected_aps = set(nx.articulation_points(g))
    if expected_aps != set(structural.articulation_points):
        issues.append(
            _issue(
                CAT_CROSS_CHECK,
                "ARTICULATION_MISMATCH",
                "Articulation points differ from NetworkX",
                expected=sorted(expected_aps),
                actual=sorted(structural.articulation_points),
            )
        )

    expected_bridges = {EdgeKey.of(u, v) for u, v in nx.bridges(g)}
    if expected_bridges != set(structural.bridges):
        issues.append(
            _issue(
                CAT_CROSS_CHECK,
                "BRIDGE_MISMATCH",
                "Bridges differ from NetworkX",
                expected=[str(k) for k in sorted(expected_bridges)],
                actual=[str(k) for k in sorted(structural.bridges)],
            )
        )

    expected_parts = {frozenset(c) for c in nx.connected_components(g)}
    actual_parts = {frozenset(c) for c in components.components}
    if expected_parts != actual_parts:
        issues.append(
            _issue(
                CAT_CROSS_CHECK,
                "COMPONENT_MISMATCH",
                "Connected components differ from NetworkX",
                expected=sorted(sorted(c) for c in expected_parts),
                actual=sorted(sorted(c) for c in actual_parts),
            )
        )
    return issues


class CheckService(BaseService):
    """Verifies the analysis engine on the current graph."""

    @traced
    def check(self) -> ServiceResult:
        """Report integrity issues without publishing a result."""
        vertices, edges = self._workspace.snapshot()
        adj = build_adjacency(vertices, edges)
        palette = self._workspace.palette or DEFAULT_PALETTE

        with trace_span("analyze"):
            structural = analyze_structure(adj)
            components = label_components(adj, palette)

        issues: list[dict[str, Any]] = []
        with trace_span("invariants"):
            issues.extend(check_invariants(structural, vertices, edges))
        with trace_span("cross_check") as span:
            g = to_networkx(vertices, edges)
            if span:
                span.annotate("nodes", g.number_of_nodes())
                span.annotate("edges", g.number_of_edges())
            issues.extend(cross_check(structural, components, g))

        return ServiceResult(
            ok=True,
            op="check",
            data={
                "vertex_count": len(vertices),
                "edge_count": len(edges),
                "issue_count": len(issues),
                "issues": issues,
            },
        )
