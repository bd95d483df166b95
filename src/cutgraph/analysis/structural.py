"""Single-pass DFS: discovery/low-link, cut vertices, bridges, edge classes.

The traversal is iterative with an explicit stack of ``(vertex,
next-neighbour index)`` frames, so path-like graphs deeper than the
interpreter recursion limit are fine. Roots are taken in ascending id
order, one traversal per component.

Cut vertex rules:

* a root is a cut vertex iff it has two or more DFS children;
* a non-root ``u`` is a cut vertex iff some child ``v`` has
  ``low[v] >= disc[u]``.

A tree edge ``(u, v)`` is a bridge iff ``low[v] > disc[u]``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from cutgraph.analysis.result import AnalysisResult
from cutgraph.domain.types import EdgeKey, VertexId

logger = logging.getLogger(__name__)


def analyze_structure(adjacency: Mapping[VertexId, Sequence[VertexId]]) -> AnalysisResult:
    """Run the combined articulation-point / bridge traversal."""
    disc: dict[VertexId, int] = {}
    low: dict[VertexId, int] = {}
    parent: dict[VertexId, VertexId | None] = {}
    children: dict[VertexId, int] = {}

    articulation: set[VertexId] = set()
    bridges: set[EdgeKey] = set()
    tree: set[EdgeKey] = set()
    back: set[EdgeKey] = set()
    clock = 0

    for root in sorted(adjacency):
        if root in disc:
            continue

        parent[root] = None
        disc[root] = low[root] = clock
        children[root] = 0
        clock += 1
        stack: list[tuple[VertexId, int]] = [(root, 0)]

        while stack:
            u, i = stack[-1]
            neighbors = adjacency[u]

            if i < len(neighbors):
                stack[-1] = (u, i + 1)
                v = neighbors[i]
                if v not in disc:
                    tree.add(EdgeKey.of(u, v))
                    parent[v] = u
                    children[u] += 1
                    children[v] = 0
                    disc[v] = low[v] = clock
                    clock += 1
                    stack.append((v, 0))
                elif v != parent[u]:
                    key = EdgeKey.of(u, v)
                    if key not in tree:
                        back.add(key)
                    low[u] = min(low[u], disc[v])
                continue

            # All neighbours of u explored: fold its low-link into the parent.
            stack.pop()
            p = parent[u]
            if p is None:
                continue
            low[p] = min(low[p], low[u])
            if parent[p] is None:
                if children[p] >= 2:
                    articulation.add(p)
            elif low[u] >= disc[p]:
                articulation.add(p)
            if low[u] > disc[p]:
                bridges.add(EdgeKey.of(p, u))

    logger.debug(
        "Structural pass: %d vertices, %d cut vertices, %d bridges",
        len(disc),
        len(articulation),
        len(bridges),
    )
    return AnalysisResult(
        kind="structural",
        articulation_points=frozenset(articulation),
        bridges=frozenset(bridges),
        tree_edges=frozenset(tree),
        back_edges=frozenset(back),
        discovery=disc,
        low_link=low,
    )
