"""Adjacency view derived fresh from a store snapshot before each analysis."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeAlias

from cutgraph.domain.types import Edge, Vertex, VertexId

logger = logging.getLogger(__name__)

AdjacencyView: TypeAlias = dict[VertexId, list[VertexId]]


def build_adjacency(vertices: Iterable[Vertex], edges: Iterable[Edge]) -> AdjacencyView:
    """Map each vertex id to its neighbours in edge insertion order.

    Every vertex gets an entry, isolated ones included. Edges that name a
    vertex missing from *vertices* are skipped rather than failing.
    """
    adj: AdjacencyView = {v.id: [] for v in vertices}
    for edge in edges:
        if edge.a not in adj or edge.b not in adj:
            logger.debug("Skipped dangling edge %s-%s", edge.a, edge.b)
            continue
        adj[edge.a].append(edge.b)
        adj[edge.b].append(edge.a)
    return adj
