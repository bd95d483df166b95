"""NetworkX view of a store snapshot.

Built on demand, never cached. The hand-written traversals own the
analysis; this graph exists so integrity checks can compare against an
independent implementation.
"""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from cutgraph.domain.types import Edge, Vertex


def to_networkx(vertices: Iterable[Vertex], edges: Iterable[Edge]) -> nx.Graph:
    """Build an undirected ``nx.Graph`` carrying label and position attributes.

    Loads all vertices first so isolated ones are visible to algorithms.
    Edges with a missing endpoint are dropped, matching the adjacency view.
    """
    g: nx.Graph = nx.Graph()
    for v in vertices:
        g.add_node(v.id, label=v.label, x=v.position.x, y=v.position.y)
    for e in edges:
        if e.a in g and e.b in g:
            g.add_edge(e.a, e.b)
    return g
