"""Tests for the combined articulation-point / bridge traversal."""

from __future__ import annotations

import sys

import pytest

from cutgraph.analysis.structural import analyze_structure
from cutgraph.domain.types import EdgeKey
from cutgraph.infrastructure.graph.adjacency import AdjacencyView, build_adjacency
from tests.conftest import build_store

SIMPLE_EDGES = [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4)]
COMPLEX_EDGES = [(0, 1), (1, 2), (1, 3), (2, 3), (2, 4), (4, 5), (4, 6), (5, 6)]


def _adj(n: int, edges: list[tuple[int, int]]) -> AdjacencyView:
    s = build_store(n, edges)
    return build_adjacency(s.vertices, s.edges)


def _keys(*pairs: tuple[int, int]) -> frozenset[EdgeKey]:
    return frozenset(EdgeKey.of(a, b) for a, b in pairs)


class TestSmallGraphs:
    def test_empty_graph(self) -> None:
        result = analyze_structure({})
        assert result.kind == "structural"
        assert result.articulation_points == frozenset()
        assert result.tree_edges == frozenset()

    def test_isolated_vertex(self) -> None:
        result = analyze_structure(_adj(1, []))
        assert result.articulation_points == frozenset()
        assert result.bridges == frozenset()
        assert result.tree_edges == frozenset()
        assert result.back_edges == frozenset()
        assert result.discovery == {0: 0}

    def test_single_edge(self) -> None:
        result = analyze_structure(_adj(2, [(0, 1)]))
        assert result.articulation_points == frozenset()
        assert result.bridges == _keys((0, 1))

    def test_triangle(self) -> None:
        result = analyze_structure(_adj(3, [(0, 1), (1, 2), (2, 0)]))
        assert result.articulation_points == frozenset()
        assert result.bridges == frozenset()
        assert result.tree_edges == _keys((0, 1), (1, 2))
        assert result.back_edges == _keys((0, 2))

    def test_path_of_three(self) -> None:
        result = analyze_structure(_adj(3, [(0, 1), (1, 2)]))
        assert result.articulation_points == frozenset({1})
        assert result.bridges == _keys((0, 1), (1, 2))

    def test_cycle_has_no_cuts(self) -> None:
        n = 8
        result = analyze_structure(_adj(n, [(i, (i + 1) % n) for i in range(n)]))
        assert result.articulation_points == frozenset()
        assert result.bridges == frozenset()
        assert len(result.back_edges) == 1


class TestRootRule:
    def test_root_with_two_children_is_cut(self) -> None:
        # Star: root 0 discovers every leaf directly.
        result = analyze_structure(_adj(4, [(0, 1), (0, 2), (0, 3)]))
        assert result.articulation_points == frozenset({0})
        assert result.bridges == _keys((0, 1), (0, 2), (0, 3))

    def test_root_with_one_child_is_not_cut(self) -> None:
        result = analyze_structure(_adj(3, [(0, 1), (1, 2)]))
        assert 0 not in result.articulation_points

    def test_root_joining_two_cycles(self) -> None:
        bowtie = [(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0)]
        result = analyze_structure(_adj(5, bowtie))
        assert result.articulation_points == frozenset({0})
        assert result.bridges == frozenset()

    def test_non_root_cut_vertex_on_cycle(self) -> None:
        # 0-1-2 triangle with 3 hanging off 2: root 0 is not a cut vertex.
        result = analyze_structure(_adj(4, [(0, 1), (1, 2), (2, 0), (2, 3)]))
        assert result.articulation_points == frozenset({2})
        assert result.bridges == _keys((2, 3))


class TestFixtures:
    def test_simple(self) -> None:
        result = analyze_structure(_adj(5, SIMPLE_EDGES))
        assert result.articulation_points == frozenset({1})
        assert result.bridges == _keys((0, 1))
        assert result.tree_edges == _keys((0, 1), (1, 2), (2, 4), (3, 4))
        assert result.back_edges == _keys((1, 3))

    def test_simple_discovery_and_low(self) -> None:
        result = analyze_structure(_adj(5, SIMPLE_EDGES))
        assert result.discovery == {0: 0, 1: 1, 2: 2, 4: 3, 3: 4}
        assert result.low_link == {0: 0, 1: 1, 2: 1, 4: 1, 3: 1}

    def test_complex(self) -> None:
        result = analyze_structure(_adj(7, COMPLEX_EDGES))
        assert result.articulation_points == frozenset({1, 2, 4})
        assert result.bridges == _keys((0, 1), (2, 4))
        assert result.tree_edges == _keys((0, 1), (1, 2), (2, 3), (2, 4), (4, 5), (5, 6))
        assert result.back_edges == _keys((1, 3), (4, 6))


class TestDisconnected:
    def test_components_use_disjoint_discovery_ranges(self) -> None:
        result = analyze_structure(_adj(6, [(0, 1), (1, 2), (3, 4), (4, 5)]))
        assert result.articulation_points == frozenset({1, 4})
        first = {result.discovery[v] for v in (0, 1, 2)}
        second = {result.discovery[v] for v in (3, 4, 5)}
        assert max(first) < min(second)

    def test_isolated_vertices_between_components(self) -> None:
        result = analyze_structure(_adj(5, [(0, 1), (3, 4)]))
        assert result.articulation_points == frozenset()
        assert result.bridges == _keys((0, 1), (3, 4))
        assert set(result.discovery) == {0, 1, 2, 3, 4}

    def test_roots_in_ascending_id_order(self) -> None:
        adj: AdjacencyView = {5: [], 2: [], 9: []}
        result = analyze_structure(adj)
        assert result.discovery == {2: 0, 5: 1, 9: 2}


class TestRobustness:
    def test_self_loop_does_not_crash(self) -> None:
        adj: AdjacencyView = {0: [1, 0, 0], 1: [0]}
        result = analyze_structure(adj)
        assert result.bridges == _keys((0, 1))
        assert EdgeKey(0, 0) in result.back_edges
        assert result.tree_edges.isdisjoint(result.back_edges)

    def test_deep_path_beyond_recursion_limit(self) -> None:
        n = sys.getrecursionlimit() * 3
        result = analyze_structure(_adj(n, [(i, i + 1) for i in range(n - 1)]))
        assert result.articulation_count == n - 2
        assert result.bridge_count == n - 1

    def test_idempotent(self) -> None:
        adj = _adj(7, COMPLEX_EDGES)
        assert analyze_structure(adj) == analyze_structure(adj)

    @pytest.mark.parametrize("edges", [SIMPLE_EDGES, COMPLEX_EDGES])
    def test_low_never_above_discovery(self, edges: list[tuple[int, int]]) -> None:
        result = analyze_structure(_adj(7, edges))
        for v, low in result.low_link.items():
            assert low <= result.discovery[v]
