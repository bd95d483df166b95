"""Tests for the Rich renderers and quiet-mode output."""

from __future__ import annotations

import pytest

from cutgraph.infrastructure.workspace import Workspace
from cutgraph.output.console import create_console, get_output, style_for_edge
from cutgraph.output.renderers import render_quiet, render_result
from cutgraph.services.analysis import AnalysisService
from cutgraph.services.check import CheckService
from cutgraph.services.graph import GraphService
from cutgraph.services.result import ServiceError, ServiceResult
from tests.conftest import load


@pytest.fixture
def simple(workspace: Workspace) -> Workspace:
    GraphService(workspace).load_example("simple")
    return workspace


class TestConsole:
    def test_buffered_console(self) -> None:
        console = create_console(no_color=True, width=40)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_edge_styles(self) -> None:
        assert style_for_edge("bridge") == "cg.bridge"
        assert style_for_edge("unknown") == ""


class TestStructural:
    def test_lists_points_and_bridges(self, simple: Workspace) -> None:
        out = render_result(AnalysisService(simple).find_articulation_points())
        assert "find_articulation_points" in out
        assert "articulation points: 1" in out
        assert "bridges: 0-1" in out
        assert "1-3" in out
        assert "back" in out
        assert "1 articulation points, 1 bridges" in out

    def test_none_on_tree_free_graph(self, workspace: Workspace) -> None:
        load(workspace, 2, [])
        out = render_result(AnalysisService(workspace).find_bridges())
        assert "articulation points: none" in out
        assert "bridges: none" in out

    def test_verbose_shows_low_link_table(self, simple: Workspace) -> None:
        result = AnalysisService(simple).find_bridges()
        assert "Low" not in render_result(result)
        assert "Low" in render_result(result, verbose=True)


class TestComponents:
    def test_table(self, workspace: Workspace) -> None:
        load(workspace, 4, [(0, 1), (2, 3)])
        out = render_result(AnalysisService(workspace).color_components())
        assert "#FF6B6B" in out
        assert "#4ECDC4" in out
        assert "2 components, 2 colours" in out


class TestStatus:
    def test_stats(self, simple: Workspace) -> None:
        out = render_result(GraphService(simple).stats())
        assert "Vertices" in out
        assert "Articulation points" in out

    def test_current_empty(self, simple: Workspace) -> None:
        out = render_result(AnalysisService(simple).current())
        assert "no analysis result" in out

    def test_check_clean(self, simple: Workspace) -> None:
        out = render_result(CheckService(simple).check())
        assert "no issues" in out

    def test_check_with_issues(self) -> None:
        result = ServiceResult(
            ok=True,
            op="check",
            data={
                "issue_count": 1,
                "issues": [
                    {
                        "category": "cross_check",
                        "code": "BRIDGE_MISMATCH",
                        "message": "Bridges differ from NetworkX",
                        "detail": {"expected": ["0-1"], "actual": []},
                    }
                ],
            },
        )
        out = render_result(result, verbose=True)
        assert "1 issues found" in out
        assert "BRIDGE_MISMATCH" in out
        assert "expected" in out

    def test_examples(self, workspace: Workspace) -> None:
        out = render_result(GraphService(workspace).list_examples())
        assert "simple" in out
        assert "complex" in out

    def test_generic_fallback(self) -> None:
        out = render_result(ServiceResult(ok=True, op="add_edge", data={"key": [0, 1]}))
        assert "OK" in out
        assert "key: [0,1]" in out

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="load_example",
            error=ServiceError(
                code="UNKNOWN_EXAMPLE",
                message="Unknown example 'x'",
                detail={"available": ["complex", "simple"]},
            ),
        )
        assert "Unknown example 'x'" in render_result(result)
        assert "available" not in render_result(result)
        assert "available" in render_result(result, verbose=True)


class TestQuiet:
    def test_articulation_points(self, simple: Workspace) -> None:
        assert render_quiet(AnalysisService(simple).find_articulation_points()) == "1"

    def test_bridges(self, workspace: Workspace) -> None:
        GraphService(workspace).load_example("complex")
        assert render_quiet(AnalysisService(workspace).find_bridges()) == "0-1\n2-4"

    def test_components(self, workspace: Workspace) -> None:
        load(workspace, 3, [(0, 2)])
        assert render_quiet(AnalysisService(workspace).color_components()) == "0 2\n1"

    def test_examples(self, workspace: Workspace) -> None:
        out = render_quiet(GraphService(workspace).list_examples())
        assert set(out.splitlines()) == {"simple", "complex"}

    def test_check(self, simple: Workspace) -> None:
        assert render_quiet(CheckService(simple).check()) == "0"

    def test_other_ops(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="clear")) == "OK: clear"

    def test_error(self) -> None:
        result = ServiceResult(ok=False, op="x", error=ServiceError(code="E", message="bad"))
        assert render_quiet(result).startswith("ERROR: x")
