"""Tests for telemetry primitives and their use in the services."""

from __future__ import annotations

import time
from collections.abc import Generator

import pytest

from cutgraph.infrastructure.workspace import Workspace
from cutgraph.services.analysis import AnalysisService
from cutgraph.services.check import CheckService
from cutgraph.services.graph import GraphService
from cutgraph.services.result import ServiceError, ServiceResult
from cutgraph.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def _telemetry_on() -> None:
    enable_telemetry()


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="dfs").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="dfs")
        time.sleep(0.002)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_omits_empty_keys(self) -> None:
        span = Span(name="dfs")
        span.end()
        d = span.to_dict()
        assert d["name"] == "dfs"
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_nested(self) -> None:
        root = Span(name="root")
        child = Span(name="flood_fill", parent=root)
        root.children.append(child)
        child.annotate("vertices", 7)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["children"][0]["name"] == "flood_fill"
        assert d["children"][0]["annotations"] == {"vertices": 7}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("dfs") as span:
            assert span is None

    @pytest.mark.usefixtures("_telemetry_on")
    def test_no_root_yields_none(self) -> None:
        with trace_span("dfs") as span:
            assert span is None

    @pytest.mark.usefixtures("_telemetry_on")
    def test_nested_under_root(self) -> None:
        root = Span(name="root")
        token = _current_span.set(root)
        try:
            with trace_span("a"), trace_span("b"):
                pass
        finally:
            _current_span.reset(token)
        assert [c.name for c in root.children] == ["a"]
        assert [c.name for c in root.children[0].children] == ["b"]
        assert root.children[0].end_time is not None


class TestTraced:
    def test_noop_when_disabled(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="x")

        assert op().meta is None

    @pytest.mark.usefixtures("_telemetry_on")
    def test_injects_meta_and_keeps_existing(self) -> None:
        @traced
        def op() -> ServiceResult:
            with trace_span("stage"):
                pass
            return ServiceResult(ok=True, op="x", meta={"existing": 1})

        result = op()
        assert result.meta is not None
        assert result.meta["existing"] == 1
        assert result.meta["telemetry"]["name"].endswith("op")
        assert result.meta["telemetry"]["children"][0]["name"] == "stage"

    @pytest.mark.usefixtures("_telemetry_on")
    def test_error_result_gets_telemetry(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=False, op="x", error=ServiceError(code="E", message="m"))

        result = op()
        assert result.meta is not None
        assert "telemetry" in result.meta

    @pytest.mark.usefixtures("_telemetry_on")
    def test_exception_propagates(self) -> None:
        @traced
        def op() -> ServiceResult:
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            op()
        assert _current_span.get() is None

    @pytest.mark.usefixtures("_telemetry_on")
    def test_non_service_result_passthrough(self) -> None:
        @traced
        def op() -> int:
            return 3

        assert op() == 3


@pytest.mark.usefixtures("_telemetry_on")
class TestServiceSpans:
    def _child_names(self, result: ServiceResult) -> list[str]:
        assert result.meta is not None
        return [c["name"] for c in result.meta["telemetry"].get("children", [])]

    def test_structural_pass(self, workspace: Workspace) -> None:
        GraphService(workspace).load_example("simple")
        result = AnalysisService(workspace).find_bridges()
        assert "AnalysisService.find_bridges" in result.meta["telemetry"]["name"]
        assert self._child_names(result) == ["build_adjacency", "dfs"]

    def test_components_pass(self, workspace: Workspace) -> None:
        result = AnalysisService(workspace).color_components()
        assert self._child_names(result) == ["build_adjacency", "flood_fill"]

    def test_load_example(self, workspace: Workspace) -> None:
        result = GraphService(workspace).load_example("complex")
        assert self._child_names(result) == ["load_fixture"]

    def test_check(self, workspace: Workspace) -> None:
        result = CheckService(workspace).check()
        assert self._child_names(result) == ["analyze", "invariants", "cross_check"]
