"""Shared pytest fixtures and test helpers for cutgraph tests."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from cutgraph.domain.types import Point
from cutgraph.infrastructure.graph.store import GraphStore
from cutgraph.infrastructure.workspace import Workspace


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> GraphStore:
    return GraphStore()


@pytest.fixture
def workspace() -> Workspace:
    return Workspace()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no stray cutgraph.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CUTGRAPH_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_store(n: int, edges: Iterable[tuple[int, int]]) -> GraphStore:
    """Store with vertices ``0..n-1`` laid out on a line, plus *edges*."""
    s = GraphStore()
    for i in range(n):
        s.insert_vertex(Point(i * 100.0, 0.0))
    for a, b in edges:
        s.insert_edge(a, b)
    return s


def load(workspace: Workspace, n: int, edges: Iterable[tuple[int, int]]) -> Workspace:
    """Populate *workspace* with vertices ``0..n-1`` and *edges*."""
    with workspace.mutate() as s:
        for i in range(n):
            s.insert_vertex(Point(i * 100.0, 0.0))
        for a, b in edges:
            s.insert_edge(a, b)
    return workspace
