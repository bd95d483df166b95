"""Shared graph input options.

Every graph command builds its graph from options, applied in this order:
``--example`` fixture, ``-n`` extra vertices, ``-e`` edges, then
``--remove-edge`` and ``--remove-vertex``. Edits that change nothing are
reported as warnings, never as failures.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from cutgraph.domain.fixtures import FIXTURES
from cutgraph.domain.types import EdgeKey
from cutgraph.services.graph import GraphService

if TYPE_CHECKING:
    from cutgraph.commands._context import AppContext
    from cutgraph.services.result import ServiceResult

_F = TypeVar("_F", bound=Callable[..., Any])

# Spacing for vertices created from ``-n``; positions only matter for picking.
_AUTO_SPACING = 60.0


class EdgeParamType(click.ParamType):
    """Click parameter accepting ``A-B`` and converting to an :class:`EdgeKey`."""

    name = "A-B"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, EdgeKey):
            return value
        try:
            return EdgeKey.parse(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


EDGE = EdgeParamType()


def graph_input_options(func: _F) -> _F:
    """Decorate a command with the shared graph input options."""
    options = [
        click.option(
            "--example",
            type=click.Choice(sorted(FIXTURES)),
            default=None,
            help="Start from a canned example graph.",
        ),
        click.option(
            "-n",
            "--vertices",
            type=click.IntRange(min=0),
            default=None,
            help="Vertices to add (default: highest edge endpoint + 1).",
        ),
        click.option("-e", "--edge", "edges", type=EDGE, multiple=True, help="Edge A-B."),
        click.option(
            "--remove-edge",
            "remove_edges",
            type=EDGE,
            multiple=True,
            help="Remove edge A-B after building.",
        ),
        click.option(
            "--remove-vertex",
            "remove_vertices",
            type=int,
            multiple=True,
            help="Remove a vertex (and its edges) after building.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def apply_graph_input(
    app: AppContext,
    *,
    example: str | None,
    vertices: int | None,
    edges: tuple[EdgeKey, ...],
    remove_edges: tuple[EdgeKey, ...],
    remove_vertices: tuple[int, ...],
) -> tuple[ServiceResult | None, list[str]]:
    """Build the workspace graph from CLI options.

    Returns ``(failure, warnings)``; *failure* is a failed ServiceResult
    to emit, or None when the graph was built.
    """
    svc = GraphService(app.workspace)
    warnings: list[str] = []

    if example is not None:
        loaded = svc.load_example(example)
        if not loaded.ok:
            return loaded, warnings

    if vertices is None:
        vertices = max((k.high + 1 for k in edges), default=0)
        vertices = max(vertices - app.workspace.vertex_count, 0)
    base = app.workspace.vertex_count
    for i in range(vertices):
        svc.add_vertex((base + i) * _AUTO_SPACING, 0.0)

    for key in edges:
        warnings.extend(svc.add_edge(key.low, key.high).warnings)
    for key in remove_edges:
        warnings.extend(svc.remove_edge(key.low, key.high).warnings)
    for vertex_id in remove_vertices:
        warnings.extend(svc.remove_vertex(vertex_id).warnings)

    return None, warnings


def emit_with_graph(
    app: AppContext,
    run: Callable[[], ServiceResult],
    **graph_input: Any,
) -> None:
    """Apply graph input options, then run and emit one service call."""
    failure, warnings = apply_graph_input(app, **graph_input)
    if failure is not None:
        app.emit(failure)
        return
    app.emit(run(), extra_warnings=warnings)
