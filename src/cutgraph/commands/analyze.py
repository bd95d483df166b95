"""Command group: structural analysis of a graph built from options."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from cutgraph.commands._base import CutGroup
from cutgraph.commands._input import emit_with_graph, graph_input_options
from cutgraph.services.analysis import AnalysisService

if TYPE_CHECKING:
    from cutgraph.commands._context import AppContext

_ANALYZE_EXAMPLES = """\
  cutgraph analyze articulation --example complex
  cutgraph analyze bridges -e 0-1 -e 1-2 -e 2-0 -e 2-3
  cutgraph analyze components -n 6 -e 0-1 -e 2-3
  cutgraph --json analyze bridges --example simple --remove-vertex 0"""


@click.group(cls=CutGroup, examples=_ANALYZE_EXAMPLES)
def analyze() -> None:
    """Find cut vertices, bridges, and connected components."""


@analyze.command(
    examples="""\
  cutgraph analyze articulation --example simple
  cutgraph -q analyze articulation -e 0-1 -e 1-2"""
)
@graph_input_options
@click.pass_obj
def articulation(app: AppContext, **graph_input: Any) -> None:
    """Find articulation points (cut vertices)."""
    emit_with_graph(
        app,
        lambda: AnalysisService(app.workspace).find_articulation_points(),
        **graph_input,
    )


@analyze.command(
    examples="""\
  cutgraph analyze bridges --example complex
  cutgraph --json analyze bridges -e 0-1 -e 1-2 -e 2-0"""
)
@graph_input_options
@click.pass_obj
def bridges(app: AppContext, **graph_input: Any) -> None:
    """Find bridges (cut edges) and classify DFS edges."""
    emit_with_graph(
        app,
        lambda: AnalysisService(app.workspace).find_bridges(),
        **graph_input,
    )


@analyze.command(
    examples="""\
  cutgraph analyze components -n 5 -e 0-1 -e 3-4
  cutgraph -q analyze components --example simple --remove-vertex 1"""
)
@graph_input_options
@click.pass_obj
def components(app: AppContext, **graph_input: Any) -> None:
    """Colour connected components."""
    emit_with_graph(
        app,
        lambda: AnalysisService(app.workspace).color_components(),
        **graph_input,
    )
