"""Command: graph counters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from cutgraph.commands._base import CutCommand
from cutgraph.commands._input import emit_with_graph, graph_input_options
from cutgraph.services.graph import GraphService

if TYPE_CHECKING:
    from cutgraph.commands._context import AppContext


@click.command(
    cls=CutCommand,
    examples="""\
  cutgraph stats --example complex
  cutgraph --json stats -e 0-1 -e 1-2 --remove-vertex 1""",
)
@graph_input_options
@click.pass_obj
def stats(app: AppContext, **graph_input: Any) -> None:
    """Show vertex, edge, and analysis counters."""
    emit_with_graph(app, lambda: GraphService(app.workspace).stats(), **graph_input)
