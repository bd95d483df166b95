"""Command: integrity check of the analysis engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from cutgraph.commands._base import CutCommand
from cutgraph.commands._input import emit_with_graph, graph_input_options
from cutgraph.services.check import CheckService

if TYPE_CHECKING:
    from cutgraph.commands._context import AppContext


@click.command(
    cls=CutCommand,
    examples="""\
  cutgraph check --example complex
  cutgraph -v check -e 0-1 -e 1-2 -e 2-0 -e 2-3""",
)
@graph_input_options
@click.pass_obj
def check(app: AppContext, **graph_input: Any) -> None:
    """Verify analysis invariants and compare against NetworkX."""
    emit_with_graph(app, lambda: CheckService(app.workspace).check(), **graph_input)
