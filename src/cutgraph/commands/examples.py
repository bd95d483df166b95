"""Command: list the canned example graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cutgraph.commands._base import CutCommand
from cutgraph.services.graph import GraphService

if TYPE_CHECKING:
    from cutgraph.commands._context import AppContext


@click.command(
    cls=CutCommand,
    examples="""\
  cutgraph examples
  cutgraph --json examples""",
)
@click.pass_obj
def examples(app: AppContext) -> None:
    """List example graphs usable with --example."""
    app.emit(GraphService(app.workspace).list_examples())
