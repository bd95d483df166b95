"""Subcommand modules for cutgraph.

Provides register_commands() which uses deferred imports to keep
``cutgraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the analyze group and the standalone commands on the root group."""
    from cutgraph.commands.analyze import analyze

    cli.add_command(analyze)

    from cutgraph.commands.check import check
    from cutgraph.commands.examples import examples
    from cutgraph.commands.stats import stats

    cli.add_command(stats)
    cli.add_command(check)
    cli.add_command(examples)
