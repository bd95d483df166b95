"""``cutgraph`` entry point: global output flags, settings, subcommands."""

from __future__ import annotations

import click

from cutgraph import __version__
from cutgraph.commands import register_commands
from cutgraph.commands._context import AppContext
from cutgraph.config.settings import CutgraphSettings

_EPILOG = """\
Each command builds its graph from --example, -n and -e, analyses it once
and exits; nothing is kept between runs. Try: cutgraph analyze bridges
--example complex"""


@click.group(invoke_without_command=True, epilog=_EPILOG)
@click.version_option(version=__version__, prog_name="cutgraph")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="One line per cut vertex, bridge or component (ignored with --json).",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show DFS discovery/low-link tables, span timings and debug logs.",
)
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read picking radii and palette from this file instead of cutgraph.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Find articulation points, bridges and connected components."""
    ctx.obj = AppContext(
        CutgraphSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
