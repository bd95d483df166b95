"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Workspace creation and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cutgraph.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from cutgraph.config.settings import CutgraphSettings
    from cutgraph.infrastructure.workspace import Workspace
    from cutgraph.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace is created on first use so ``--help`` and ``--version``
    never build one.
    """

    def __init__(self, settings: CutgraphSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from cutgraph.config.logging import configure_logging
        from cutgraph.services.telemetry import disable_telemetry, enable_telemetry

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Span timing follows this invocation's -v only, even when several
        # invocations share one process.
        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    @property
    def workspace(self) -> Workspace:
        """The workspace instance (created lazily on first access)."""
        if self._workspace is None:
            from cutgraph.infrastructure.workspace import Workspace

            self._workspace = Workspace.from_settings(self.settings)
        return self._workspace

    def emit(self, result: ServiceResult, *, extra_warnings: list[str] | None = None) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.

        *extra_warnings* (e.g. from applying graph input options) are
        merged in front of the result's own warnings.
        """
        if extra_warnings:
            result = result.model_copy(
                update={"warnings": [*extra_warnings, *result.warnings]}
            )
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
