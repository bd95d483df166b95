"""Click command classes that understand an ``examples=`` keyword.

``cutgraph <command> --examples`` prints the usage examples attached to
the command and exits before any graph is built.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", "") or "")
    ctx.exit(0)


class _ExamplesMixin:
    """Adds the eager ``--examples`` flag when examples text is supplied."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class CutCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class CutGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands are :class:`CutCommand` by default."""

    command_class = CutCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
