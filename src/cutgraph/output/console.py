"""Rich Console factory and theme for cutgraph output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CUTGRAPH_THEME = Theme(
    {
        "cg.ok": "bold green",
        "cg.error": "bold red",
        "cg.warning": "bold yellow",
        "cg.op": "bold cyan",
        "cg.key": "dim",
        "cg.vertex": "bold blue",
        "cg.cut": "bold red",
        "cg.bridge": "bold dark_orange",
        "cg.tree": "blue",
        "cg.back": "green",
    }
)

# Edge colouring used by the drawing layer, keyed by edge class.
EDGE_STYLES: dict[str, str] = {
    "bridge": "cg.bridge",
    "tree": "cg.tree",
    "back": "cg.back",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=CUTGRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_edge(edge_class: str) -> str:
    """Return the Rich style name for an edge class."""
    return EDGE_STYLES.get(edge_class, "")
