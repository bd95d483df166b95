"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cutgraph.output.console import create_console, get_output, style_for_edge

if TYPE_CHECKING:
    from rich.console import Console

    from cutgraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "find_articulation_points":
        return "\n".join(str(v) for v in data.get("articulation_points", []))
    if result.op == "find_bridges":
        return "\n".join(_edge_text(e) for e in data.get("bridges", []))
    if result.op == "color_components":
        return "\n".join(
            " ".join(str(v) for v in comp["vertices"]) for comp in data.get("components", [])
        )
    if result.op == "list_examples":
        return "\n".join(item["name"] for item in data.get("items", []))
    if result.op == "check":
        return str(data.get("issue_count", 0))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _edge_text(edge: list[int]) -> str:
    return f"{edge[0]}-{edge[1]}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="cg.ok")
    op = Text(f"  {result.op}", style="cg.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = "cg.vertex" if key in ("id", "vertex") else ""
    console.print(Text.assemble((f"  {key}: ", "cg.key"), (str(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    if span_data.get("annotations"):
        extras = [f"{ak}={av}" for ak, av in span_data["annotations"].items()]
        line += f"  ({', '.join(extras)})"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _edge_table(rows: list[tuple[str, list[int]]]) -> Table:
    """Build a table of classified edges."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Edge", no_wrap=True)
    table.add_column("Class")
    for edge_class, edge in rows:
        style = style_for_edge(edge_class)
        table.add_row(Text(_edge_text(edge), style=style), Text(edge_class, style=style))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="cg.error")
    op = Text(f"  {result.op}", style="cg.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="cg.key"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Analysis renderers ────────────────────────────────────────────────


def _render_structural(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render articulation points, bridges, and the DFS edge classes."""
    d = result.data
    _status_line(console, result)

    aps = d.get("articulation_points", [])
    console.print(
        Text.assemble(
            ("  articulation points: ", "cg.key"),
            (", ".join(str(v) for v in aps) or "none", "cg.cut"),
        )
    )
    bridges = d.get("bridges", [])
    console.print(
        Text.assemble(
            ("  bridges: ", "cg.key"),
            (", ".join(_edge_text(e) for e in bridges) or "none", "cg.bridge"),
        )
    )

    bridge_set = {tuple(e) for e in bridges}
    rows: list[tuple[str, list[int]]] = []
    for edge in d.get("tree_edges", []):
        rows.append(("bridge" if tuple(edge) in bridge_set else "tree", edge))
    for edge in d.get("back_edges", []):
        rows.append(("back", edge))
    if rows:
        console.print()
        console.print(_edge_table(sorted(rows, key=lambda r: r[1])))

    if verbose and d.get("discovery"):
        table = Table(show_header=True, pad_edge=False, expand=False)
        table.add_column("Vertex", style="cg.vertex", justify="right")
        table.add_column("Disc", justify="right")
        table.add_column("Low", justify="right")
        for vid, disc in d["discovery"].items():
            table.add_row(vid, str(disc), str(d["low_link"].get(vid, "")))
        console.print()
        console.print(table)

    console.print(f"\n{d.get('articulation_count', len(aps))} articulation points, ", end="")
    console.print(f"{d.get('bridge_count', len(bridges))} bridges")
    if verbose:
        _render_meta(console, result)


def _render_components(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one row per connected component with its colour token."""
    d = result.data
    _status_line(console, result)

    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Color")
    table.add_column("Vertices")
    for comp in d.get("components", []):
        color = str(comp["color"])
        table.add_row(
            str(comp["index"]),
            Text(color, style=color if color.startswith("#") else ""),
            " ".join(str(v) for v in comp["vertices"]),
        )
    console.print(table)
    console.print(
        f"\n{d.get('component_count', 0)} components, {d.get('color_count', 0)} colours"
    )
    if verbose:
        _render_meta(console, result)


def _render_current(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    kind = result.data.get("kind")
    if kind == "structural":
        _render_structural(result, console, verbose=verbose)
    elif kind == "components":
        _render_components(result, console, verbose=verbose)
    else:
        _status_line(console, result)
        console.print("  no analysis result")


def _render_stats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="cg.key")
    table.add_column(justify="right")
    for label, key in (
        ("Vertices", "vertex_count"),
        ("Edges", "edge_count"),
        ("Articulation points", "articulation_count"),
        ("Bridges", "bridge_count"),
        ("Components", "component_color_count"),
    ):
        table.add_row(label, str(d.get(key, 0)))
    console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Check renderer ────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    issues = result.data.get("issues", [])
    if not issues:
        console.print(Text("OK", style="cg.ok"), Text("  check", style="cg.op"), "— no issues")
        if verbose:
            _render_meta(console, result)
        return

    console.print(f"[cg.warning]{len(issues)} issues found[/cg.warning]")
    for issue in issues:
        console.print(f"  [cg.error]{issue['code']}[/cg.error]  {issue['message']}")
        if verbose:
            for k, v in issue.get("detail", {}).items():
                console.print(f"      {k}: {v}")
    if verbose:
        _render_meta(console, result)


def _render_examples(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Name", style="cg.op")
    table.add_column("Vertices", justify="right")
    table.add_column("Edges", justify="right")
    table.add_column("Description")
    for item in result.data.get("items", []):
        table.add_row(
            item["name"],
            str(item["vertex_count"]),
            str(item["edge_count"]),
            item["description"],
        )
    console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Analysis
    "find_articulation_points": _render_structural,
    "find_bridges": _render_structural,
    "color_components": _render_components,
    "current": _render_current,
    # Status
    "stats": _render_stats,
    "check": _render_check,
    "list_examples": _render_examples,
}
