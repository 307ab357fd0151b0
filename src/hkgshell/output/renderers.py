"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hkgshell.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from hkgshell.services.result import ServiceResult


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

    if result.op == "get_build_info":
        return str(result.data.get("buildNumber", ""))

    items = result.data.get("items")
    if items and isinstance(items, list):
        ids = [str(item["id"]) for item in items if isinstance(item, dict) and "id" in item]
        return "\n".join(ids)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="hkg.ok")
    op = Text(f"  {result.op}", style="hkg.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="hkg.key")
    console.print(k, Text(str(value), style=style), end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="hkg.error")
    op = Text(f"  {result.op}", style="hkg.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Build renderers ───────────────────────────────────────────────────


def _render_build_info(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the build identity as a compact panel."""
    d = result.data
    lines = [
        f"build   {d.get('buildNumber', '?')}",
        f"version v{d.get('semver', '?')}  ({d.get('versionBuild', '')})",
        f"commit  {d.get('gitSha', 'unknown')}",
        f"built   {d.get('builtAtIso', '')}",
    ]
    if verbose:
        lines.append(f"minutes {d.get('epochMinutes', '')}")
        lines.append(f"epoch   {d.get('epoch', '')}")
    console.print(Panel("\n".join(lines), title="Build", border_style="hkg.build", expand=False))


def _render_build_metadata(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render build metadata as the ``KEY=value`` lines later steps consume."""
    for line in result.data.get("env", []):
        console.print(line, markup=False)
    if verbose:
        for key in ("output", "github_env"):
            if key in result.data:
                console.print(Text(f"# {key}: {result.data[key]}", style="dim"))


# ── Menu renderers ────────────────────────────────────────────────────


def _render_menu_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, header_style="bold", expand=False)
    table.add_column("ID")
    table.add_column("Label")
    table.add_column("Event", style="hkg.event")
    table.add_column("Payload", style="hkg.payload")
    for item in result.data.get("items", []):
        payload = item.get("payload")
        table.add_row(item["id"], item["label"], item["event"], "" if payload is None else payload)
    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} items")


def _render_menu_activate(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "id", d.get("id", ""))
    if d.get("emitted"):
        _field(console, "event", d.get("event", ""), style="hkg.event")
        if d.get("payload") is not None:
            _field(console, "payload", d["payload"], style="hkg.payload")
    else:
        _field(console, "emitted", "nothing")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "get_build_info": _render_build_info,
    "build_metadata": _render_build_metadata,
    "menu_list": _render_menu_list,
    "menu_activate": _render_menu_activate,
}
