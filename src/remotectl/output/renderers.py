"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.

Device status messages are echoed live by the console plugin while a
command runs, so renderers leave ``messages`` out of human output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from remotectl.output.console import create_console, get_output, style_for_device

if TYPE_CHECKING:
    from rich.console import Console

    from remotectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
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

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["name"]) for item in items if "name" in item)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "remote.ok"), ": ", (result.op, "remote.op")))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="remote.key")
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(k, Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "remote.error"), ": ", (result.op, "remote.op"), " — ", msg)
    )

    if err and err.detail:
        available = err.detail.get("available")
        if available:
            console.print(Text(f"  available: {', '.join(available)}", style="dim"))
        if verbose:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_state(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render demo/run results: final device state."""
    _status_line(console, result)
    d = result.data
    if "actions" in d:
        _field(console, "actions", " ".join(d["actions"]))
    _field(console, "light_on", d.get("light_on"))
    _field(console, "temperature", d.get("temperature"))
    if verbose:
        _render_meta(console, result)


def _render_actions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the action listing as a table."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Action", style="remote.action", no_wrap=True)
    table.add_column("Device")
    table.add_column("Description")
    for item in result.data.get("items", []):
        device = item.get("device", "")
        table.add_row(
            item.get("name", ""),
            Text(device, style=style_for_device(device)),
            item.get("description", ""),
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "demo": _render_state,
    "run": _render_state,
    "run_batch": _render_state,
    "list_actions": _render_actions,
}
