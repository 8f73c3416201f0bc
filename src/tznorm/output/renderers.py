"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched on ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tznorm.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from tznorm.services.result import ServiceResult

type Renderer = Callable[["ServiceResult", "Console"], None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to text via Rich."""
    console = create_console()
    if result.ok:
        _OP_RENDERERS.get(result.op, _render_generic)(result, console)
        if verbose and result.meta:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: the single value a script would want."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    d = result.data
    if result.op == "show":
        return str(d["text"])
    if result.op == "localize":
        return str(d["instant"])
    if result.op == "convert":
        return json.dumps(d["payload"], ensure_ascii=False)
    if result.op == "classify":
        return "true" if d["matched"] else "false"
    if result.op == "zone_list":
        return "\n".join(item["value"] for item in d["items"])
    if "timezone" in d:
        return str(d["timezone"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="tz.ok"), Text(f"  {result.op}", style="tz.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text.assemble(Text(f"  {key}: ", style="tz.key"), Text(str(value), style=style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in (result.meta or {}).items():
        console.print(f"    {k}: {v}", markup=False)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="tz.error"), Text(f"  {result.op}", style="tz.op"), Text(f"— {msg}")
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_show(result: ServiceResult, console: Console) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "text", d["text"], "tz.text")
    _field(console, "tooltip", d["tooltip"])
    _field(console, "instant", d["instant"], "tz.instant")
    if result.meta:
        _field(console, "timezone", result.meta.get("timezone", ""), "tz.zone")


def _render_localize(result: ServiceResult, console: Console) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "wall_time", d["wall_time"])
    _field(console, "instant", d["instant"], "tz.instant")
    _field(console, "local", d["local"])
    if result.meta:
        _field(console, "timezone", result.meta.get("timezone", ""), "tz.zone")


def _render_classify(result: ServiceResult, console: Console) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "key", d["key"])
    _field(console, "value", json.dumps(d["value"], ensure_ascii=False))
    _field(console, "matched", d["matched"], "tz.match" if d["matched"] else "tz.miss")
    _field(console, "reason", d["reason"])


def _render_convert(result: ServiceResult, console: Console) -> None:
    # Payloads are data, not prose: print the JSON document as-is.
    document = json.dumps(result.data["payload"], indent=2, ensure_ascii=False)
    console.print(document, markup=False, emoji=False, soft_wrap=True)


def _render_zone_list(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Timezone", style="tz.zone", no_wrap=True)
    table.add_column("Label")
    for item in result.data["items"]:
        table.add_row(item["value"], item["label"])
    console.print(table)


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        _field(console, key, value, "tz.zone" if key == "timezone" else "")


_OP_RENDERERS: dict[str, Renderer] = {
    "show": _render_show,
    "localize": _render_localize,
    "classify": _render_classify,
    "convert": _render_convert,
    "zone_list": _render_zone_list,
}
