"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
import unicodedata
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from utf16kit.output.console import create_console, get_output, style_for_unit

if TYPE_CHECKING:
    from rich.console import Console

    from utf16kit.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    Decoded text is printed bare so it can be piped; encode prints the
    hex code units.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op in ("decode", "utf8"):
        return str(result.data.get("text", ""))
    if result.op == "encode":
        return str(result.data.get("hex", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="u16.ok"), Text(f"  {result.op}", style="u16.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="u16.key"), Text(str(value), style=style), sep="")


def _char_name(rune: str) -> str:
    value = int(rune.removeprefix("U+"), 16)
    if value == 0xFFFD:
        return "REPLACEMENT CHARACTER"
    return unicodedata.name(chr(value), "")


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
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span: dict[str, Any], indent: int = 4) -> None:
    line = Text(" " * indent)
    line.append(f"{span.get('duration_ms', 0.0):>9.3f}ms", style="dim")
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _units_text(units: list[str]) -> Text:
    text = Text()
    for i, unit in enumerate(units):
        if i:
            text.append(" ")
        text.append(unit, style=style_for_unit(unit))
    return text


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="u16.error"),
        Text(f"  {result.op}", style="u16.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Codec renderers ───────────────────────────────────────────────────


def _render_decode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render decode results: unit list, rune table, and the text."""
    d = result.data
    _status_line(console, result)
    console.print(Text("  units: ", style="u16.key"), _units_text(d.get("units", [])), sep="")
    _field(console, "text", d.get("text", ""), style="u16.text")
    _field(console, "replacements", d.get("replacements", 0))

    runes: list[str] = d.get("runes", [])
    if runes and verbose:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Rune", style="u16.rune", no_wrap=True)
        table.add_column("Name")
        for i, rune in enumerate(runes):
            table.add_row(str(i), rune, _char_name(rune))
        console.print()
        console.print(table)

    if verbose:
        _render_meta(console, result)


def _render_encode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render encode results: input runes and the resulting code units."""
    d = result.data
    _status_line(console, result)
    _field(console, "runes", " ".join(d.get("runes", [])), style="u16.rune")
    console.print(Text("  units: ", style="u16.key"), _units_text(d.get("units", [])), sep="")
    _field(console, "replacements", d.get("replacements", 0))
    for key in ("path", "byte_order", "byte_length"):
        if key in d:
            _field(console, key, d[key])
    if verbose:
        _render_meta(console, result)


def _render_utf8(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render UTF-8 conversion results."""
    d = result.data
    _status_line(console, result)
    _field(console, "text", d.get("text", ""), style="u16.text")
    _field(console, "utf8", d.get("utf8_hex", ""))
    _field(console, "byte_length", d.get("byte_length", 0))
    _field(console, "replacements", d.get("replacements", 0))
    if verbose:
        _render_meta(console, result)


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
    "decode": _render_decode,
    "encode": _render_encode,
    "utf8": _render_utf8,
}
