"""Rich Console factory and theme for utf16kit output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

UTF16_THEME = Theme(
    {
        "u16.ok": "bold green",
        "u16.error": "bold red",
        "u16.warning": "bold yellow",
        "u16.op": "bold cyan",
        "u16.key": "dim",
        "u16.unit": "bold blue",
        "u16.rune": "magenta",
        "u16.surrogate": "yellow",
        "u16.replacement": "bold red",
        "u16.text": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=UTF16_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_unit(unit: str) -> str:
    """Pick a style for a hex code unit: surrogates and U+FFFD stand out."""
    value = int(unit, 16)
    if value == 0xFFFD:
        return "u16.replacement"
    if 0xD800 <= value < 0xE000:
        return "u16.surrogate"
    return "u16.unit"
