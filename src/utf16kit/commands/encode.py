"""Command: encode scalar values as UTF-16 code units."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from utf16kit.commands._base import BYTE_ORDER_CHOICE, Utf16Command

if TYPE_CHECKING:
    from utf16kit.commands._context import AppContext


@click.command(
    cls=Utf16Command,
    examples="""\
  utf16kit encode U+1F600
  utf16kit encode 0x41 0x10FFFF
  utf16kit encode --text "naïve 😀"
  utf16kit encode --text "hello" --output hello.utf16 --byte-order be""",
)
@click.argument("runes", nargs=-1)
@click.option("--text", default=None, help="Encode the characters of TEXT instead of RUNES.")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Also write the code units as raw bytes to this file.",
)
@click.option("--byte-order", type=BYTE_ORDER_CHOICE, default=None, help="Byte order of --output.")
@click.pass_obj
def encode(
    app: AppContext,
    runes: tuple[str, ...],
    text: str | None,
    output: Path | None,
    byte_order: str | None,
) -> None:
    """Encode Unicode scalar values as UTF-16 code units."""
    if runes and text is not None:
        raise click.UsageError("Pass scalar values or --text, not both.")
    if text is None and not runes:
        raise click.UsageError("Nothing to encode: pass scalar values or --text.")

    order = byte_order.lower() if byte_order else None
    if text is not None:
        app.emit(app.codec.encode_text(text, output=output, byte_order=order))
    else:
        app.emit(app.codec.encode_runes(runes, output=output, byte_order=order))
