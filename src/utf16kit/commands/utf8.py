"""Command: convert wide characters straight to UTF-8 text."""

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
  utf16kit utf8 0048 0069 D83D DE00
  utf16kit -q utf8 --file notes.utf16 > notes.txt
  cat wide.bin | utf16kit -q utf8 --file - --byte-order be
  utf16kit --json utf8 0x0001F600""",
)
@click.argument("units", nargs=-1)
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
    default=None,
    help="Read raw UTF-16 bytes from a file ('-' for stdin).",
)
@click.option("--byte-order", type=BYTE_ORDER_CHOICE, default=None, help="Byte order of --file.")
@click.pass_obj
def utf8(
    app: AppContext,
    units: tuple[str, ...],
    file_path: Path | None,
    byte_order: str | None,
) -> None:
    """Convert wide characters (narrowed to 16 bits) to UTF-8 text."""
    if units and file_path is not None:
        raise click.UsageError("Pass wide characters or --file, not both.")
    if file_path is None and not units:
        raise click.UsageError("Nothing to convert: pass wide characters or --file.")

    order = byte_order.lower() if byte_order else None
    if file_path is None:
        app.emit(app.codec.to_utf8(units))
    elif str(file_path) == "-":
        data = click.get_binary_stream("stdin").read()
        app.emit(app.codec.bytes_to_utf8(data, byte_order=order))
    else:
        app.emit(app.codec.file_to_utf8(file_path, byte_order=order))
