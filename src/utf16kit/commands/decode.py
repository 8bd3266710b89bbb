"""Command: decode UTF-16 code units to scalar values."""

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
  utf16kit decode D83D DE00
  utf16kit decode 0x0041 0xD800 0x0042
  utf16kit decode --file message.utf16 --byte-order be
  printf 'A\\0' | utf16kit -q decode --file -
  utf16kit --json decode DC00""",
)
@click.argument("units", nargs=-1)
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default=None,
    help="Read raw UTF-16 bytes from a file ('-' for stdin).",
)
@click.option("--byte-order", type=BYTE_ORDER_CHOICE, default=None, help="Byte order of --file.")
@click.pass_obj
def decode(
    app: AppContext,
    units: tuple[str, ...],
    file_path: Path | None,
    byte_order: str | None,
) -> None:
    """Decode UTF-16 code units into Unicode scalar values."""
    if units and file_path is not None:
        raise click.UsageError("Pass code units or --file, not both.")
    if file_path is None and not units:
        raise click.UsageError("Nothing to decode: pass code units or --file.")

    order = byte_order.lower() if byte_order else None
    if file_path is None:
        app.emit(app.codec.decode_units(units))
    elif str(file_path) == "-":
        data = click.get_binary_stream("stdin").read()
        app.emit(app.codec.decode_bytes(data, byte_order=order))
    else:
        app.emit(app.codec.decode_file(file_path, byte_order=order))
