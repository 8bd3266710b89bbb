"""Byte framing for UTF-16 code units and parsing of numeric tokens.

Code units arrive as raw little- or big-endian bytes (files, pipes) or as
textual tokens on the command line (``D83D``, ``0xDE00``, ``U+1F600``).
"""

from __future__ import annotations

import re
import struct
from collections.abc import Sequence
from enum import StrEnum

BOM = 0xFEFF

_STRUCT_PREFIX: dict[str, str] = {"le": "<", "be": ">"}

_TOKEN_PREFIXES = re.compile(r"^(?:u\+|\\u|\\U)", re.IGNORECASE)
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class ByteOrder(StrEnum):
    """Byte order of serialized 16-bit code units."""

    LE = "le"
    BE = "be"


class FramingError(ValueError):
    """Raised when bytes cannot be split into whole 16-bit code units."""


def units_from_bytes(data: bytes, byte_order: str = ByteOrder.LE) -> list[int]:
    """Unpack *data* into 16-bit code units.

    Raises:
        FramingError: *data* has an odd length.
    """
    if len(data) % 2:
        msg = f"UTF-16 data must have an even byte length, got {len(data)}"
        raise FramingError(msg)
    prefix = _STRUCT_PREFIX[ByteOrder(byte_order)]
    return list(struct.unpack(f"{prefix}{len(data) // 2}H", data))


def units_to_bytes(units: Sequence[int], byte_order: str = ByteOrder.LE) -> bytes:
    """Pack 16-bit code units into bytes."""
    prefix = _STRUCT_PREFIX[ByteOrder(byte_order)]
    return struct.pack(f"{prefix}{len(units)}H", *units)


def strip_bom(units: Sequence[int]) -> list[int]:
    """Drop a leading byte-order mark, if present."""
    if units and units[0] == BOM:
        return list(units[1:])
    return list(units)


def parse_scalar_token(token: str, default_base: int = 16) -> int:
    """Parse one numeric token into an integer.

    Accepts ``0x``/``0o``/``0b`` prefixed literals, ``U+XXXX`` and
    ``\\uXXXX`` notation (always hex), and bare digits in *default_base*.
    A leading ``-`` is kept so negative scalars can be expressed.

    Examples:
        >>> parse_scalar_token("U+1F600")
        128512
        >>> parse_scalar_token("0x41")
        65
        >>> parse_scalar_token("65", default_base=10)
        65

    Raises:
        ValueError: *token* is not a number in any accepted notation.
    """
    text = token.strip()
    sign = 1
    if text.startswith("-"):
        sign, text = -1, text[1:]
    if not text or text[0] in "+-":
        msg = f"Malformed numeric token: {token!r}"
        raise ValueError(msg)
    if _TOKEN_PREFIXES.match(text):
        digits = _TOKEN_PREFIXES.sub("", text, count=1)
        if not _HEX_DIGITS.fullmatch(digits):
            msg = f"Invalid hex digits in {token!r}"
            raise ValueError(msg)
        return sign * int(digits, 16)
    if text[:2].lower() in ("0x", "0o", "0b"):
        return sign * int(text, 0)
    return sign * int(text, default_base)
