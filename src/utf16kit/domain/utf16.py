"""UTF-16 encoding and decoding of Unicode scalar values.

Code units are 16-bit integers; scalars ("runes") are integers in
``0..MAX_RUNE`` or the replacement value ``REPLACEMENT_CHAR``.

INVARIANT: Nothing in this module raises on malformed input. Unpaired
surrogates (decode) and unencodable scalars (encode) are each replaced by
exactly one U+FFFD and processing continues.

See https://en.wikipedia.org/wiki/UTF-16
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

REPLACEMENT_CHAR = 0xFFFD

SURR1 = 0xD800  # high surrogates: [SURR1, SURR2)
SURR2 = 0xDC00  # low surrogates: [SURR2, SURR3)
SURR3 = 0xE000
SURR_SELF = 0x10000  # first scalar that needs a surrogate pair
MAX_RUNE = 0x10FFFF

_TEN_BITS = 0x3FF


def is_surrogate(r: int) -> bool:
    """Report whether *r* falls in the surrogate range and cannot stand alone."""
    return SURR1 <= r < SURR3


def combine_surrogate_pair(r1: int, r2: int) -> int:
    """Return the scalar encoded by the surrogate pair *r1*, *r2*.

    Returns ``REPLACEMENT_CHAR`` unless *r1* is a high surrogate and *r2*
    a low surrogate.

    Examples:
        >>> hex(combine_surrogate_pair(0xD83D, 0xDE00))
        '0x1f600'
        >>> hex(combine_surrogate_pair(0xDE00, 0xD83D))
        '0xfffd'
    """
    if SURR1 <= r1 < SURR2 and SURR2 <= r2 < SURR3:
        return (((r1 - SURR1) << 10) | (r2 - SURR2)) + SURR_SELF
    return REPLACEMENT_CHAR


def split_to_surrogates(r: int) -> tuple[int, int]:
    """Return the ``(high, low)`` surrogate pair encoding *r*.

    Scalars below ``SURR_SELF`` or above ``MAX_RUNE`` have no pair and
    yield ``(REPLACEMENT_CHAR, REPLACEMENT_CHAR)``.

    Examples:
        >>> [hex(u) for u in split_to_surrogates(0x1F600)]
        ['0xd83d', '0xde00']
    """
    if r < SURR_SELF or r > MAX_RUNE:
        return REPLACEMENT_CHAR, REPLACEMENT_CHAR
    r -= SURR_SELF
    return SURR1 + ((r >> 10) & _TEN_BITS), SURR2 + (r & _TEN_BITS)


def rune_len(r: int) -> int:
    """Number of code units needed to encode *r*, or -1 if it is not encodable."""
    if 0 <= r < SURR1 or SURR3 <= r < SURR_SELF:
        return 1
    if SURR_SELF <= r <= MAX_RUNE:
        return 2
    return -1


def append_rune(units: list[int], r: int) -> list[int]:
    """Append the UTF-16 encoding of *r* to *units* and return *units*."""
    if 0 <= r < SURR1 or SURR3 <= r < SURR_SELF:
        units.append(r)
    elif SURR_SELF <= r <= MAX_RUNE:
        units.extend(split_to_surrogates(r))
    else:
        units.append(REPLACEMENT_CHAR)
    return units


def decode(units: Sequence[int]) -> list[int]:
    """Decode a sequence of UTF-16 code units into scalar values.

    A high surrogate followed by a low surrogate yields one scalar. Every
    other surrogate (lone, misordered, or dangling at the end) yields one
    ``REPLACEMENT_CHAR``. The result is never longer than *units*.
    """
    runes: list[int] = []
    n = len(units)
    i = 0
    while i < n:
        r = units[i]
        if r < SURR1 or SURR3 <= r:
            runes.append(r)
        elif SURR1 <= r < SURR2 and i + 1 < n and SURR2 <= units[i + 1] < SURR3:
            runes.append(combine_surrogate_pair(r, units[i + 1]))
            i += 1
        else:
            runes.append(REPLACEMENT_CHAR)
        i += 1
    return runes


def encode(runes: Sequence[int]) -> list[int]:
    """Encode scalar values as UTF-16 code units.

    Scalars above the BMP become a surrogate pair. Negative values,
    surrogate code points and values above ``MAX_RUNE`` each become one
    ``REPLACEMENT_CHAR``.
    """
    units: list[int] = []
    for r in runes:
        append_rune(units, r)
    return units


def runes_to_text(runes: Iterable[int]) -> str:
    """Join scalar values into a ``str``.

    Values that are not valid scalars become U+FFFD so the result always
    encodes to UTF-8.
    """
    return "".join(
        chr(r) if 0 <= r <= MAX_RUNE and not is_surrogate(r) else chr(REPLACEMENT_CHAR)
        for r in runes
    )


def wide_to_utf8(units: Sequence[int | str], length: int) -> str:
    """Decode the first *length* wide characters of *units* into text.

    Elements may be integers or one-character strings (as found in a
    ``ctypes.c_wchar`` array). Each is narrowed to 16 bits without checking
    the platform wide-character width. *units* is only read.
    """
    code_units = [0] * length
    for i in range(length):
        wc = units[i]
        code_units[i] = (ord(wc) if isinstance(wc, str) else wc) & 0xFFFF
    return runes_to_text(decode(code_units))


def wide_to_utf8_bytes(units: Sequence[int | str], length: int) -> bytes:
    """Like :func:`wide_to_utf8` but return UTF-8 encoded bytes."""
    return wide_to_utf8(units, length).encode("utf-8")


def count_replacements(values: Iterable[int]) -> int:
    """Count ``REPLACEMENT_CHAR`` occurrences in a unit or scalar sequence.

    A count above zero does not prove corruption: U+FFFD is itself a
    valid, encodable scalar.
    """
    return sum(1 for v in values if v == REPLACEMENT_CHAR)
