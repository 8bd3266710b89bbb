"""CodecService — decode, encode, and UTF-8 conversion as service operations.

Wraps the pure codec in :mod:`utf16kit.domain.utf16` with token parsing,
byte framing, repair reporting, and telemetry.  The codec never fails;
the only failures here come from input that cannot be turned into
integers (bad tokens, odd byte counts, unreadable files).

Repair reporting: U+FFFD is a valid scalar, so a replacement in the
output only counts as a repair when it was not already in the input.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from utf16kit.domain.framing import (
    FramingError,
    parse_scalar_token,
    strip_bom,
    units_from_bytes,
    units_to_bytes,
)
from utf16kit.domain.utf16 import (
    count_replacements,
    decode,
    encode,
    runes_to_text,
    wide_to_utf8,
)
from utf16kit.services.base import BaseService
from utf16kit.services.result import ServiceResult
from utf16kit.services.telemetry import trace_span, traced

INVALID_INPUT = "INVALID_INPUT"
FILE_ERROR = "FILE_ERROR"

MAX_UNIT = 0xFFFF
MAX_WIDE_CHAR = 0xFFFFFFFF


class InputError(ValueError):
    """A value that cannot be used as codec input."""

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.detail = detail


def format_unit(u: int) -> str:
    return f"{u:04X}"


def format_rune(r: int) -> str:
    if r < 0:
        return f"-U+{-r:04X}"
    return f"U+{r:04X}"


class CodecService(BaseService):
    """UTF-16 codec operations over CLI-style or programmatic input."""

    # ── Decode ────────────────────────────────────────────────────────

    @traced
    def decode_units(self, values: Sequence[int | str]) -> ServiceResult:
        """Decode code units given as integers or numeric tokens."""
        try:
            units = self._parse(values, upper=MAX_UNIT, kind="code unit")
        except InputError as exc:
            return ServiceResult.failure("decode", INVALID_INPUT, str(exc), **exc.detail)
        return self._decode(units)

    @traced
    def decode_bytes(self, data: bytes, *, byte_order: str | None = None) -> ServiceResult:
        """Decode raw UTF-16 bytes in the given (or configured) byte order."""
        units = self._unframe("decode", data, byte_order)
        if isinstance(units, ServiceResult):
            return units
        return self._decode(units)

    @traced
    def decode_file(self, path: Path, *, byte_order: str | None = None) -> ServiceResult:
        """Read *path* and decode its contents as UTF-16 bytes."""
        data = self._read("decode", path)
        if isinstance(data, ServiceResult):
            return data
        units = self._unframe("decode", data, byte_order)
        if isinstance(units, ServiceResult):
            return units
        return self._decode(units)

    def _decode(self, units: list[int]) -> ServiceResult:
        with trace_span("decode") as span:
            runes = decode(units)
            if span:
                span.annotate("units", len(units))
                span.annotate("runes", len(runes))

        repaired = count_replacements(runes) - count_replacements(units)
        self._log.debug("decode", units=len(units), runes=len(runes), repaired=repaired)

        warnings = self._repair_warnings(repaired, "code unit")
        return ServiceResult(
            ok=True,
            op="decode",
            data={
                "units": [format_unit(u) for u in units],
                "runes": [format_rune(r) for r in runes],
                "text": runes_to_text(runes),
                "replacements": repaired,
            },
            warnings=warnings,
        )

    # ── Encode ────────────────────────────────────────────────────────

    @traced
    def encode_runes(
        self,
        values: Sequence[int | str],
        *,
        output: Path | None = None,
        byte_order: str | None = None,
    ) -> ServiceResult:
        """Encode scalar values to UTF-16 code units.

        Any integer is accepted; values that are not Unicode scalars are
        repaired by the codec.  With *output*, the units are also written
        as bytes in the given (or configured) byte order.
        """
        try:
            runes = self._parse(values, kind="scalar")
        except InputError as exc:
            return ServiceResult.failure("encode", INVALID_INPUT, str(exc), **exc.detail)
        return self._encode(runes, output=output, byte_order=byte_order)

    @traced
    def encode_text(
        self,
        text: str,
        *,
        output: Path | None = None,
        byte_order: str | None = None,
    ) -> ServiceResult:
        """Encode a Python string; lone surrogates in *text* are repaired."""
        return self._encode([ord(ch) for ch in text], output=output, byte_order=byte_order)

    def _encode(
        self,
        runes: list[int],
        *,
        output: Path | None,
        byte_order: str | None,
    ) -> ServiceResult:
        with trace_span("encode") as span:
            units = encode(runes)
            if span:
                span.annotate("runes", len(runes))
                span.annotate("units", len(units))

        repaired = count_replacements(units) - count_replacements(runes)
        self._log.debug("encode", runes=len(runes), units=len(units), repaired=repaired)

        data: dict[str, Any] = {
            "runes": [format_rune(r) for r in runes],
            "units": [format_unit(u) for u in units],
            "hex": " ".join(format_unit(u) for u in units),
            "replacements": repaired,
        }

        if output is not None:
            order = byte_order or self._settings.codec.byte_order
            payload = units_to_bytes(units, order)
            try:
                output.write_bytes(payload)
            except OSError as exc:
                return ServiceResult.failure(
                    "encode", FILE_ERROR, f"Cannot write {output}: {exc}", path=str(output)
                )
            data["path"] = str(output)
            data["byte_order"] = order
            data["byte_length"] = len(payload)

        return ServiceResult(
            ok=True,
            op="encode",
            data=data,
            warnings=self._repair_warnings(repaired, "scalar"),
        )

    # ── UTF-8 ─────────────────────────────────────────────────────────

    @traced
    def to_utf8(self, values: Sequence[int | str]) -> ServiceResult:
        """Convert wide characters to UTF-8 text.

        Values up to 32 bits are accepted and narrowed to 16 bits, the way
        a platform wide-character buffer is read.
        """
        try:
            wide = self._parse(values, upper=MAX_WIDE_CHAR, kind="wide character")
        except InputError as exc:
            return ServiceResult.failure("utf8", INVALID_INPUT, str(exc), **exc.detail)
        return self._to_utf8(wide)

    @traced
    def bytes_to_utf8(self, data: bytes, *, byte_order: str | None = None) -> ServiceResult:
        """Convert raw UTF-16 bytes to UTF-8 text."""
        units = self._unframe("utf8", data, byte_order)
        if isinstance(units, ServiceResult):
            return units
        return self._to_utf8(units)

    @traced
    def file_to_utf8(self, path: Path, *, byte_order: str | None = None) -> ServiceResult:
        """Read UTF-16 bytes from *path* and convert them to UTF-8 text."""
        data = self._read("utf8", path)
        if isinstance(data, ServiceResult):
            return data
        units = self._unframe("utf8", data, byte_order)
        if isinstance(units, ServiceResult):
            return units
        return self._to_utf8(units)

    def _to_utf8(self, wide: list[int]) -> ServiceResult:
        with trace_span("wide_to_utf8") as span:
            text = wide_to_utf8(wide, len(wide))
            if span:
                span.annotate("units", len(wide))

        encoded = text.encode("utf-8")
        narrowed = sum(1 for w in wide if w > MAX_UNIT)
        repaired = text.count("\ufffd") - sum(1 for w in wide if w & MAX_UNIT == 0xFFFD)
        self._log.debug("utf8", units=len(wide), bytes=len(encoded), repaired=repaired)

        warnings = self._repair_warnings(repaired, "code unit")
        if narrowed:
            warnings.append(f"Narrowed {narrowed} wide character(s) wider than 16 bits")
        return ServiceResult(
            ok=True,
            op="utf8",
            data={
                "text": text,
                "utf8_hex": encoded.hex(" ").upper(),
                "byte_length": len(encoded),
                "replacements": repaired,
            },
            warnings=warnings,
        )

    # ── Helpers ───────────────────────────────────────────────────────

    def _parse(
        self,
        values: Sequence[int | str],
        *,
        kind: str,
        upper: int | None = None,
    ) -> list[int]:
        """Turn tokens into integers; enforce ``0 <= v <= upper`` when *upper* is set."""
        base = self._settings.codec.number_base
        out: list[int] = []
        with trace_span("parse"):
            for index, value in enumerate(values):
                if isinstance(value, str):
                    try:
                        number = parse_scalar_token(value, default_base=base)
                    except ValueError:
                        msg = f"Invalid {kind} {value!r} at position {index}"
                        raise InputError(msg, index=index, token=value) from None
                elif isinstance(value, int) and not isinstance(value, bool):
                    number = value
                else:
                    msg = f"Invalid {kind} {value!r} at position {index}: not an integer"
                    raise InputError(msg, index=index, token=repr(value))
                if upper is not None and not 0 <= number <= upper:
                    msg = f"{kind.capitalize()} {value!r} at position {index} is out of range"
                    raise InputError(msg, index=index, token=str(value), max=upper)
                out.append(number)
        return out

    def _read(self, op: str, path: Path) -> bytes | ServiceResult:
        try:
            return path.read_bytes()
        except OSError as exc:
            self._log.debug("read_failed", path=str(path), exc_info=True)
            msg = f"Cannot read {path}: {exc}"
            return ServiceResult.failure(op, FILE_ERROR, msg, path=str(path))

    def _unframe(self, op: str, data: bytes, byte_order: str | None) -> list[int] | ServiceResult:
        """Split raw bytes into code units; a leading BOM is dropped when configured."""
        order = byte_order or self._settings.codec.byte_order
        try:
            units = units_from_bytes(data, order)
        except FramingError as exc:
            return ServiceResult.failure(
                op, INVALID_INPUT, str(exc), byte_length=len(data), byte_order=order
            )
        if self._settings.codec.strip_bom:
            units = strip_bom(units)
        return units

    def _repair_warnings(self, repaired: int, kind: str) -> list[str]:
        if repaired <= 0 or not self._settings.codec.warn_on_replacement:
            return []
        return [f"Replaced {repaired} malformed {kind}(s) with U+FFFD"]
