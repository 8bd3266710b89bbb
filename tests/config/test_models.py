"""Tests for the pydantic config models."""

import pytest
from pydantic import ValidationError

from utf16kit.config.models import CodecConfig


class TestCodecConfig:
    def test_defaults(self) -> None:
        cfg = CodecConfig()
        assert cfg.byte_order == "le"
        assert cfg.strip_bom is True
        assert cfg.warn_on_replacement is True
        assert cfg.number_base == 16

    def test_frozen(self) -> None:
        cfg = CodecConfig()
        with pytest.raises(ValidationError):
            cfg.byte_order = "be"  # type: ignore[misc]

    def test_rejects_unknown_byte_order(self) -> None:
        with pytest.raises(ValidationError):
            CodecConfig(byte_order="middle")  # type: ignore[arg-type]

    @pytest.mark.parametrize("base", [2, 8, 0, 36])
    def test_rejects_other_bases(self, base: int) -> None:
        with pytest.raises(ValidationError, match="number_base"):
            CodecConfig(number_base=base)

    def test_accepts_decimal(self) -> None:
        assert CodecConfig(number_base=10).number_base == 10

