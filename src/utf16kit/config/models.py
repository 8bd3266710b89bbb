"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, utf16kit.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    byte_order: Literal["le", "be"] = "le"
    strip_bom: bool = True
    warn_on_replacement: bool = True
    number_base: int = 16

    @field_validator("number_base")
    @classmethod
    def _check_base(cls, value: int) -> int:
        if value not in (10, 16):
            msg = f"number_base must be 10 or 16, got {value}"
            raise ValueError(msg)
        return value

