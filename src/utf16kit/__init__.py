"""utf16kit — UTF-16 to UTF-32/UTF-8 text codec."""

from utf16kit.domain.utf16 import (
    MAX_RUNE,
    REPLACEMENT_CHAR,
    SURR1,
    SURR2,
    SURR3,
    SURR_SELF,
    combine_surrogate_pair,
    decode,
    encode,
    split_to_surrogates,
    wide_to_utf8,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_RUNE",
    "REPLACEMENT_CHAR",
    "SURR1",
    "SURR2",
    "SURR3",
    "SURR_SELF",
    "__version__",
    "combine_surrogate_pair",
    "decode",
    "encode",
    "split_to_surrogates",
    "wide_to_utf8",
]
