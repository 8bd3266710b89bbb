"""BaseService — foundation for utf16kit services.

Every service receives the resolved :class:`Utf16Settings` at construction
time. The codec itself is pure; services add input parsing, byte framing,
repair reporting, and logging around it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from utf16kit.config.logging import get_logger

if TYPE_CHECKING:
    from utf16kit.config.settings import Utf16Settings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CodecService(BaseService):
            def decode_units(self, units) -> ServiceResult:
                self._log.debug("decode", count=len(units))
                ...
    """

    def __init__(self, settings: Utf16Settings) -> None:
        self._settings = settings
        self._log = get_logger(type(self).__module__)

    @property
    def settings(self) -> Utf16Settings:
        return self._settings
