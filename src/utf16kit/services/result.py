"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any future interface consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"decode"``, ``"encode"``, ``"utf8"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, e.g. replacement characters inserted
            while repairing malformed input.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls, op: str, code: str, message: str, **detail: Any
    ) -> ServiceResult:
        """Build a failed result carrying a single :class:`ServiceError`."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
