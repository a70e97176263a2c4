"""ServiceResult and ServiceError — the remote service contract.

INVARIANT: All service-layer methods return ServiceResult.
Device status lines travel in ``data["messages"]``; plugin failures in
``warnings``; a failed run never touches a device.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Error codes reported in :class:`ServiceError`."""

    UNKNOWN_ACTION = "UNKNOWN_ACTION"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every remote service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"demo"``, ``"run"``, ``"run_batch"``,
            ``"list_actions"``); also selects the human renderer.
        data: Final device state and status messages on success.
        warnings: Plugin failures encountered while dispatching events.
        error: Structured error if ``ok`` is False.
        meta: Button presses and elapsed time (shown with ``--verbose``).
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
        cls, op: str, code: ErrorCode, message: str, **detail: Any
    ) -> ServiceResult:
        """Build a failed result carrying a single :class:`ServiceError`."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
