"""ServiceResult and ServiceError — what every service operation returns.

INVARIANT: exactly one of ``data`` (ok) or ``error`` (not ok) is meaningful.
The CLI renders these; ``simulate`` collapses them to a report string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from roverctl.domain.errors import RoverInputError


class ServiceError(BaseModel):
    """Why an operation failed: a stable code plus the sentence for the user."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_input_error(cls, exc: RoverInputError) -> ServiceError:
        detail: dict[str, Any] = {"reason": exc.detail} if exc.detail else {}
        return cls(code=exc.code, message=exc.user_message, detail=detail)


class ServiceResult(BaseModel):
    """Outcome of one operation (``"simulate"`` or ``"validate"``).

    ``meta`` only carries telemetry spans, and only under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, exc: RoverInputError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_input_error(exc))
