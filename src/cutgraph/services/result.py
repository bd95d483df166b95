"""What every cutgraph service call returns.

Invalid edits (self-loops, duplicate edges, unknown ids) are not failures:
they come back ``ok`` with ``changed: False`` and a warning. ``ok=False`` is
reserved for requests that cannot be served at all, such as an unknown
example name, and the CLI turns it into exit code 1.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a request failed, e.g. ``UNKNOWN_EXAMPLE`` with the valid names."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one graph edit, analysis or check.

    Attributes:
        ok: False only when the request could not be served.
        op: Service method name, used to pick a renderer.
        data: JSON-safe payload; edge keys are ``[low, high]`` lists.
        warnings: Rejected edits and palette overflow notes.
        error: Set exactly when ``ok`` is False.
        meta: ``{"telemetry": ...}`` span tree under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
