"""RFC 7807 Problem Details for HTTP APIs.

Reference: https://datatracker.ietf.org/doc/html/rfc7807
"""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from app.core.logging import request_id_ctx

ERROR_TYPE_BASE = "/errors"

ERROR_TYPES = {
    "NOT_FOUND": f"{ERROR_TYPE_BASE}/not-found",
    "VALIDATION_ERROR": f"{ERROR_TYPE_BASE}/validation",
    "DATABASE_ERROR": f"{ERROR_TYPE_BASE}/database",
    "STORE_REJECTED": f"{ERROR_TYPE_BASE}/store-rejected",
    "BAD_REQUEST": f"{ERROR_TYPE_BASE}/bad-request",
    "INTERNAL_ERROR": f"{ERROR_TYPE_BASE}/internal",
}


class ProblemDetail(BaseModel):
    """RFC 7807 problem document.

    Attributes:
        type: URI identifying the error category.
        title: Short summary of the problem type.
        status: HTTP status code.
        detail: Explanation specific to this occurrence.
        instance: URI reference for this occurrence.
        errors: Field-level validation errors (422 only).
        code: Machine-readable error code.
        request_id: Request correlation ID.
    """

    model_config = ConfigDict(extra="allow")

    type: str = Field(default="about:blank")
    title: str
    status: int = Field(..., ge=400, le=599)
    detail: str | None = None
    instance: str | None = None
    errors: list[dict[str, Any]] | None = None
    code: str | None = None
    request_id: str | None = None


class ProblemDetailResponse(JSONResponse):
    """JSON response with the problem+json media type."""

    media_type = "application/problem+json"


def problem_response(
    status: int,
    title: str,
    detail: str | None = None,
    error_code: str = "INTERNAL_ERROR",
    errors: list[dict[str, Any]] | None = None,
) -> ProblemDetailResponse:
    """Build a problem+json response tagged with the current request id.

    Args:
        status: HTTP status code.
        title: Short problem summary.
        detail: Detailed explanation (optional).
        error_code: Internal error code for type URI lookup.
        errors: Field-level validation errors (optional).

    Returns:
        Response carrying a serialized ``ProblemDetail``.
    """
    request_id = request_id_ctx.get()
    problem = ProblemDetail(
        type=ERROR_TYPES.get(error_code, f"{ERROR_TYPE_BASE}/{error_code.lower()}"),
        title=title,
        status=status,
        detail=detail,
        instance=f"/requests/{request_id}" if request_id else None,
        errors=errors,
        code=error_code,
        request_id=request_id,
    )
    return ProblemDetailResponse(
        status_code=status,
        content=problem.model_dump(exclude_none=True),
    )
