"""Application exceptions and their FastAPI handlers.

Errors are rendered as RFC 7807 problem documents. Messages are the generic
Portuguese texts shown to API clients; the underlying cause is only logged.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from app.core.logging import get_logger
from app.core.problem_details import ProblemDetailResponse, problem_response

logger = get_logger(__name__)

GENERIC_DATABASE_MESSAGE = "Erro interno ao consultar o banco de dados."


class SalesDashboardError(Exception):
    """Base exception for application errors."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application error.

        Args:
            message: Client-facing message.
            code: Machine-readable error code.
            status_code: HTTP status code.
            details: Extra context, logged but never returned to the client.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    @property
    def title(self) -> str:
        return self.code.replace("_", " ").title()


class NotFoundError(SalesDashboardError):
    def __init__(
        self,
        message: str = "Recurso não encontrado.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="NOT_FOUND", status_code=404, details=details)


class BadRequestError(SalesDashboardError):
    def __init__(
        self,
        message: str = "Requisição inválida.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="BAD_REQUEST", status_code=400, details=details)


class StoreRejectedError(SalesDashboardError):
    """The database refused a write (constraint violation and the like).

    The client only gets a generic message; which constraint failed is logged.
    """

    def __init__(
        self,
        message: str = "Operação rejeitada pelo banco de dados.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="STORE_REJECTED", status_code=400, details=details)


class DatabaseError(SalesDashboardError):
    """A read or write against the database failed unexpectedly."""

    def __init__(
        self,
        message: str = GENERIC_DATABASE_MESSAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="DATABASE_ERROR", status_code=500, details=details)


async def app_exception_handler(
    _request: Request,
    exc: SalesDashboardError,
) -> ProblemDetailResponse:
    """Render a SalesDashboardError as a problem response."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "app.error_handled",
        error=exc.message,
        error_type=type(exc).__name__,
        error_code=exc.code,
        status_code=exc.status_code,
        details=exc.details,
    )

    return problem_response(
        status=exc.status_code,
        title=exc.title,
        detail=exc.message,
        error_code=exc.code,
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> ProblemDetailResponse:
    """Render request validation failures with per-field errors."""
    field_errors: list[dict[str, str]] = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_path = ".".join(str(part) for part in loc if part != "body")
        field_errors.append(
            {
                "field": field_path,
                "message": str(error.get("msg", "Validation failed")),
                "type": str(error.get("type", "unknown")),
            }
        )

    logger.warning(
        "app.validation_error",
        error_count=len(field_errors),
        path=request.url.path,
        fields=[e["field"] for e in field_errors],
    )

    return problem_response(
        status=422,
        title="Validation Error",
        detail=f"A requisição possui {len(field_errors)} campo(s) inválido(s).",
        error_code="VALIDATION_ERROR",
        errors=field_errors,
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> ProblemDetailResponse:
    """Log an unexpected exception and answer with a generic 500."""
    logger.error(
        "app.unhandled_error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=exc,
    )

    return problem_response(
        status=500,
        title="Internal Server Error",
        detail="Erro interno no servidor.",
        error_code="INTERNAL_ERROR",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(SalesDashboardError, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
