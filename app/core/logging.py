"""Structured logging with structlog and request_id context."""

import logging
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any

import structlog

# Context variable for request correlation
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


def add_request_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Add request_id from context to log events."""
    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    app_name: str | None = None,
) -> None:
    """Configure structlog for the application.

    Args:
        log_level: Minimum level name (DEBUG, INFO, ...).
        log_format: "json" for machine-readable lines, "console" for humans.
        app_name: Optional service name added to every event.
    """
    processors: list[structlog.types.Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_request_id,
    ]
    if app_name:
        processors.append(_static_field("service", app_name))

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(
            ensure_ascii=False
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *processors,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Keep uvicorn/sqlalchemy stdlib loggers at the same threshold
    logging.basicConfig(level=getattr(logging, log_level), format="%(message)s")


def _static_field(key: str, value: str) -> structlog.types.Processor:
    def processor(
        _logger: structlog.types.WrappedLogger,
        _method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        event_dict.setdefault(key, value)
        return event_dict

    return processor


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        Configured structlog logger with request_id binding.
    """
    logger: structlog.typing.FilteringBoundLogger = structlog.get_logger(name)
    return logger
