"""
Structured logging configuration using structlog.

Console output while developing, JSON lines everywhere else. Events logged
while serving a request carry the request id and the purchasing session it
belongs to, so one cart's adds, orders and receipts can be followed in the
log stream.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from salonstock.config.settings import get_settings

# Visible prefix of a session id in log events
SESSION_ID_PREFIX = 8


def bind_request_context(request_id: str, session_id: str | None = None) -> None:
    """Start a fresh log context for one request."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)
    if session_id:
        structlog.contextvars.bind_contextvars(session_id=session_id)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add the service identity and shorten session ids."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment

    # Session ids are cart keys, only a prefix is logged
    session_id = event_dict.get("session_id")
    if isinstance(session_id, str) and len(session_id) > SESSION_ID_PREFIX:
        event_dict["session_id"] = session_id[:SESSION_ID_PREFIX] + "..."
    return event_dict


def configure_logging() -> None:
    """Configure structlog and the stdlib root logger for the service."""
    settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    if settings.environment == "development":
        renderer: list[Processor] = [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]
    else:
        renderer = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )

    # Request timing is logged by LoggingMiddleware
    for noisy in ("aiosqlite", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
