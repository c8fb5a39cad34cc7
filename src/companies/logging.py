"""
Structured logging for the Companies service.

Request and resolver context travel in structlog's context variables, so
every event logged while handling a request carries its request ID and,
inside a resolver, the GraphQL operation and company ID it works on.
"""

import logging
import re
import secrets
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.contextvars import (
    bind_contextvars,
    bound_contextvars,
    clear_contextvars,
    get_contextvars,
    merge_contextvars,
)

# Client-supplied request IDs are echoed in headers and logs
REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        debug: Human-readable console output when True, JSON lines otherwise.
        log_level: Explicit level name; defaults to DEBUG in debug mode, else INFO.
    """
    if log_level:
        level = logging.getLevelName(log_level.upper())
    else:
        level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s", force=True)

    processors: list[Any] = [
        merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance (typically for ``__name__``)."""
    return structlog.get_logger(name)


def new_request_id() -> str:
    """A random 16-character URL-safe request ID."""
    return secrets.token_urlsafe(12)


def is_valid_request_id(value: str | None) -> bool:
    return value is not None and REQUEST_ID_PATTERN.fullmatch(value) is not None


def set_request_context(request_id: str | None = None) -> str:
    """Start a fresh logging context for one request.

    An absent or malformed ``request_id`` is replaced by a generated one.

    Returns:
        The request ID bound to the context
    """
    if not is_valid_request_id(request_id):
        request_id = new_request_id()

    clear_contextvars()
    bind_contextvars(request_id=request_id)
    return request_id


def clear_request_context() -> None:
    clear_contextvars()


def get_request_id() -> str | None:
    return get_contextvars().get("request_id")


@contextmanager
def operation_context(operation: str, **fields: Any) -> Iterator[None]:
    """Bind a GraphQL operation (and e.g. ``company_id``) to every event logged inside."""
    with bound_contextvars(graphql_operation=operation, **fields):
        yield
