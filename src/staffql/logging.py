"""
Centralized logging configuration using structlog

Request-scoped fields (request id, authenticated user, GraphQL operation)
are bound with ``structlog.contextvars`` by the request middleware and merged
into every event logged while the request is handled.
"""

import logging
import secrets
import sys
import time
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

# Substrings of event keys whose values must never reach the log output
SENSITIVE_KEYS = frozenset(
    {
        "password",
        "token",
        "secret",
        "auth",
        "key",
        "jwt",
        "session",
        "cookie",
        "credentials",
    }
)

REDACTED = "[REDACTED]"


def is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(sensitive in lowered for sensitive in SENSITIVE_KEYS)


def redact_secrets(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Replace the values of credential-like keys before rendering."""
    _ = logger, method_name

    for key in list(event_dict):
        if key != "event" and is_sensitive(key):
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog for the service.

    Args:
        debug: Render coloured console output instead of JSON lines.
        level: Level name such as "warning"; defaults to DEBUG in debug mode, else INFO.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    if level:
        named = logging.getLevelName(level.upper())
        if isinstance(named, int):
            log_level = named

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            redact_secrets,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)


def new_request_id() -> str:
    """Return a short, sortable request id: hex seconds plus 48 random bits."""
    return f"{int(time.time()):x}-{secrets.token_hex(6)}"


def bind_request_context(
    user_id: str | None = None,
    graphql_operation: str | None = None,
    request_id: str | None = None,
) -> str:
    """Start a fresh log context for one HTTP request.

    ``user_id`` is the ``sub`` of a verified bearer token. Fields left as None
    are not bound. Returns the request id in use.
    """
    clear_contextvars()
    request_id = request_id or new_request_id()

    fields: dict[str, Any] = {"request_id": request_id}
    if user_id:
        fields["user_id"] = user_id
    if graphql_operation:
        fields["graphql_operation"] = graphql_operation
    bind_contextvars(**fields)
    return request_id


def clear_request_context() -> None:
    """Drop every request-scoped field."""
    clear_contextvars()
