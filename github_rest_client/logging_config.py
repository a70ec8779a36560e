"""Structured logging for applications using the client.

The library only asks structlog for loggers (``github_request``,
``rate_limit_exhausted``, ...). ``configure_logging`` routes those events
and plain stdlib records through the root logger, rendered as JSON or as
console lines, with credentials scrubbed from every event.
"""

from __future__ import annotations

import logging
import sys
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import structlog

# Query parameters and event keys never written to a log
SECRET_QUERY_PARAMS = frozenset({"client_secret", "access_token", "token"})
SECRET_EVENT_KEYS = frozenset({"authorization", "token", "password", "otp", "private_key"})

REDACTED = "REDACTED"

# Chatty transport loggers, kept at WARNING unless debugging
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def _redact_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [(k, REDACTED if k in SECRET_QUERY_PARAMS else v) for k, v in parse_qsl(parts.query, keep_blank_values=True)]
    return urlunsplit(parts._replace(query=urlencode(query, safe=":/,")))


def redact_credentials(logger, method_name, event_dict):
    """structlog processor masking tokens in event keys and request URLs."""
    for key in event_dict.keys() & SECRET_EVENT_KEYS:
        event_dict[key] = REDACTED
    url = event_dict.get("url")
    if isinstance(url, str):
        event_dict["url"] = _redact_url(url)
    return event_dict


def configure_logging(*, json_logs: bool = False, log_level: str = "WARNING") -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        json_logs: Render one JSON object per line instead of console output.
        log_level: Root log level name (e.g. ``"INFO"``, ``"DEBUG"``).
    """
    level = log_level.upper()
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        redact_credentials,
    ]

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )

    # stdout is reserved for CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    transport_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
