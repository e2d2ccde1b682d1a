"""Structured logging for the tmdbapi package using structlog.

All loggers live under the ``tmdbapi`` namespace. configure_logging() gives
that namespace its own handler: JSON output in production, console output
for local development. Request URLs carry the API key in the query string,
so the censoring processor masks both key-named fields and api_key query
values.
"""

import logging
import re
import sys
from typing import Any, TextIO

import structlog
from structlog.types import EventDict, Processor

from tmdbapi.config import settings

LOGGER_NAME = "tmdbapi"
_HANDLER_NAME = "tmdbapi.structlog"

_QUERY_SECRET_RE = re.compile(r"((?:api_key|session_id|request_token)=)[^&\s]+")


def add_log_level(_logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add log level to the event dict."""
    if method_name == "warn":
        # Structlog uses "warn", but we want "warning"
        event_dict["level"] = "warning"
    else:
        event_dict["level"] = method_name
    return event_dict


def censor_sensitive_data(
    _logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Censor sensitive data from log events.

    Masks fields that may contain API keys, session ids or request tokens,
    including values embedded in URL query strings.
    """
    sensitive_keys = {
        "token",
        "password",
        "api_key",
        "secret",
        "authorization",
        "session",
        "credentials",
    }

    def _censor_value(key: str, value: Any) -> Any:
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in sensitive_keys):
            return "***"
        if isinstance(value, dict):
            return {k: _censor_value(k, v) for k, v in value.items()}
        if isinstance(value, list):
            return [_censor_value(key, item) if isinstance(item, dict) else item for item in value]
        if isinstance(value, str):
            return _QUERY_SECRET_RE.sub(r"\1***", value)
        return value

    censored: EventDict = {}
    for key, value in event_dict.items():
        censored[key] = _censor_value(key, value)
    return censored


def configure_logging(stream: TextIO | None = None) -> None:
    """Attach a structlog-rendered handler to the ``tmdbapi`` logger.

    Logging is opt-in: on import the package only attaches a NullHandler
    to the ``tmdbapi`` logger. The host application either calls this or
    routes that logger itself. The root logger and its handlers are left
    alone, and records handled here do not propagate further.

    Output format depends on the environment:
    - Production: JSON format for log aggregation
    - Development: Console-friendly colored output

    Calling it again replaces the handler installed by the previous call.
    structlog itself is only configured if the application has not already
    done so.

    Args:
        stream: Output stream, stdout by default
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        censor_sensitive_data,
    ]

    if settings.is_production:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    if not structlog.is_configured():
        structlog.configure(
            processors=shared_processors
            + [
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    # Plain stdlib records (and structlog events rendered elsewhere) are
    # stamped and censored the same way.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            censor_sensitive_data,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)
    handler.set_name(_HANDLER_NAME)

    package_logger = logging.getLogger(LOGGER_NAME)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, settings.log_level.upper()))
    package_logger.propagate = False


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional logger name. If not provided, uses the caller's module name.

    Returns:
        Configured structlog logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("tmdb_get_movie", movie_id=550)
    """
    return structlog.get_logger(name)

