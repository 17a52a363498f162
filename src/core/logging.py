"""Structured logging configuration."""

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars

from core.config import settings

_configured = False


def add_app_name(
    logger: Any, method_name: str, event_dict: structlog.typing.EventDict
) -> structlog.typing.EventDict:
    """Tag every event with the configured application name."""
    event_dict.setdefault("app", settings.app_name)
    return event_dict


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog on top of the standard library logging module.

    Safe to call more than once; only the first call has an effect.

    Args:
        level: Log level name, defaults to ``settings.log_level``.
        json_logs: Render JSON instead of console output. Defaults to
            ``settings.log_json``, falling back to JSON in production.
    """
    global _configured
    if _configured:
        return

    level_name = (level or settings.log_level).upper()
    if json_logs is None:
        json_logs = settings.log_json if settings.log_json is not None else settings.is_production

    processors: list[structlog.typing.Processor] = [
        merge_contextvars,
        add_app_name,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
    )

    if not settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _configured = True
