"""Structured logging setup."""

import logging
import sys

import structlog

from catalog_console.infrastructure.config import settings


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure structlog on top of the standard library logger.

    Args:
        level: Log level name; defaults to settings.log_level.
        json_output: Render JSON lines instead of console output;
            defaults to settings.log_json.
    """
    level = (level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.log_json

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        stream=sys.stderr,
    )
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
