"""Structured logging setup for bujo-outline."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

LOG_LEVEL_ENV_VAR = "BUJO_OUTLINE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_log_level() -> str:
    """Return the log level requested through the environment.

    Unknown values fall back to ``WARNING`` so that a typo never silences
    errors or floods the terminal.
    """
    log_level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    if log_level not in VALID_LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return log_level


def configure_logging() -> None:
    """Configure structlog to write key-value events to stderr.

    The level is read from ``BUJO_OUTLINE_LOG_LEVEL`` (``DEBUG``, ``INFO``,
    ``WARNING`` or ``ERROR``; defaults to ``WARNING``). Stdout stays reserved
    for command output.

    Example:
        BUJO_OUTLINE_LOG_LEVEL=DEBUG bujo-outline check today.bujo
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(resolve_log_level())
        ),
        context_class=dict,
        # Looked up per logger so a replaced sys.stderr is honored.
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("document_parsed", lines=12, errors=0)
    """
    return structlog.get_logger(name)
