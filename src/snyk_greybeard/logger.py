"""Structured logging setup.

Events are rendered as JSON on stderr so they never mix with the scan
report on stdout.  The default level is WARNING, which keeps a normal
run silent; set ``SNYK_GREYBEARD_LOG_LEVEL=INFO`` to trace a run.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

from snyk_greybeard.config import LOG_LEVEL_ENV_VAR


def _resolve_level(name: str | None) -> int:
    level = logging.getLevelName((name or "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logger(level: str | None = None) -> None:
    """Configure structlog; *level* overrides the environment variable."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(
            _resolve_level(level or os.environ.get(LOG_LEVEL_ENV_VAR)),
        ),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)


if not structlog.is_configured():
    configure_logger()
