#!/usr/bin/env python3
"""
Structured logging configuration for cmdparts.

Library modules only emit debug events (e.g. one per assembled command), so
nothing is printed unless ``CMDPARTS_LOG_LEVEL=DEBUG`` is set.
"""

import logging
import sys

import structlog
from structlog.typing import Processor

from .config import get_config


def _render_processors(log_format: str) -> list[Processor]:
    """Timestamp and renderer for the configured output format."""
    if log_format == "json":
        return [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
        structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
    ]


def setup_logging() -> None:
    """Configure structured logging based on configuration."""
    config = get_config()

    # stderr keeps token output on stdout clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, config.log_level),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            *_render_processors(config.log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "cmdparts") -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)
