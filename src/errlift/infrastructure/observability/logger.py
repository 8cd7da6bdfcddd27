"""
Structured Logging Configuration
structlog on top of stdlib logging; level and format default to errlift.config
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

from errlift.config import get_settings


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def _processors(json_logs: bool) -> list[Any]:
    """
    Processor chain for errlift events.

    filter_by_level runs first so the lift-time DEBUG events cost nothing
    when the stdlib level is above DEBUG.
    """
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        _renderer(json_logs),
    ]


def configure_logging(log_level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Configure structured logging for errlift and its callers.

    Args:
        log_level: Logging level; defaults to ERRLIFT_LOG_LEVEL
        json_logs: One JSON object per line; defaults to ERRLIFT_JSON_LOGS.
            False gives human-readable console lines.
    """
    settings = get_settings()
    level = (log_level or settings.log_level).upper()
    use_json = settings.json_logs if json_logs is None else json_logs

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=getattr(logging, level))

    structlog.configure(
        processors=_processors(use_json),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.debug("function lifted", function="parse_int")
    """
    return structlog.get_logger(name)
