"""
Structured logging for signal connections.

The registry only logs through structlog loggers. This module wires
structlog up once per process:
- Level filtering from config (CONNECTIONS_LOG_LEVEL)
- ISO timestamps and log level on every entry
- Console renderer for humans, JSON renderer for log files
"""

import logging

import structlog
from structlog.typing import FilteringBoundLogger

from .config import LOG_FORMATS, RegistryConfig, config

__all__ = ["configure_logging", "get_logger"]


def configure_logging(
    level: str | None = None,
    fmt: str | None = None,
    cfg: RegistryConfig | None = None,
) -> None:
    """Configure structlog for the process.

    Args:
        level: Log level name (defaults to config.log_level)
        fmt: "console" or "json" (defaults to config.log_format)
        cfg: Configuration to read defaults from (defaults to global config)
    """
    cfg = cfg or config
    level = (level or cfg.log_level).upper()
    fmt = fmt or cfg.log_format

    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    if fmt not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {fmt} (expected one of {', '.join(LOG_FORMATS)})")

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **context) -> FilteringBoundLogger:
    """Get a structlog logger, optionally bound with context."""
    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger
