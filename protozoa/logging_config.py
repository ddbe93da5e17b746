"""Logging setup for applications that embed the protozoa core.

The library itself only creates module loggers and logs at debug level; it
never configures handlers. Hosts call ``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV_VAR = "PROTOZOA_LOG_LEVEL"
ROOT_LOGGER_NAME = "protozoa"


def resolve_level(level: str | None = None) -> str:
    """Explicit level, else ``PROTOZOA_LOG_LEVEL``, else WARNING."""
    raw_level = level if level is not None else os.getenv(LOG_LEVEL_ENV_VAR)
    resolved = (raw_level or "WARNING").upper()
    if not isinstance(logging.getLevelName(resolved), int):
        raise ValueError(f"Unknown log level: {raw_level!r}")
    return resolved


def configure_logging(
    *,
    level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    extra_loggers: Iterable[str] | None = None,
) -> logging.Logger:
    """Configure logging for the ``protozoa`` logger tree.

    Args:
        level: Optional explicit log level. Falls back to ``PROTOZOA_LOG_LEVEL``
            env var or WARNING when not provided.
        format: Log format string.
        datefmt: Date format string.
        extra_loggers: Additional logger names to align with the configured level.

    Returns:
        The package logger (``protozoa``).
    """

    resolved_level = resolve_level(level)
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(resolved_level)

    if extra_loggers:
        for logger_name in extra_loggers:
            logging.getLogger(logger_name).setLevel(resolved_level)

    package_logger.debug("Logging configured", extra={"level": resolved_level, "log_format": format})
    return package_logger
