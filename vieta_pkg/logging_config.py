"""Structured logging configuration for Vieta.

Everything logs under the ``vieta`` namespace. The default level comes from
``VIETA_LOG_LEVEL`` (see config.py) and stays at WARNING otherwise, so the
report on stdout is never interleaved with progress chatter.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from .config import LOG_LEVEL

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
ROOT_LOGGER = "vieta"


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log entries with timestamp, module, level, and message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        code = getattr(record, "code", None)
        if code:
            line += f" (code={code})"
        return line


def resolve_level(level: Optional[str] = None) -> str:
    """Return a known level name, falling back to VIETA_LOG_LEVEL then WARNING."""
    for candidate in (level, LOG_LEVEL):
        if candidate and candidate.upper() in LOG_LEVELS:
            return candidate.upper()
    return "WARNING"


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for a run.

    Handlers left over from an earlier run in the same process are closed
    first, so repeated ``main_entry`` calls don't duplicate output.

    Args:
        level: Logging level name; defaults to VIETA_LOG_LEVEL
        log_file: Optional file path to also write logs to (stderr is always used)

    Returns:
        The ``vieta`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, resolve_level(level)))

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the ``vieta.<name>`` logger for a module."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
