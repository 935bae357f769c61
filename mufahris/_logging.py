"""
Structured logging utilities for Mufahris library.

All library loggers live under the ``mufahris`` namespace. The package
installs a NullHandler, so nothing is printed until an application calls
``configure_logging``.
"""

import logging
import sys
from typing import Any, Optional, TextIO

from mufahris.config import get_settings


LOGGER_NAME = "mufahris"

# Default format for Mufahris logs
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the library logger or one of its children.

    Args:
        name: Child name, e.g. "indexes" for "mufahris.indexes"
            (default: the package logger)
    """
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(
    level: int | str | None = None,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Send Mufahris logs to a stream.

    Replaces any handler installed by a previous call.

    Args:
        level: Level number or name (default: settings.log_level)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        The package logger
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    ))

    logger = get_logger()
    logger.setLevel(level)
    logger.handlers[:] = [handler]
    return logger


def enable_debug_logging() -> None:
    """Log everything, including skipped annotation lines."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Silence Mufahris logs again."""
    get_logger().handlers[:] = [logging.NullHandler()]


def _with_context(message: str, context: dict[str, Any]) -> str:
    if not context:
        return message
    ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
    return f"{message} ({ctx_str})"


_logger = get_logger()


def log_parse_complete(records: int, skipped: int, duration: float) -> None:
    """Log annotation parse complete event."""
    _logger.info(
        f"Annotation parsed: {records} word records, "
        f"{skipped} lines skipped in {duration:.2f}s"
    )


def log_line_skipped(line_no: int, reason: str) -> None:
    """Log a skipped annotation line."""
    _logger.debug(f"Skipped annotation line {line_no}: {reason}")


def log_indexes_built(token_count: int, stats: dict[str, int], duration: float) -> None:
    """Log index build complete event."""
    buckets = ", ".join(f"{name}={size}" for name, size in stats.items())
    _logger.info(f"Indexes built over {token_count} tokens in {duration:.2f}s ({buckets})")


def log_frequencies_built(
    total_tokens: int,
    total_ayahs: int,
    total_surahs: int,
    duration: float,
) -> None:
    """Log frequency table build complete event."""
    _logger.info(
        f"Frequency table built: {total_tokens} tokens, {total_ayahs} ayahs, "
        f"{total_surahs} surahs in {duration:.2f}s"
    )


def log_collocations_complete(
    target: str,
    window_type: str,
    occurrences: int,
    results: int,
) -> None:
    """Log collocation computation complete event."""
    _logger.debug(
        f"Collocations for {target} ({window_type}): "
        f"{occurrences} occurrences, {results} collocates"
    )


def log_warning(message: str, **context: Any) -> None:
    """Log a warning with optional context."""
    _logger.warning(_with_context(message, context))
