"""Structured logging for the analyzer.

Log events go to stderr (or a log file) as JSON lines so they never mix
with the console report written to stdout. Until ``configure_logging`` is
called explicitly, only warnings and errors are emitted.
"""
import atexit
import sys
from typing import Any, List, Optional, TextIO

import structlog

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}

_log_file: Optional[TextIO] = None


def close_log_file() -> None:
    """Close the file opened for ``--log-file``, if any."""
    global _log_file

    if _log_file is not None:
        _log_file.close()
        _log_file = None


atexit.register(close_log_file)


def _stderr_logger(*args: Any) -> structlog.WriteLogger:
    # Looked up per logger so a replaced sys.stderr is honored
    return structlog.WriteLogger(sys.stderr)


def _logger_factory(log_file: Optional[str]) -> Any:
    """Return a logger factory writing to stderr or to ``log_file``."""
    global _log_file

    close_log_file()
    if log_file is None:
        return _stderr_logger

    _log_file = open(log_file, "a", encoding="utf-8")
    return structlog.WriteLoggerFactory(file=_log_file)


def configure_logging(log_level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Configure structured logging with JSON output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for logging (stderr by default)
    """
    numeric_level = LEVELS.get(log_level.upper(), LEVELS["WARNING"])

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=_logger_factory(log_file),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance bound to a component name.

    Args:
        name: Component name (e.g. "complexity.walker")

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name, component=name)


if not structlog.is_configured():
    configure_logging()
