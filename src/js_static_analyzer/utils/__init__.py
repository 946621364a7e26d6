"""Utilities module for js-static-analyzer.

This module provides:
- Console output for the report
- Text formatting with severity colors
"""

from .console_logger import ConsoleLogger, console
from .formatters import (
    format_file_report,
    format_function_report,
    format_metric,
    format_no_functions,
    format_violation,
    format_violation_summary,
    paint,
)

__all__ = [
    "ConsoleLogger",
    "console",
    "format_file_report",
    "format_function_report",
    "format_metric",
    "format_no_functions",
    "format_violation",
    "format_violation_summary",
    "paint",
]
