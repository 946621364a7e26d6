"""Console output for the analysis report.

The report is written with print() to stdout; structured logs go to
stderr through ``core.logging``, so the two never interleave in a pipe.

Usage:
    from js_static_analyzer.utils.console_logger import console

    console.log("Parsing ast and running static analysis...")
    console.error("Path does not exist: src/")
"""

import sys
from typing import Any


class ConsoleLogger:
    """print() wrapper for report text and fatal errors."""

    def log(self, message: str = "", **kwargs: Any) -> None:
        print(message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Print an error line to stderr, prefixed with ``ERROR:``."""
        print(f"ERROR: {message}", file=sys.stderr, **kwargs)


# Shared by the runner and render_report
console = ConsoleLogger()
