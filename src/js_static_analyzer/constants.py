"""Shared constants across the js-static-analyzer codebase.

This module centralizes the fixed analysis tables and formatting values
so the metric engine and the console reporter read from one place.
"""


class SourceDefaults:
    """Defaults for source discovery and parsing."""

    LANGUAGE = "javascript"
    EXTENSIONS = (".js",)
    SKIP_DIRECTORIES = ("node_modules",)
    DEFAULT_PATH = "."
    ENCODING = "utf-8"


class ThresholdDefaults:
    """Fixed severity bands and hard cutoffs for function metrics.

    Bands are (cutoff, severity) pairs ordered highest cutoff first.
    Hard cutoffs are compared with a strict greater-than.
    """

    SEVERITY_BANDS = {
        "cyclomatic_complexity": ((10, "high"), (4, "medium")),
        "halstead": ((10, "high"), (3, "medium")),
        "parameter_count": ((10, "high"), (3, "medium")),
        "length": ((100, "high"), (30, "medium")),
        "max_nesting_depth": ((5, "high"), (3, "medium")),
        "max_message_chains": ((10, "high"), (5, "medium")),
    }

    HARD_CUTOFFS = {
        "length": 100,
        "max_nesting_depth": 5,
        "max_message_chains": 10,
    }


class ExitCodes:
    """Process exit statuses."""

    PASSED = 0
    FAILED = 1
    ERROR = 2
