"""Core infrastructure for js-static-analyzer."""

from js_static_analyzer.core.exceptions import (
    AnalysisPathError,
    AnalyzerError,
    FrozenRecordError,
    ParserUnavailableError,
    SourceReadError,
)
from js_static_analyzer.core.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    # Exceptions
    "AnalyzerError",
    "AnalysisPathError",
    "SourceReadError",
    "ParserUnavailableError",
    "FrozenRecordError",
    # Logging
    "configure_logging",
    "get_logger",
]
