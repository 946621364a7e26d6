"""Exception hierarchy for the analyzer."""
from typing import Optional


class AnalyzerError(Exception):
    """Base class for all analyzer errors."""


class AnalysisPathError(AnalyzerError):
    """Raised when the path to analyze does not exist."""

    def __init__(self, path: str, message: str = "Path does not exist") -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


class SourceReadError(AnalyzerError):
    """Raised when a discovered source file cannot be read."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Failed to read source file: {path}{detail}")


class ParserUnavailableError(AnalyzerError):
    """Raised when the JavaScript grammar cannot be loaded."""


class FrozenRecordError(AnalyzerError):
    """Raised when a metric record is modified after it was frozen."""

    def __init__(self, record_type: str, attribute: str) -> None:
        self.record_type = record_type
        self.attribute = attribute
        super().__init__(f"{record_type} is frozen; cannot set '{attribute}'")
