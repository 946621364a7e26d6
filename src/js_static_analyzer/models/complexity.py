"""Data models for code complexity analysis."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from js_static_analyzer.constants import ExitCodes
from js_static_analyzer.core.exceptions import FrozenRecordError


class Severity(str, Enum):
    """Severity band of a metric value."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Outcome(str, Enum):
    """Overall result of an analysis run."""

    PASSED = "passed"
    FAILED = "failed"


class _FreezableRecord:
    """Mixin for records that are filled in incrementally, then sealed."""

    _frozen = False

    def __setattr__(self, name: str, value: Any) -> None:
        if self._frozen:
            raise FrozenRecordError(type(self).__name__, name)
        super().__setattr__(name, value)

    def freeze(self) -> "_FreezableRecord":
        object.__setattr__(self, "_frozen", True)
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen


@dataclass
class FunctionRecord(_FreezableRecord):
    """Metrics for one function declaration.

    Populated by the function metric collector and frozen once every
    metric has been computed.
    """

    file_name: str
    function_name: str
    start_line: int = 0
    parameter_count: int = 0
    length: int = 0
    cyclomatic_complexity: int = 1
    halstead: int = 0
    max_nesting_depth: int = 0
    max_conditions: int = 0
    max_message_chains: int = 0

    def metrics(self) -> Dict[str, int]:
        """Metric name -> value, in report order."""
        return {
            "parameter_count": self.parameter_count,
            "length": self.length,
            "cyclomatic_complexity": self.cyclomatic_complexity,
            "halstead": self.halstead,
            "max_nesting_depth": self.max_nesting_depth,
            "max_conditions": self.max_conditions,
            "max_message_chains": self.max_message_chains,
        }


@dataclass
class FileRecord(_FreezableRecord):
    """File-scoped counters for one analyzed file."""

    file_name: str
    string_literal_count: int = 0
    import_count: int = 0


@dataclass(frozen=True)
class Violation:
    """A function metric strictly exceeding its hard cutoff."""

    function_name: str
    file_name: str
    start_line: int
    metric_name: str
    metric_value: int
    severity: Severity


@dataclass
class FunctionEvaluation:
    """A function record annotated with severities and violations."""

    record: FunctionRecord
    severities: Dict[str, Optional[Severity]] = field(default_factory=dict)
    violations: List[Violation] = field(default_factory=list)


@dataclass
class FileReport:
    """Everything reported for one file, in discovery order."""

    file: FileRecord
    functions: List[FunctionEvaluation] = field(default_factory=list)

    @property
    def has_functions(self) -> bool:
        return bool(self.functions)


@dataclass
class AnalysisReport:
    """Aggregated result of a whole run."""

    files: List[FileReport]
    violations: List[Violation]
    outcome: Outcome

    @property
    def exit_code(self) -> int:
        return ExitCodes.PASSED if self.outcome is Outcome.PASSED else ExitCodes.FAILED

    @property
    def function_count(self) -> int:
        return sum(len(f.functions) for f in self.files)
