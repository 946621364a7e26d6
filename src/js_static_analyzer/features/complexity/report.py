"""Aggregation of per-file results into the run report."""

from typing import Iterable, List

from js_static_analyzer.core.logging import get_logger
from js_static_analyzer.models.complexity import AnalysisReport, FileReport, Outcome, Violation


def collect_violations(file_reports: Iterable[FileReport]) -> List[Violation]:
    """Concatenate violations in file-then-function discovery order."""
    violations: List[Violation] = []
    for file_report in file_reports:
        for evaluation in file_report.functions:
            violations.extend(evaluation.violations)
    return violations


def build_report(file_reports: Iterable[FileReport]) -> AnalysisReport:
    """Build the run report and decide pass/fail.

    Files without functions are kept in the report but never affect the
    outcome.

    Args:
        file_reports: Per-file results in discovery order

    Returns:
        AnalysisReport with outcome FAILED when any violation exists
    """
    files = list(file_reports)
    violations = collect_violations(files)
    outcome = Outcome.FAILED if violations else Outcome.PASSED

    get_logger("complexity.report").info(
        "report_complete",
        files=len(files),
        functions=sum(len(f.functions) for f in files),
        violations=len(violations),
        outcome=outcome.value,
    )
    return AnalysisReport(files=files, violations=violations, outcome=outcome)
