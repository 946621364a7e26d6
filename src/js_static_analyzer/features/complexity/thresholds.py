"""Threshold evaluation for function metrics.

Severity lookup is a pure function of (metric name, value); hard cutoffs
decide which metrics become violations.
"""
from typing import Dict, List, Mapping, Optional, Tuple

from js_static_analyzer.constants import ThresholdDefaults
from js_static_analyzer.models.complexity import (
    FunctionEvaluation,
    FunctionRecord,
    Severity,
    Violation,
)

ThresholdTable = Mapping[str, Tuple[Tuple[int, Severity], ...]]

THRESHOLDS: ThresholdTable = {
    metric: tuple((cutoff, Severity(level)) for cutoff, level in bands)
    for metric, bands in ThresholdDefaults.SEVERITY_BANDS.items()
}

HARD_CUTOFFS: Dict[str, int] = dict(ThresholdDefaults.HARD_CUTOFFS)

LOWEST_SEVERITY = Severity.LOW


def severity_for(metric: str, value: int, table: ThresholdTable = THRESHOLDS) -> Optional[Severity]:
    """Map a metric value to its severity band.

    Bands are checked highest cutoff first; the first cutoff <= value wins.

    Args:
        metric: Metric name
        value: Metric value
        table: Threshold table to consult

    Returns:
        Matching severity, the lowest severity when no cutoff matches, or
        None when the metric has no bands
    """
    bands = table.get(metric)
    if bands is None:
        return None
    for cutoff, severity in sorted(bands, key=lambda band: band[0], reverse=True):
        if cutoff <= value:
            return severity
    return LOWEST_SEVERITY


def exceeds_hard_cutoff(metric: str, value: int) -> bool:
    """True when a metric strictly exceeds its hard cutoff."""
    cutoff = HARD_CUTOFFS.get(metric)
    return cutoff is not None and value > cutoff


def _check_threshold_violations(record: FunctionRecord) -> List[Violation]:
    """Check which hard cutoffs a function exceeds.

    Args:
        record: Function metrics

    Returns:
        Violations in cutoff table order
    """
    metrics = record.metrics()
    violations: List[Violation] = []

    for metric in HARD_CUTOFFS:
        value = metrics[metric]
        if exceeds_hard_cutoff(metric, value):
            violations.append(Violation(
                function_name=record.function_name,
                file_name=record.file_name,
                start_line=record.start_line,
                metric_name=metric,
                metric_value=value,
                severity=severity_for(metric, value) or LOWEST_SEVERITY,
            ))
    return violations


def evaluate_function(record: FunctionRecord) -> FunctionEvaluation:
    """Annotate a function record with severities and violations."""
    severities = {metric: severity_for(metric, value) for metric, value in record.metrics().items()}
    return FunctionEvaluation(
        record=record,
        severities=severities,
        violations=_check_threshold_violations(record),
    )
