"""
Code complexity analysis feature.

This module provides syntax-tree based complexity analysis including:
- Depth-first traversal with a separate parent table
- Cyclomatic complexity, Halstead proxy, nesting depth, conditions and
  message chains per function declaration
- String literal and import counts per file
- Fixed severity bands and hard-cutoff violations
- Run-level pass/fail aggregation
"""

from .analyzer import (
    analyze_file_complexity,
    analyze_source_complexity,
    collect_tree_metrics,
)
from .complexity_file_finder import ComplexityFileFinder
from .file_metrics import FileMetricCollector
from .metrics import (
    DECISION_TYPES,
    calculate_cyclomatic_complexity,
    calculate_halstead,
    calculate_max_conditions,
    calculate_max_message_chains,
    calculate_nesting_depth,
    collect_function_metrics,
)
from .report import build_report, collect_violations
from .thresholds import THRESHOLDS, evaluate_function, severity_for
from .walker import traverse

__all__ = [
    # Walker
    "traverse",
    # Metrics
    "DECISION_TYPES",
    "calculate_cyclomatic_complexity",
    "calculate_halstead",
    "calculate_max_conditions",
    "calculate_max_message_chains",
    "calculate_nesting_depth",
    "collect_function_metrics",
    "FileMetricCollector",
    # Analyzer
    "analyze_file_complexity",
    "analyze_source_complexity",
    "collect_tree_metrics",
    "ComplexityFileFinder",
    # Thresholds and report
    "THRESHOLDS",
    "evaluate_function",
    "severity_for",
    "build_report",
    "collect_violations",
]
