"""Text formatting for the console report.

Severity decides the color; these helpers only turn records into text and
never compute metrics.
"""

from typing import List, Optional

from js_static_analyzer.models.complexity import FileRecord, FunctionEvaluation, Severity, Violation

# ANSI color codes
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
MAGENTA = "\033[35m"
BOLD = "\033[1m"
UNDERLINE = "\033[4m"
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_BLUE = "\033[44m"
BG_MAGENTA = "\033[45m"
RESET = "\033[0m"

SEVERITY_COLORS = {
    Severity.LOW: GREEN,
    Severity.MEDIUM: YELLOW,
    Severity.HIGH: RED,
}

METRIC_LABELS = {
    "parameter_count": "Parameters",
    "length": "Length",
    "cyclomatic_complexity": "Cyclomatic",
    "halstead": "Halstead",
    "max_nesting_depth": "MaxNestingDepth",
    "max_conditions": "MaxConditions",
    "max_message_chains": "MaxMessageChains",
}


def paint(text: str, *codes: str, color: bool = True) -> str:
    """Wrap text in ANSI codes when color is enabled."""
    if not color or not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"


def format_metric(value: int, severity: Optional[Severity], color: bool = True) -> str:
    """Render a metric value colored by its severity."""
    if severity is None:
        return str(value)
    return paint(str(value), SEVERITY_COLORS[severity], color=color)


def format_function_heading(name: str, start_line: int, color: bool = True) -> str:
    return f"{paint(name, CYAN, UNDERLINE, color=color)}(): at line #{start_line}"


def format_function_report(evaluation: FunctionEvaluation, color: bool = True) -> str:
    """Render one function's metrics, two per line."""
    record = evaluation.record
    values = record.metrics()

    def cell(metric: str) -> str:
        rendered = format_metric(values[metric], evaluation.severities.get(metric), color)
        return f"{METRIC_LABELS[metric]}: {rendered}"

    lines = [
        format_function_heading(record.function_name, record.start_line, color),
        f"{cell('parameter_count')}\t{cell('length')}",
        f"{cell('cyclomatic_complexity')}\t{cell('halstead')}",
        f"{cell('max_nesting_depth')}\t{cell('max_conditions')}",
        cell("max_message_chains"),
    ]
    return "\n".join(lines) + "\n"


def format_file_report(record: FileRecord, color: bool = True) -> str:
    """Render the file heading with its import and string counts."""
    lines = [
        paint(record.file_name, BG_MAGENTA, color=color),
        paint(f"Packages: {record.import_count}", MAGENTA, UNDERLINE, color=color),
        paint(f"Strings {record.string_literal_count}", MAGENTA, UNDERLINE, color=color),
    ]
    return "\n".join(lines) + "\n"


def format_no_functions(color: bool = True) -> str:
    return paint("No Function Declaration Nodes Found", BG_BLUE, color=color) + "\n"


def format_violation(violation: Violation, color: bool = True) -> str:
    """Render a violation as a heading plus the offending metric."""
    heading = format_function_heading(violation.function_name, violation.start_line, color)
    value = format_metric(violation.metric_value, violation.severity, color)
    return f"{heading} in {violation.file_name}\n{METRIC_LABELS[violation.metric_name]}: {value}\n"


def format_violation_summary(violations: List[Violation], color: bool = True) -> str:
    """Render the closing block of the report."""
    if not violations:
        return paint("NO VIOLATIONS FOUND", BG_GREEN, BOLD, color=color)
    blocks = [paint("VIOLATIONS", BG_RED, BOLD, color=color)]
    blocks.extend(format_violation(v, color) for v in violations)
    return "\n".join(blocks)
