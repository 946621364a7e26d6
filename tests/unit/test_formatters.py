"""Unit tests for console report formatting."""

from js_static_analyzer.features.complexity.thresholds import evaluate_function
from js_static_analyzer.models.complexity import FileRecord, FunctionRecord, Severity, Violation
from js_static_analyzer.utils.formatters import (
    GREEN,
    RED,
    RESET,
    format_file_report,
    format_function_report,
    format_metric,
    format_no_functions,
    format_violation_summary,
    paint,
)


class TestPaint:
    def test_color_disabled(self):
        assert paint("x", RED, color=False) == "x"

    def test_color_enabled(self):
        assert paint("x", RED) == f"{RED}x{RESET}"

    def test_metric_colored_by_severity(self):
        assert format_metric(12, Severity.HIGH) == f"{RED}12{RESET}"
        assert format_metric(1, Severity.LOW) == f"{GREEN}1{RESET}"
        assert format_metric(3, None) == "3"


class TestReportBlocks:
    """Test the plain-text layout of report blocks."""

    def test_function_report(self):
        record = FunctionRecord(
            file_name="a.js",
            function_name="f",
            start_line=3,
            parameter_count=2,
            length=5,
            cyclomatic_complexity=2,
        ).freeze()
        text = format_function_report(evaluate_function(record), color=False)
        lines = text.splitlines()
        assert lines[0] == "f(): at line #3"
        assert lines[1] == "Parameters: 2\tLength: 5"
        assert lines[2] == "Cyclomatic: 2\tHalstead: 0"
        assert lines[3] == "MaxNestingDepth: 0\tMaxConditions: 0"
        assert lines[4] == "MaxMessageChains: 0"

    def test_file_report(self):
        record = FileRecord(file_name="a.js", string_literal_count=4, import_count=1).freeze()
        assert format_file_report(record, color=False) == "a.js\nPackages: 1\nStrings 4\n"

    def test_no_functions(self):
        assert format_no_functions(color=False) == "No Function Declaration Nodes Found\n"

    def test_summary_without_violations(self):
        assert format_violation_summary([], color=False) == "NO VIOLATIONS FOUND"

    def test_summary_with_violations(self):
        violation = Violation("big", "a.js", 1, "length", 120, Severity.HIGH)
        text = format_violation_summary([violation], color=False)
        assert text.splitlines() == [
            "VIOLATIONS",
            "big(): at line #1 in a.js",
            "Length: 120",
        ]
