"""Command-line entry point for the analyzer."""

import sys
from typing import List, Optional

from js_static_analyzer.constants import ExitCodes
from js_static_analyzer.core.config import parse_args_and_get_config
from js_static_analyzer.core.exceptions import AnalyzerError
from js_static_analyzer.core.logging import get_logger
from js_static_analyzer.core.parser import JavaScriptParser
from js_static_analyzer.core.sentry import capture_analysis_error, init_sentry
from js_static_analyzer.features.complexity.analyzer import analyze_file_complexity
from js_static_analyzer.features.complexity.complexity_file_finder import ComplexityFileFinder
from js_static_analyzer.features.complexity.report import build_report
from js_static_analyzer.models.complexity import AnalysisReport
from js_static_analyzer.models.config import AnalyzerConfig
from js_static_analyzer.utils.console_logger import ConsoleLogger, console
from js_static_analyzer.utils.formatters import (
    format_file_report,
    format_function_report,
    format_no_functions,
    format_violation_summary,
)


def run_analysis(config: AnalyzerConfig) -> AnalysisReport:
    """Discover, parse and evaluate every source file under ``config.path``.

    Files are processed one after another in discovery order.

    Raises:
        AnalysisPathError: If the path does not exist
        SourceReadError: If a discovered file cannot be read
    """
    finder = ComplexityFileFinder(config.extensions, config.skip_directories)
    files = finder.find_files(config.path)

    parser = JavaScriptParser()
    return build_report(analyze_file_complexity(f, parser) for f in files)


def render_report(report: AnalysisReport, out: ConsoleLogger = console, color: bool = True) -> None:
    """Print per-file, per-function and violation blocks."""
    for file_report in report.files:
        out.log(format_file_report(file_report.file, color))
        if not file_report.has_functions:
            out.log(format_no_functions(color))
        for evaluation in file_report.functions:
            out.log(format_function_report(evaluation, color))

    out.log(format_violation_summary(report.violations, color))


def run_analyzer(argv: Optional[List[str]] = None) -> int:
    """Run the analyzer and return the process exit status.

    This function:
    1. Parses command-line arguments and configures logging
    2. Initializes Sentry error tracking (if configured)
    3. Analyzes every discovered file and prints the report
    """
    config = parse_args_and_get_config(argv)
    init_sentry()
    logger = get_logger("runner")

    console.log("Parsing ast and running static analysis...")
    try:
        report = run_analysis(config)
    except AnalyzerError as e:
        logger.error("analysis_failed", path=config.path, error=str(e), error_type=type(e).__name__)
        capture_analysis_error(e, config.path)
        console.error(str(e))
        return ExitCodes.ERROR
    console.log("Complete.\n")

    render_report(report, color=config.color)
    return report.exit_code


def main() -> None:
    sys.exit(run_analyzer())


if __name__ == "__main__":
    main()
