"""Configuration management for the analyzer command line."""

import argparse
import os
from typing import List, Optional

from pydantic import ValidationError

from js_static_analyzer.constants import SourceDefaults
from js_static_analyzer.core.logging import configure_logging, get_logger
from js_static_analyzer.models.config import AnalyzerConfig


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="js-static-analyzer",
        description="Static complexity metrics for JavaScript source files",
        epilog="""
environment variables:
  LOG_LEVEL          Logging level: DEBUG, INFO, WARNING, ERROR (default: WARNING)
  LOG_FILE           Path to log file (logs to stderr by default)
  NO_COLOR           Disable ANSI colors when set to any value
  SENTRY_DSN         Report fatal errors to Sentry

exit status:
  0 no violations, 1 violations found, 2 analysis error
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=SourceDefaults.DEFAULT_PATH,
        help="File or directory to analyze (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        metavar="LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Can also be set via LOG_LEVEL env var. Default: WARNING",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        default=None,
        help="Path to log file (logs to stderr by default). Can also be set via LOG_FILE env var.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in the report. Can also be set via NO_COLOR env var.",
    )
    return parser


def build_config(args: argparse.Namespace) -> AnalyzerConfig:
    """Resolve flags and environment into a validated config.

    Precedence: command-line flags > env vars > defaults

    Args:
        args: Parsed command-line arguments.

    Returns:
        Validated AnalyzerConfig.
    """
    return AnalyzerConfig(
        path=args.path,
        log_level=args.log_level or os.environ.get("LOG_LEVEL", "WARNING"),
        log_file=args.log_file or os.environ.get("LOG_FILE"),
        color=not (args.no_color or bool(os.environ.get("NO_COLOR"))),
    )


def parse_args_and_get_config(argv: Optional[List[str]] = None) -> AnalyzerConfig:
    """Parse command-line arguments, configure logging and return the config.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Validated AnalyzerConfig.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ValidationError as e:
        parser.error(str(e))

    configure_logging(log_level=config.log_level, log_file=config.log_file)
    get_logger("config").info(
        "config_resolved",
        path=config.path,
        log_level=config.log_level,
        color=config.color,
    )
    return config
