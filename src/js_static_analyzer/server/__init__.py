"""Command-line runner for js-static-analyzer."""

from .runner import render_report, run_analysis, run_analyzer

__all__ = ["render_report", "run_analysis", "run_analyzer"]
