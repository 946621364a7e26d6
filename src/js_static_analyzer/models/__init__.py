"""Data models for js-static-analyzer."""

from js_static_analyzer.models.complexity import (
    AnalysisReport,
    FileRecord,
    FileReport,
    FunctionEvaluation,
    FunctionRecord,
    Outcome,
    Severity,
    Violation,
)
from js_static_analyzer.models.config import AnalyzerConfig
from js_static_analyzer.models.syntax import ParentTable, SyntaxNode, SyntaxTree

__all__ = [
    # Complexity models
    "AnalysisReport",
    "FileRecord",
    "FileReport",
    "FunctionEvaluation",
    "FunctionRecord",
    "Outcome",
    "Severity",
    "Violation",
    # Config models
    "AnalyzerConfig",
    # Syntax models
    "ParentTable",
    "SyntaxNode",
    "SyntaxTree",
]
