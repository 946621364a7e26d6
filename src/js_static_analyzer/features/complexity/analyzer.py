"""
Code complexity analysis for a single file.

One top-level traversal per file feeds the file metric collector and
starts a function metric collection for every function declaration found.
"""

from typing import List, Optional, Tuple

from js_static_analyzer.core.logging import get_logger
from js_static_analyzer.core.parser import JavaScriptParser
from js_static_analyzer.models.complexity import FileRecord, FileReport, FunctionRecord
from js_static_analyzer.models.syntax import ParentTable, SyntaxNode, SyntaxTree

from .file_metrics import FileMetricCollector
from .metrics import FUNCTION_DECLARATION_TYPES, collect_function_metrics
from .thresholds import evaluate_function
from .walker import traverse

__all__ = [
    "analyze_file_complexity",
    "analyze_source_complexity",
    "collect_tree_metrics",
]


def collect_tree_metrics(tree: SyntaxTree, file_name: str) -> Tuple[FileRecord, List[FunctionRecord]]:
    """Collect file and function records from a parsed tree.

    Args:
        tree: Parsed file
        file_name: Name recorded on every record

    Returns:
        Tuple of (file record, function records in discovery order)
    """
    file_collector = FileMetricCollector(tree, file_name)
    functions: List[FunctionRecord] = []
    parents = ParentTable()

    def visit(node: SyntaxNode) -> None:
        file_collector.visit(node)
        if node.type in FUNCTION_DECLARATION_TYPES:
            functions.append(collect_function_metrics(tree, node, file_name, parents))

    traverse(tree, visit, parents=parents)
    return file_collector.finish(), functions


def _build_file_report(file_record: FileRecord, functions: List[FunctionRecord]) -> FileReport:
    return FileReport(file=file_record, functions=[evaluate_function(f) for f in functions])


def analyze_source_complexity(
    source: str,
    file_name: str,
    parser: Optional[JavaScriptParser] = None,
) -> FileReport:
    """Analyze JavaScript source text.

    Args:
        source: Source text
        file_name: Name used in the report
        parser: Parser to reuse across files

    Returns:
        FileReport with evaluated functions
    """
    parser = parser or JavaScriptParser()
    tree = parser.parse_source(source, file_name)
    return _build_file_report(*collect_tree_metrics(tree, file_name))


def analyze_file_complexity(file_path: str, parser: Optional[JavaScriptParser] = None) -> FileReport:
    """Analyze complexity of all functions in a file.

    Args:
        file_path: Path to source file
        parser: Parser to reuse across files

    Returns:
        FileReport with evaluated functions

    Raises:
        SourceReadError: If the file cannot be read
    """
    logger = get_logger("complexity.analyze")
    parser = parser or JavaScriptParser()

    tree = parser.parse_file(file_path)
    report = _build_file_report(*collect_tree_metrics(tree, file_path))

    logger.info(
        "analyze_file_complete",
        file=file_path,
        functions=len(report.functions),
        strings=report.file.string_literal_count,
        imports=report.file.import_count,
    )
    return report
