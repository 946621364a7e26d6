"""File-level counters gathered during the top-level traversal."""

from js_static_analyzer.models.complexity import FileRecord
from js_static_analyzer.models.syntax import SyntaxNode, SyntaxTree

STRING_LITERAL_TYPES = frozenset({"string"})
IMPORT_FUNCTION = "require"


def is_string_literal(node: SyntaxNode) -> bool:
    return node.type in STRING_LITERAL_TYPES


def is_import_call(tree: SyntaxTree, node: SyntaxNode) -> bool:
    """True for ``require(...)`` calls."""
    if node.type != "call_expression":
        return False
    callee = tree.field(node, "function")
    return callee is not None and callee.type == "identifier" and callee.text == IMPORT_FUNCTION


class FileMetricCollector:
    """Counts string literals and imports anywhere in a file.

    Called with every node of the top-level traversal.
    """

    def __init__(self, tree: SyntaxTree, file_name: str) -> None:
        self.tree = tree
        self.record = FileRecord(file_name=file_name)

    def visit(self, node: SyntaxNode) -> None:
        if is_string_literal(node):
            self.record.string_literal_count += 1
        elif is_import_call(self.tree, node):
            self.record.import_count += 1

    def finish(self) -> FileRecord:
        self.record.freeze()
        return self.record
