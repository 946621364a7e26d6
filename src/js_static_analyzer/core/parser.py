"""JavaScript parsing via tree-sitter.

The tree-sitter tree is converted into the immutable ``SyntaxTree`` arena
used by the metric engine. Only named nodes are kept (comments dropped),
grammar field names are preserved, and operator tokens are captured on the
node that owns them. tree-sitter recovers from syntax errors by inserting
ERROR nodes, so malformed input still yields a tree.
"""
from pathlib import Path
from typing import Any, List, Optional, Tuple

from js_static_analyzer.constants import SourceDefaults
from js_static_analyzer.core.exceptions import ParserUnavailableError, SourceReadError
from js_static_analyzer.core.logging import get_logger
from js_static_analyzer.models.syntax import SyntaxNode, SyntaxTree

SKIPPED_TYPES = frozenset({"comment", "html_comment"})

# Nodes whose source text is kept on the arena node
TEXT_TYPES = frozenset({
    "identifier",
    "property_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "statement_identifier",
    "private_property_identifier",
    "string",
    "string_fragment",
    "number",
    "regex",
    "undefined",
})

# Nodes that carry an anonymous operator token in their "operator" field
# ("in" or "of" for for_in_statement)
OPERATOR_TYPES = frozenset({
    "binary_expression",
    "for_in_statement",
    "unary_expression",
    "update_expression",
    "augmented_assignment_expression",
})


class JavaScriptParser:
    """Tree-sitter JavaScript parser with lazy grammar loading."""

    def __init__(self, language: str = SourceDefaults.LANGUAGE) -> None:
        self.language = language
        self._parser: Any = None
        self.logger = get_logger("parser")

    def _ensure_parser_initialized(self) -> Any:
        """Load the tree-sitter grammar on first use.

        Raises:
            ParserUnavailableError: If the grammar package is missing or the
                grammar cannot be loaded or downloaded
        """
        if self._parser is None:
            try:
                from tree_sitter_language_pack import get_parser

                self._parser = get_parser(self.language)
            except Exception as e:
                # The pack raises its own DownloadError when a grammar fetch fails
                self.logger.error("grammar_load_failed", language=self.language, error=str(e))
                raise ParserUnavailableError(f"tree-sitter grammar for '{self.language}' is not available: {e}") from e
        return self._parser

    def parse_file(self, file_path: str) -> SyntaxTree:
        """Read and parse a source file.

        Args:
            file_path: Path of the file to parse

        Returns:
            Parsed syntax tree

        Raises:
            SourceReadError: If the file cannot be read
        """
        try:
            source = Path(file_path).read_text(encoding=SourceDefaults.ENCODING, errors="replace")
        except OSError as e:
            raise SourceReadError(file_path, e.strerror or str(e)) from e
        return self.parse_source(source, file_path)

    def parse_source(self, source: str, file_path: str = "<string>") -> SyntaxTree:
        """Parse JavaScript source text into a syntax tree."""
        parser = self._ensure_parser_initialized()
        src = source.encode(SourceDefaults.ENCODING, errors="replace")
        ts_tree = parser.parse(src)
        root = ts_tree.root_node

        tree = SyntaxTree(_build_arena(root, src), has_errors=bool(root.has_error))
        if tree.has_errors:
            self.logger.warning("parse_recovered", file=file_path)
        self.logger.debug("parse_complete", file=file_path, nodes=len(tree))
        return tree


def _named_children(ts_node: Any) -> List[Tuple[Any, Optional[str]]]:
    """Return (child, field name) pairs for the named children of a node."""
    result: List[Tuple[Any, Optional[str]]] = []
    cursor = ts_node.walk()
    if not cursor.goto_first_child():
        return result
    while True:
        child = cursor.node
        if child.is_named and child.type not in SKIPPED_TYPES:
            result.append((child, cursor.field_name))
        if not cursor.goto_next_sibling():
            return result


def _operator_of(ts_node: Any) -> Optional[str]:
    op = ts_node.child_by_field_name("operator")
    return op.type if op is not None else None


def _build_arena(root: Any, src: bytes) -> List[SyntaxNode]:
    """Number tree-sitter nodes in pre-order and freeze them into an arena."""
    ts_nodes: List[Any] = []
    links: List[List[Tuple[int, Optional[str]]]] = []

    stack: List[Tuple[Any, Optional[int], Optional[str]]] = [(root, None, None)]
    while stack:
        ts_node, parent, field_name = stack.pop()
        index = len(ts_nodes)
        ts_nodes.append(ts_node)
        links.append([])
        if parent is not None:
            links[parent].append((index, field_name))
        for child, child_field in reversed(_named_children(ts_node)):
            stack.append((child, index, child_field))

    nodes: List[SyntaxNode] = []
    for index, ts_node in enumerate(ts_nodes):
        fields: dict = {}
        for child_index, field_name in links[index]:
            if field_name:
                fields[field_name] = fields.get(field_name, ()) + (child_index,)

        text = None
        if ts_node.type in TEXT_TYPES:
            text = src[ts_node.start_byte:ts_node.end_byte].decode(SourceDefaults.ENCODING, errors="replace")

        nodes.append(SyntaxNode(
            index=index,
            type=ts_node.type,
            start_line=ts_node.start_point[0] + 1,
            end_line=ts_node.end_point[0] + 1,
            children=tuple(child_index for child_index, _ in links[index]),
            fields=fields,
            text=text,
            operator=_operator_of(ts_node) if ts_node.type in OPERATOR_TYPES else None,
        ))
    return nodes
