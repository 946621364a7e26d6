"""Syntax tree models.

Parsed source is stored as an arena of immutable nodes addressed by integer
index. Parent links are kept in a separate ``ParentTable`` filled in by the
walker, so nodes never hold references back up the tree.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class SyntaxNode:
    """A single node of a parsed source file.

    Attributes:
        index: Position of the node in its tree's arena
        type: Grammar type tag (e.g. "if_statement")
        start_line: 1-based first line of the node
        end_line: 1-based last line of the node
        children: Child indices in source order
        fields: Grammar field name -> child indices in that field
        text: Source text for identifier and literal leaves
        operator: Operator token for operator expressions
    """

    index: int
    type: str
    start_line: int
    end_line: int
    children: Tuple[int, ...] = ()
    fields: Mapping[str, Tuple[int, ...]] = field(default_factory=dict)
    text: Optional[str] = None
    operator: Optional[str] = None


class SyntaxTree:
    """Arena of syntax nodes with the root at index 0."""

    ROOT = 0

    def __init__(self, nodes: List[SyntaxNode], has_errors: bool = False) -> None:
        if not nodes:
            raise ValueError("A syntax tree needs at least a root node")
        self._nodes = tuple(nodes)
        self.has_errors = has_errors

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SyntaxNode]:
        return iter(self._nodes)

    @property
    def root(self) -> SyntaxNode:
        return self._nodes[self.ROOT]

    def node(self, index: int) -> SyntaxNode:
        return self._nodes[index]

    def children(self, node: SyntaxNode) -> List[SyntaxNode]:
        return [self._nodes[i] for i in node.children]

    def field(self, node: SyntaxNode, name: str) -> Optional[SyntaxNode]:
        """Return the first node stored in a grammar field, if any."""
        indices = node.fields.get(name, ())
        return self._nodes[indices[0]] if indices else None

    def first_child(self, node: SyntaxNode) -> Optional[SyntaxNode]:
        return self._nodes[node.children[0]] if node.children else None


class ParentTable:
    """Parent index for every node reached by a traversal.

    The node a traversal starts from gets no entry from that traversal; a
    table shared with an enclosing traversal keeps the entry recorded there.
    """

    def __init__(self) -> None:
        self._parents: Dict[int, int] = {}

    def __contains__(self, index: int) -> bool:
        return index in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def set(self, child: int, parent: int) -> None:
        self._parents[child] = parent

    def get(self, index: int) -> Optional[int]:
        return self._parents.get(index)
