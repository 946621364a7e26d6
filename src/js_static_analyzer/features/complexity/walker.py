"""Depth-first traversal over a syntax tree arena.

The walker records each child's parent index before the child is handed to
the visitor, so visitors may query ancestry of the node they receive.
"""
from typing import Callable, Iterator, Optional

from js_static_analyzer.models.syntax import ParentTable, SyntaxNode, SyntaxTree

Visitor = Callable[[SyntaxNode], None]


def traverse(
    tree: SyntaxTree,
    visitor: Visitor,
    start: Optional[SyntaxNode] = None,
    parents: Optional[ParentTable] = None,
) -> ParentTable:
    """Visit every node reachable from ``start`` exactly once, pre-order.

    Args:
        tree: Tree to walk
        visitor: Called with every node, including ``start``
        start: Node to start from (defaults to the tree root)
        parents: Parent table to extend; a new one is created when omitted

    Returns:
        The parent table filled in during the walk
    """
    if parents is None:
        parents = ParentTable()
    start = tree.root if start is None else start

    stack = [start]
    while stack:
        node = stack.pop()
        visitor(node)
        for child_index in reversed(node.children):
            parents.set(child_index, node.index)
            stack.append(tree.node(child_index))
    return parents


def is_leaf(node: SyntaxNode) -> bool:
    """True when the node has no child nodes."""
    return not node.children


def ancestors(
    tree: SyntaxTree,
    parents: ParentTable,
    node: SyntaxNode,
    stop: SyntaxNode,
) -> Iterator[SyntaxNode]:
    """Yield ``node`` and its ancestors, stopping before ``stop``.

    Iteration also ends at a node with no recorded parent.
    """
    current: Optional[SyntaxNode] = node
    while current is not None and current.index != stop.index:
        yield current
        parent_index = parents.get(current.index)
        current = tree.node(parent_index) if parent_index is not None else None
