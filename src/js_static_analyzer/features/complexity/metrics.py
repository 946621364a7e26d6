"""
Function-level complexity metrics.

Each metric is computed by its own traversal of a function declaration's
subtree:
- Parameter count and length (from the declaration itself)
- Cyclomatic complexity (decision statements + 1)
- Max conditions (1 + logical operators in an if test)
- Halstead proxy (distinct operators and identifiers - 1)
- Max nesting depth (decision ancestors without an else, per leaf)
- Max message chains (member accesses along one statement)

All metrics are syntax-only; nested functions are not treated as a
boundary for the decision counts.
"""

from typing import List, Optional, Set

from js_static_analyzer.core.logging import get_logger
from js_static_analyzer.models.complexity import FunctionRecord
from js_static_analyzer.models.syntax import ParentTable, SyntaxNode, SyntaxTree

from .walker import ancestors, is_leaf, traverse

# =============================================================================
# NODE TYPES
# =============================================================================

FUNCTION_DECLARATION_TYPES = frozenset({"function_declaration", "generator_function_declaration"})

# Message-chain boundaries; arrow functions are walked through
FUNCTION_EXPRESSION_TYPES = frozenset({
    "function_expression",
    "function",
    "generator_function",
})

DECISION_TYPES = frozenset({
    "if_statement",
    "for_statement",
    "while_statement",
    "for_in_statement",
    "do_statement",
})

CONDITIONAL_TYPES = frozenset({"if_statement"})

LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})

IDENTIFIER_TYPES = frozenset({
    "identifier",
    "property_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "statement_identifier",
    "undefined",
})

MEMBER_ACCESS_TYPES = frozenset({"member_expression", "subscript_expression"})

CALL_TYPES = frozenset({"call_expression"})

LITERAL_TYPES = frozenset({"number", "string", "true", "false", "null", "regex"})

VARIABLE_DECLARATION_TYPES = frozenset({"lexical_declaration", "variable_declaration"})


def is_decision(node: SyntaxNode) -> bool:
    """True for conditional and loop statements, excluding for...of."""
    if node.type == "for_in_statement" and node.operator == "of":
        return False
    return node.type in DECISION_TYPES


def is_logical_expression(node: SyntaxNode) -> bool:
    return node.type == "binary_expression" and node.operator in LOGICAL_OPERATORS


def function_name(tree: SyntaxTree, function_node: SyntaxNode) -> str:
    """Declared name of a function, or ``anon@<line>`` when it has none."""
    name = tree.field(function_node, "name")
    if name is not None and name.text:
        return name.text
    return f"anon@{function_node.start_line}"


def count_parameters(tree: SyntaxTree, function_node: SyntaxNode) -> int:
    params = tree.field(function_node, "parameters")
    return len(params.children) if params is not None else 0


def function_length(function_node: SyntaxNode) -> int:
    """Line span of a function (end line - start line)."""
    return function_node.end_line - function_node.start_line


# =============================================================================
# DECISION METRICS
# =============================================================================


def calculate_cyclomatic_complexity(tree: SyntaxTree, function_node: SyntaxNode) -> int:
    """Calculate the cyclomatic complexity proxy of a function.

    Args:
        tree: Parsed file
        function_node: Function declaration node

    Returns:
        1 plus the number of decision statements in the subtree
    """
    complexity = 1

    def visit(node: SyntaxNode) -> None:
        nonlocal complexity
        if is_decision(node):
            complexity += 1

    traverse(tree, visit, function_node)
    return complexity


def count_conditions(tree: SyntaxTree, conditional: SyntaxNode) -> int:
    """1 plus the number of logical expressions in a conditional's test."""
    conditions = 1
    test = tree.field(conditional, "condition")
    if test is None:
        return conditions

    def visit(node: SyntaxNode) -> None:
        nonlocal conditions
        if is_logical_expression(node):
            conditions += 1

    traverse(tree, visit, test)
    return conditions


def calculate_max_conditions(tree: SyntaxTree, function_node: SyntaxNode) -> int:
    """Largest condition count of any conditional in the function (0 if none)."""
    max_conditions = 0

    def visit(node: SyntaxNode) -> None:
        nonlocal max_conditions
        if node.type in CONDITIONAL_TYPES:
            max_conditions = max(max_conditions, count_conditions(tree, node))

    traverse(tree, visit, function_node)
    return max_conditions


# =============================================================================
# HALSTEAD PROXY
# =============================================================================


def calculate_halstead(tree: SyntaxTree, function_node: SyntaxNode) -> int:
    """Distinct operators and identifiers in a function, minus one.

    The subtraction discounts the function's own name.
    """
    symbols: Set[str] = set()

    def visit(node: SyntaxNode) -> None:
        if node.type == "binary_expression" and node.operator:
            symbols.add(node.operator)
        elif node.type in IDENTIFIER_TYPES and node.text:
            symbols.add(node.text)

    traverse(tree, visit, function_node)
    return len(symbols) - 1


# =============================================================================
# NESTING DEPTH
# =============================================================================


def _lacks_alternative(tree: SyntaxTree, node: SyntaxNode) -> bool:
    return tree.field(node, "alternative") is None


def calculate_nesting_depth(
    tree: SyntaxTree,
    function_node: SyntaxNode,
    parents: Optional[ParentTable] = None,
) -> int:
    """Calculate the maximum nesting depth of a function.

    For every leaf the enclosing decision statements without an else branch
    are counted up to the function node.

    Args:
        tree: Parsed file
        function_node: Function declaration node
        parents: Parent table to reuse (filled in by this traversal)

    Returns:
        Maximum count over all leaves
    """
    leaves: List[SyntaxNode] = []
    parents = traverse(
        tree,
        lambda node: leaves.append(node) if is_leaf(node) else None,
        function_node,
        parents,
    )

    max_depth = 0
    for leaf in leaves:
        depth = sum(
            1
            for node in ancestors(tree, parents, leaf, function_node)
            if is_decision(node) and _lacks_alternative(tree, node)
        )
        max_depth = max(max_depth, depth)
    return max_depth


# =============================================================================
# MESSAGE CHAINS
# =============================================================================


def _is_chain_link(tree: SyntaxTree, node: SyntaxNode) -> bool:
    """Member accesses count as links; indexing by a literal does not."""
    if node.type == "member_expression":
        return True
    if node.type == "subscript_expression":
        index = tree.field(node, "index")
        return index is None or index.type not in LITERAL_TYPES
    return False


def chain_length(tree: SyntaxTree, start: SyntaxNode) -> int:
    """Longest running count of member-access links below ``start``.

    The count resets whenever the walk enters a function expression.
    """
    chain = 0
    longest = 0

    def visit(node: SyntaxNode) -> None:
        nonlocal chain, longest
        if _is_chain_link(tree, node):
            chain += 1
        elif node.type in FUNCTION_EXPRESSION_TYPES:
            chain = 0
        longest = max(longest, chain)

    traverse(tree, visit, start)
    return longest


def _expression_chain_root(
    tree: SyntaxTree,
    statement: SyntaxNode,
    expression: Optional[SyntaxNode],
) -> Optional[SyntaxNode]:
    """Pick the subtree whose chains an expression/return statement contributes.

    A call with arguments contributes only its first argument, and only when
    that argument is a function expression or a member access.
    """
    if expression is None:
        return None

    if expression.type in CALL_TYPES:
        arguments = tree.field(expression, "arguments")
        args = tree.children(arguments) if arguments is not None and arguments.type == "arguments" else []
        if args:
            first = args[0]
            if first.type in FUNCTION_EXPRESSION_TYPES or first.type in MEMBER_ACCESS_TYPES:
                return first
            return None
        return statement

    if expression.type in MEMBER_ACCESS_TYPES:
        return statement
    return None


def _chain_root(tree: SyntaxTree, node: SyntaxNode) -> Optional[SyntaxNode]:
    if node.type in ("expression_statement", "return_statement"):
        return _expression_chain_root(tree, node, tree.first_child(node))

    if node.type == "variable_declarator":
        value = tree.field(node, "value")
        if value is not None and (value.type in CALL_TYPES or value.type in MEMBER_ACCESS_TYPES):
            return node
    return None


def calculate_max_message_chains(tree: SyntaxTree, function_node: SyntaxNode) -> int:
    """Longest message chain over the qualifying statements of a function."""
    max_chains = 0

    def visit(node: SyntaxNode) -> None:
        nonlocal max_chains
        root = _chain_root(tree, node)
        if root is not None:
            max_chains = max(max_chains, chain_length(tree, root))

    traverse(tree, visit, function_node)
    return max_chains


# =============================================================================
# COLLECTOR
# =============================================================================


def collect_function_metrics(
    tree: SyntaxTree,
    function_node: SyntaxNode,
    file_name: str,
    parents: Optional[ParentTable] = None,
) -> FunctionRecord:
    """Build the frozen metric record for one function declaration.

    Args:
        tree: Parsed file
        function_node: Function declaration node
        file_name: File the function belongs to
        parents: Parent table shared with the enclosing traversal

    Returns:
        Populated, frozen FunctionRecord
    """
    record = FunctionRecord(file_name=file_name, function_name=function_name(tree, function_node))
    record.start_line = function_node.start_line
    record.parameter_count = count_parameters(tree, function_node)
    record.length = function_length(function_node)
    record.cyclomatic_complexity = calculate_cyclomatic_complexity(tree, function_node)
    record.max_conditions = calculate_max_conditions(tree, function_node)
    record.max_message_chains = calculate_max_message_chains(tree, function_node)
    record.max_nesting_depth = calculate_nesting_depth(tree, function_node, parents)
    record.halstead = calculate_halstead(tree, function_node)
    record.freeze()

    get_logger("complexity.metrics").debug(
        "function_metrics_collected",
        file=file_name,
        function=record.function_name,
        start_line=record.start_line,
        cyclomatic=record.cyclomatic_complexity,
        nesting=record.max_nesting_depth,
    )
    return record
