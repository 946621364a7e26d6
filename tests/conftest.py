"""Shared pytest fixtures for the js-static-analyzer test suite.

This module provides common fixtures used across unit tests, reducing
duplication and standardizing test setup.
"""

import shutil

# Add src to path for imports
import sys
import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from js_static_analyzer.core.logging import configure_logging  # noqa: E402
from js_static_analyzer.models.syntax import SyntaxNode, SyntaxTree  # noqa: E402


# ============================================================================
# Parser Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def js_parser():
    """Provide a JavaScript parser, skipping when the grammar is missing."""
    pytest.importorskip("tree_sitter_language_pack")
    from js_static_analyzer.core.parser import JavaScriptParser

    return JavaScriptParser()


@pytest.fixture
def parse_js(js_parser) -> Callable[[str], SyntaxTree]:
    """Parse a JavaScript snippet into a syntax tree."""
    def _parse(source: str) -> SyntaxTree:
        return js_parser.parse_source(source, "test.js")
    return _parse


# ============================================================================
# Syntax Tree Fixtures
# ============================================================================

@pytest.fixture
def if_function_tree() -> SyntaxTree:
    """Hand-built tree for ``function f() { if (a) {} }``.

    Built without the parser so walker tests do not need the grammar.
    """
    nodes = [
        SyntaxNode(0, "program", 1, 3, children=(1,)),
        SyntaxNode(
            1, "function_declaration", 1, 3,
            children=(2, 3, 4),
            fields={"name": (2,), "parameters": (3,), "body": (4,)},
        ),
        SyntaxNode(2, "identifier", 1, 1, text="f"),
        SyntaxNode(3, "formal_parameters", 1, 1),
        SyntaxNode(4, "statement_block", 1, 3, children=(5,)),
        SyntaxNode(
            5, "if_statement", 2, 2,
            children=(6, 7),
            fields={"condition": (6,), "consequence": (7,)},
        ),
        SyntaxNode(6, "identifier", 2, 2, text="a"),
        SyntaxNode(7, "statement_block", 2, 2),
    ]
    return SyntaxTree(nodes)


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test isolation.

    Automatically cleaned up after test completion.

    Yields:
        str: Path to temporary directory
    """
    tmp = tempfile.mkdtemp()
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def make_project(temp_dir) -> Callable[[Dict[str, str]], str]:
    """Create files under a temporary project root.

    Returns:
        Function taking {relative path: content} and returning the root
    """
    def _make(files: Dict[str, str]) -> str:
        root = Path(temp_dir) / "project"
        for rel_path, content in files.items():
            target = root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        root.mkdir(exist_ok=True)
        return str(root)
    return _make


@pytest.fixture(autouse=True)
def reset_module_state():
    """Restore the default logging configuration after each test (auto-used).

    The CLI runner reconfigures logging from its flags and environment.
    """
    yield
    configure_logging()


# ============================================================================
# Sample Code Fixtures
# ============================================================================

@pytest.fixture
def sample_js_code() -> str:
    """Provide a small JavaScript module with two functions."""
    return """var fs = require("fs");

function readConfig(path, encoding) {
    if (path && encoding) {
        return fs.readFileSync(path, encoding);
    }
    return null;
}

function main() {
    console.log(readConfig('config.json', 'utf8'));
}
"""


@pytest.fixture
def long_function() -> Callable[[int], str]:
    """Build a function whose end line - start line equals the given length."""
    def _source(length: int) -> str:
        body = "    step();\n" * (length - 1)
        return "function long() {\n" + body + "}\n"
    return _source
