"""Unit tests for the tree-sitter parser adapter."""

import sys

import pytest

from js_static_analyzer.core.exceptions import ParserUnavailableError, SourceReadError
from js_static_analyzer.core.parser import JavaScriptParser


class TestGrammarLoading:
    """Test that grammar failures surface as ParserUnavailableError."""

    def test_missing_grammar_package(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "tree_sitter_language_pack", None)
        with pytest.raises(ParserUnavailableError):
            JavaScriptParser().parse_source("var a = 1;")

    def test_grammar_download_failure(self, monkeypatch):
        """Errors raised by the grammar pack itself are wrapped."""
        pack = pytest.importorskip("tree_sitter_language_pack")

        class GrammarFetchError(Exception):
            pass

        def failing_get_parser(language):
            raise GrammarFetchError(f"Failed to fetch manifest for {language}")

        monkeypatch.setattr(pack, "get_parser", failing_get_parser)
        with pytest.raises(ParserUnavailableError) as exc_info:
            JavaScriptParser().parse_source("var a = 1;")
        assert isinstance(exc_info.value.__cause__, GrammarFetchError)
        assert "javascript" in str(exc_info.value)


class TestParseFile:
    def test_unreadable_file(self, temp_dir):
        """Read errors are raised before the grammar is needed."""
        missing = f"{temp_dir}/missing.js"
        with pytest.raises(SourceReadError) as exc_info:
            JavaScriptParser().parse_file(missing)
        assert exc_info.value.path == missing

    def test_for_in_operator_recorded(self, parse_js):
        tree = parse_js("for (const k in o) {} for (const v of xs) {}")
        operators = [n.operator for n in tree if n.type == "for_in_statement"]
        assert operators == ["in", "of"]
