"""Tests for the diagnostics composer."""

from mermaid_validator.core.diagnostics import SYNTAX_REFERENCE, compose_invalid, suggest_fixes
from mermaid_validator.core.errors import DiagramSyntaxError, UnclosedBlockError


class TestSuggestFixes:
    """Tests for keyword-derived suggestions."""

    def test_parse_error(self) -> None:
        suggestions = suggest_fixes("Parse error on line 3: Expecting 'SEMI'")
        assert "Check for missing or extra brackets, quotes, or arrows" in suggestions

    def test_lexical_error(self) -> None:
        suggestions = suggest_fixes("Lexical error on line 2. Unrecognized text.")
        assert "Wrap labels containing special characters in double quotes" in suggestions

    def test_subgraph(self) -> None:
        suggestions = suggest_fixes("Unclosed subgraph")
        assert suggestions == ["Make sure every 'subgraph' is closed with a matching 'end'"]

    def test_multiple_keywords_accumulate_in_order(self) -> None:
        suggestions = suggest_fixes("Parse error near subgraph")
        assert suggestions[0] == "Check for missing or extra brackets, quotes, or arrows"
        assert suggestions[-1] == "Make sure every 'subgraph' is closed with a matching 'end'"

    def test_fallback_points_at_documentation(self) -> None:
        suggestions = suggest_fixes("something odd")
        assert len(suggestions) == 1
        assert SYNTAX_REFERENCE in suggestions[0]


class TestComposeInvalid:
    """Tests for compose_invalid."""

    def test_keeps_specific_suggestions(self) -> None:
        error = UnclosedBlockError("Unclosed subgraph", suggestions=["Add an 'end'"])
        result = compose_invalid(error)
        assert result.valid is False
        assert result.error_message == "Unclosed subgraph"
        assert result.line_number is None
        assert result.suggestions == ["Add an 'end'"]

    def test_falls_back_to_keyword_suggestions(self) -> None:
        result = compose_invalid(DiagramSyntaxError("Parse error on line 4", line=4))
        assert result.line_number == 4
        assert result.suggestions == suggest_fixes("Parse error on line 4")
