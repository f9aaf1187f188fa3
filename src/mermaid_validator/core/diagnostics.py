"""Turn structural errors into invalid results with suggestions."""

from __future__ import annotations

from mermaid_validator.core.errors import DiagramSyntaxError
from mermaid_validator.schemas import InvalidDiagram

SYNTAX_REFERENCE = "https://mermaid.js.org/intro/syntax-reference.html"

KEYWORD_SUGGESTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Parse error", (
        "Check for missing or extra brackets, quotes, or arrows",
        "Make sure node IDs do not use reserved words such as 'end'",
    )),
    ("Lexical error", (
        "Check for invalid characters in node labels",
        "Wrap labels containing special characters in double quotes",
    )),
    ("subgraph", (
        "Make sure every 'subgraph' is closed with a matching 'end'",
    )),
)


def suggest_fixes(message: str) -> list[str]:
    """Derive suggestions from keywords in an error message."""
    suggestions: list[str] = []
    for keyword, hints in KEYWORD_SUGGESTIONS:
        if keyword in message:
            suggestions.extend(hints)
    if not suggestions:
        suggestions.append(f"Check the Mermaid syntax documentation: {SYNTAX_REFERENCE}")
    return suggestions


def compose_invalid(error: DiagramSyntaxError) -> InvalidDiagram:
    """Build an InvalidDiagram, falling back to keyword suggestions."""
    return InvalidDiagram(
        error_message=error.message,
        line_number=error.line,
        suggestions=error.suggestions or suggest_fixes(error.message),
    )
