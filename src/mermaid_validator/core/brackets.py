"""Per-line delimiter balance check."""

from __future__ import annotations

from mermaid_validator.core.errors import UnbalancedDelimiterError
from mermaid_validator.core.lines import content_lines
from mermaid_validator.schemas import Line

# (open, close, kind, suggestion)
DELIMITERS: tuple[tuple[str, str, str, str], ...] = (
    ("[", "]", "square brackets", "Check that every '[' has a matching ']' on the same line"),
    ("(", ")", "parentheses", "Check that every '(' has a matching ')' on the same line"),
    ("{", "}", "curly braces", "Check that every '{' has a matching '}' on the same line"),
)


def check_brackets(lines: list[Line]) -> None:
    """Verify that each content line balances its own delimiters.

    Balance is not carried across lines: a bracket opened on one line
    and closed on the next is two violations. Scans top to bottom and
    stops at the first offending line.

    Raises:
        UnbalancedDelimiterError: For the first unbalanced line.
    """
    for line in content_lines(lines):
        text = line.trimmed_text
        for open_char, close_char, kind, suggestion in DELIMITERS:
            if text.count(open_char) != text.count(close_char):
                raise UnbalancedDelimiterError(kind, line.index, [suggestion])
