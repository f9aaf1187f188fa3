"""Tests for sequence diagram checks."""

import pytest

from mermaid_validator.core.errors import InvalidMessageSyntaxError
from mermaid_validator.core.lines import split_lines
from mermaid_validator.core.sequence import check_sequence


class TestParticipants:
    """Tests for participant collection."""

    def test_collects_participants_and_actors(self) -> None:
        text = "sequenceDiagram\n  participant Alice\n  actor Bob\n  participant C as Carol"
        assert check_sequence(split_lines(text)) == {"Alice", "Bob", "C"}

    def test_malformed_declaration_ignored(self) -> None:
        assert check_sequence(split_lines("sequenceDiagram\n  participant")) == set()

    def test_undeclared_participants_accepted(self) -> None:
        check_sequence(split_lines("sequenceDiagram\n  participant A\n  X->>Y: hi"))


class TestMessages:
    """Tests for message grammar."""

    @pytest.mark.parametrize(
        "line",
        [
            "A->>B: hello",
            "A-->>B: async reply",
            "A->B: solid",
            "A-->B: hi",
            "A ->> B : spaced",
            "A->>B",
            "A->>+B: activate",
            "B-->>-A: deactivate",
        ],
    )
    def test_valid_messages(self, line: str) -> None:
        check_sequence(split_lines(f"sequenceDiagram\n  {line}"))

    @pytest.mark.parametrize("line", ["A->>: hi", "->>B: hi", "A B->>C: hi", "A->>B C"])
    def test_invalid_messages(self, line: str) -> None:
        with pytest.raises(InvalidMessageSyntaxError) as exc_info:
            check_sequence(split_lines(f"sequenceDiagram\n  participant A\n  {line}"))
        assert exc_info.value.line == 3
        assert exc_info.value.suggestions == ["Use the form 'Actor1->>Actor2: Message'"]

    def test_control_lines_skip_message_grammar(self) -> None:
        text = (
            "sequenceDiagram\n"
            "  Note right of A: a -> b\n"
            "  loop every -> minute\n"
            "  A->>B: ping\n"
            "  end"
        )
        check_sequence(split_lines(text))

    def test_lines_without_arrows_pass(self) -> None:
        check_sequence(split_lines("sequenceDiagram\n  autonumber\n  title Login"))
