"""Sequence diagram checks: participants and message grammar."""

from __future__ import annotations

import re

from loguru import logger

from mermaid_validator.core.errors import InvalidMessageSyntaxError
from mermaid_validator.core.lines import content_lines
from mermaid_validator.schemas import Line

PARTICIPANT_PATTERN = re.compile(r"^(?:participant|actor)\s+(\w+)\b")
ARROW_PATTERN = re.compile(r"-{1,2}>{1,2}")
MESSAGE_PATTERN = re.compile(r"^(\w+)\s*(-{1,2}>{1,2})\s*[+-]?(\w+)\s*(?::.*)?$")

CONTROL_KEYWORDS = frozenset({
    "activate", "alt", "and", "autonumber", "box", "break", "create",
    "critical", "deactivate", "destroy", "else", "end", "link", "links",
    "loop", "note", "opt", "par", "rect", "title",
})


def _is_control_line(text: str) -> bool:
    first_word = text.split(maxsplit=1)[0].lower()
    return first_word in CONTROL_KEYWORDS


def check_sequence(lines: list[Line]) -> set[str]:
    """Validate message lines and collect declared participants.

    Participants are only collected; messages between undeclared
    actors are accepted.

    Returns:
        Identifiers declared with `participant` or `actor`.

    Raises:
        InvalidMessageSyntaxError: A message line is malformed.
    """
    participants: set[str] = set()

    for line in content_lines(lines):
        text = line.trimmed_text

        declared = PARTICIPANT_PATTERN.match(text)
        if declared:
            participants.add(declared.group(1))
            continue

        if _is_control_line(text) or not ARROW_PATTERN.search(text):
            continue

        if not MESSAGE_PATTERN.match(text):
            raise InvalidMessageSyntaxError(
                f"Invalid message syntax on line {line.index}",
                line=line.index,
                suggestions=["Use the form 'Actor1->>Actor2: Message'"],
            )

    logger.debug(f"Sequence participants: {sorted(participants)}")
    return participants
