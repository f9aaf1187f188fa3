"""Flowchart structure checks: subgraph blocks and connector arity."""

from __future__ import annotations

import re

from mermaid_validator.core.errors import InvalidArrowSyntaxError, UnclosedBlockError
from mermaid_validator.core.lines import content_lines
from mermaid_validator.schemas import Line

BLOCK_OPEN_PATTERN = re.compile(r"^subgraph\b")
BLOCK_CLOSE = "end"

# Longest tokens first so `-.->` is not read as a plain dash.
CONNECTOR_PATTERN = re.compile(r"-\.->|-->|---|==>")


def split_connectors(text: str) -> list[str]:
    """Split a line on flowchart connectors, dropping empty segments."""
    return [seg.strip() for seg in CONNECTOR_PATTERN.split(text) if seg.strip()]


def has_connector(text: str) -> bool:
    return CONNECTOR_PATTERN.search(text) is not None


def check_flowchart(lines: list[Line]) -> None:
    """Validate subgraph/end pairing and connector endpoints.

    Raises:
        InvalidArrowSyntaxError: A connector line lacks a source or target.
        UnclosedBlockError: A subgraph is still open at end of document.
    """
    depth = 0

    for line in content_lines(lines):
        text = line.trimmed_text

        if BLOCK_OPEN_PATTERN.match(text):
            depth += 1
        elif text == BLOCK_CLOSE:
            # A stray `end` outside any block is tolerated.
            depth = max(depth - 1, 0)

        if has_connector(text) and len(split_connectors(text)) < 2:
            raise InvalidArrowSyntaxError(
                f"Invalid arrow syntax on line {line.index}",
                line=line.index,
                suggestions=[
                    "Connect two nodes with an arrow, e.g. 'A --> B'",
                    "Supported connectors: -->, ---, -.->, ==>",
                ],
            )

    if depth:
        raise UnclosedBlockError(
            "Unclosed subgraph",
            suggestions=["Add an 'end' line to close each subgraph"],
        )
