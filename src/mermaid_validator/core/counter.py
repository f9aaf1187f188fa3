"""Approximate node counting for success reports."""

from __future__ import annotations

import re

from mermaid_validator.core.flowchart import has_connector, split_connectors
from mermaid_validator.core.lines import content_lines
from mermaid_validator.schemas import Line

LABELED_NODE_PATTERN = re.compile(r"\b\w+\[[^\]]*\]")
IDENTIFIER_PATTERN = re.compile(r"\w+")
EDGE_LABEL_PATTERN = re.compile(r"^\|[^|]*\|")
ARROW_RESIDUE = ">-."


def _leading_identifier(segment: str) -> str | None:
    segment = segment.lstrip(ARROW_RESIDUE).strip()
    segment = EDGE_LABEL_PATTERN.sub("", segment).strip()
    match = IDENTIFIER_PATTERN.match(segment)
    return match.group(0) if match else None


def count_nodes(text: str, lines: list[Line]) -> int:
    """Count labeled nodes plus distinct connector endpoints.

    A node written as `A[label]` that also appears on a connector is
    counted twice, so the result is an upper-bound estimate.
    """
    labeled = len(LABELED_NODE_PATTERN.findall(text))

    endpoints: set[str] = set()
    for line in content_lines(lines):
        if not has_connector(line.trimmed_text):
            continue
        for segment in split_connectors(line.trimmed_text):
            identifier = _leading_identifier(segment)
            if identifier:
                endpoints.add(identifier)

    return labeled + len(endpoints)
