"""Diagram type detection from the declaration line."""

from __future__ import annotations

from loguru import logger

from mermaid_validator.core.errors import MissingDiagramTypeError
from mermaid_validator.schemas import DiagramType, Line

# Checked in order, first prefix match wins.
TYPE_REGISTRY: tuple[tuple[str, DiagramType], ...] = (
    ("graph", DiagramType.FLOWCHART),
    ("flowchart", DiagramType.FLOWCHART),
    ("sequenceDiagram", DiagramType.SEQUENCE),
    ("classDiagram", DiagramType.CLASS),
    ("stateDiagram", DiagramType.STATE),
    ("erDiagram", DiagramType.ER),
    ("gitGraph", DiagramType.GIT_GRAPH),
    ("journey", DiagramType.JOURNEY),
    ("gantt", DiagramType.GANTT),
    ("pie", DiagramType.PIE),
    ("quadrantChart", DiagramType.QUADRANT_CHART),
    ("mindmap", DiagramType.MINDMAP),
    ("timeline", DiagramType.TIMELINE),
)

VALID_KEYWORDS = [keyword for keyword, _ in TYPE_REGISTRY]


def match_type(declaration: str) -> DiagramType:
    """Map a declaration line to its diagram type, or UNKNOWN."""
    for keyword, dtype in TYPE_REGISTRY:
        if declaration.startswith(keyword):
            return dtype
    return DiagramType.UNKNOWN


def detect_type(lines: list[Line]) -> DiagramType:
    """Detect the diagram type from the first line.

    The first line is used even when it is blank or a comment, so a
    diagram must open with its declaration.

    Raises:
        MissingDiagramTypeError: If no registered keyword matches.
    """
    first = lines[0] if lines else None
    declaration = first.trimmed_text if first else ""
    dtype = match_type(declaration)

    if dtype is DiagramType.UNKNOWN:
        logger.debug(f"No diagram type in declaration: {declaration[:50]!r}")
        raise MissingDiagramTypeError(
            "Missing or unrecognized diagram type. "
            f"Valid types: {', '.join(VALID_KEYWORDS)}",
            line=1,
            suggestions=[
                "Start the diagram with a type declaration, e.g. 'flowchart TD' or 'sequenceDiagram'",
            ],
        )

    logger.debug(f"Detected diagram type: {dtype.value}")
    return dtype
