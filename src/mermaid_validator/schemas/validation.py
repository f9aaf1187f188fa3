"""Validation schemas for Mermaid diagram checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class DiagramType(str, Enum):
    """Types of Mermaid diagrams recognized by the validator."""
    FLOWCHART = "flowchart"
    SEQUENCE = "sequence"
    CLASS = "class"
    STATE = "state"
    ER = "er"
    GANTT = "gantt"
    PIE = "pie"
    JOURNEY = "journey"
    GIT_GRAPH = "gitGraph"
    QUADRANT_CHART = "quadrantChart"
    MINDMAP = "mindmap"
    TIMELINE = "timeline"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Line:
    """A single line of diagram text with its 1-based position."""
    index: int
    raw_text: str
    trimmed_text: str
    is_blank: bool
    is_comment: bool

    @property
    def is_content(self) -> bool:
        return not (self.is_blank or self.is_comment)


class ValidDiagram(BaseModel):
    """Diagram passed every structural check."""
    model_config = ConfigDict(frozen=True)

    valid: Literal[True] = True
    diagram_type: DiagramType
    node_count: int = Field(default=0, ge=0)


class InvalidDiagram(BaseModel):
    """First structural problem found in a diagram."""
    model_config = ConfigDict(frozen=True)

    valid: Literal[False] = False
    error_message: str
    line_number: int | None = Field(default=None, ge=1)
    suggestions: list[str] = Field(default_factory=list)


ValidationResult = Union[ValidDiagram, InvalidDiagram]
