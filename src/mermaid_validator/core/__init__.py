"""Core module exports."""

from mermaid_validator.core.diagnostics import compose_invalid, suggest_fixes
from mermaid_validator.core.engine import DiagramValidator, validate
from mermaid_validator.core.errors import (
    DiagramSyntaxError,
    InvalidArrowSyntaxError,
    InvalidMessageSyntaxError,
    MissingDiagramTypeError,
    UnbalancedDelimiterError,
    UnclosedBlockError,
)

__all__ = [
    "DiagramSyntaxError",
    "DiagramValidator",
    "InvalidArrowSyntaxError",
    "InvalidMessageSyntaxError",
    "MissingDiagramTypeError",
    "UnbalancedDelimiterError",
    "UnclosedBlockError",
    "compose_invalid",
    "suggest_fixes",
    "validate",
]
