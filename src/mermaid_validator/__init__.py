"""Structural syntax validation for Mermaid diagrams."""

from mermaid_validator.core import DiagramValidator, suggest_fixes, validate
from mermaid_validator.schemas import DiagramType, InvalidDiagram, ValidationResult, ValidDiagram

__version__ = "2.0.0"

__all__ = [
    "DiagramType",
    "DiagramValidator",
    "InvalidDiagram",
    "ValidationResult",
    "ValidDiagram",
    "suggest_fixes",
    "validate",
    "__version__",
]
