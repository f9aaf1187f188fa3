"""Pydantic schemas for the Mermaid validator."""

from mermaid_validator.schemas.responses import (
    ErrorResponse,
    HealthResponse,
    InvalidResponse,
    ValidResponse,
)
from mermaid_validator.schemas.validation import (
    DiagramType,
    InvalidDiagram,
    Line,
    ValidationResult,
    ValidDiagram,
)

__all__ = [
    "DiagramType",
    "ErrorResponse",
    "HealthResponse",
    "InvalidDiagram",
    "InvalidResponse",
    "Line",
    "ValidationResult",
    "ValidDiagram",
    "ValidResponse",
]
