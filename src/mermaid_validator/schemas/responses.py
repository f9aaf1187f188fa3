"""HTTP payload schemas for the validation service."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from mermaid_validator.schemas.validation import DiagramType


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ValidResponse(BaseModel):
    """Success payload returned for a valid diagram."""
    model_config = ConfigDict(populate_by_name=True)

    valid: bool = True
    message: str = "Diagram is valid"
    diagram_type: DiagramType = Field(serialization_alias="diagramType")
    node_count: int = Field(serialization_alias="nodeCount")
    timestamp: datetime = Field(default_factory=utc_now)


class InvalidResponse(BaseModel):
    """Client-error payload returned for an invalid diagram."""
    valid: bool = False
    error: str
    line: int | None = None
    suggestions: list[str] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=utc_now)


class ErrorResponse(BaseModel):
    """Payload for rejected requests and internal faults."""
    valid: bool = False
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    """Health check payload."""
    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    service: str = "Mermaid Validator"
    version: str
    validator_ready: bool = Field(default=True, serialization_alias="validatorReady")
    endpoints: list[str] = Field(default_factory=lambda: ["/validate"])
