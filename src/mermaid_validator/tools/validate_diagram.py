"""validate_diagram tool implementation."""

from __future__ import annotations

from loguru import logger

from mermaid_validator.core import validate
from mermaid_validator.schemas import InvalidResponse, ValidDiagram, ValidResponse


async def validate_diagram(diagram: str) -> dict:
    """Check Mermaid diagram syntax.
    
    Args:
        diagram: Raw Mermaid diagram text
    
    Returns:
        Success payload with diagramType and nodeCount, or a failure payload
        with error, line and suggestions
    """
    logger.info(f"Validating diagram: {len(diagram)} chars")
    
    result = validate(diagram)
    
    if isinstance(result, ValidDiagram):
        response = ValidResponse(
            diagram_type=result.diagram_type,
            node_count=result.node_count,
        )
        return response.model_dump(mode="json", by_alias=True)
    
    response = InvalidResponse(
        error=result.error_message,
        line=result.line_number,
        suggestions=result.suggestions,
    )
    return response.model_dump(mode="json", exclude_none=True)
