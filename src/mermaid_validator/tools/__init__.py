"""Tool implementations."""

from mermaid_validator.tools.validate_diagram import validate_diagram

__all__ = ["validate_diagram"]
