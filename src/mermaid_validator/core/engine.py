"""Mermaid diagram syntax validator."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from mermaid_validator.core.brackets import check_brackets
from mermaid_validator.core.counter import count_nodes
from mermaid_validator.core.detector import detect_type
from mermaid_validator.core.diagnostics import compose_invalid
from mermaid_validator.core.errors import DiagramSyntaxError
from mermaid_validator.core.flowchart import check_flowchart
from mermaid_validator.core.lines import split_lines
from mermaid_validator.core.sequence import check_sequence
from mermaid_validator.schemas import DiagramType, Line, ValidationResult, ValidDiagram
from mermaid_validator.utils import truncate_text

TypeCheck = Callable[[list[Line]], object]


class DiagramValidator:
    """Line-oriented structural validator for Mermaid diagrams.

    Stages run in order (type detection, bracket balance, then the
    checks registered for the detected type) and the first failure
    short-circuits the rest. Instances hold no per-call state and can
    be shared between concurrent callers.
    """

    def __init__(self, type_checks: dict[DiagramType, TypeCheck] | None = None):
        self.type_checks: dict[DiagramType, TypeCheck] = {
            DiagramType.FLOWCHART: check_flowchart,
            DiagramType.SEQUENCE: check_sequence,
        }
        if type_checks:
            self.type_checks.update(type_checks)

    def validate(self, diagram: str) -> ValidationResult:
        """Validate a diagram and return its verdict.

        Args:
            diagram: Raw Mermaid text

        Returns:
            ValidDiagram with type and approximate node count, or
            InvalidDiagram describing the first problem found.

        Raises:
            TypeError: If diagram is not a string.
        """
        if not isinstance(diagram, str):
            msg = f"diagram must be a string, got {type(diagram).__name__}"
            raise TypeError(msg)

        lines = split_lines(diagram)
        logger.debug(f"Validating diagram ({len(lines)} lines): {truncate_text(diagram, 200)!r}")

        try:
            dtype = detect_type(lines)
            check_brackets(lines)
            type_check = self.type_checks.get(dtype)
            if type_check:
                type_check(lines)
        except DiagramSyntaxError as e:
            result = compose_invalid(e)
            logger.info(f"Diagram invalid: {result.error_message} (line {result.line_number})")
            return result

        node_count = count_nodes(diagram, lines)
        logger.info(f"Diagram valid: {dtype.value}, {node_count} nodes")
        return ValidDiagram(diagram_type=dtype, node_count=node_count)


_default_validator = DiagramValidator()


def validate(diagram: str) -> ValidationResult:
    """Validate diagram text with the default validator."""
    return _default_validator.validate(diagram)
