"""Structural errors raised by the validation stages."""

from __future__ import annotations

from collections.abc import Iterable


class DiagramSyntaxError(Exception):
    """A structural problem that makes a diagram invalid."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        suggestions: Iterable[str] = (),
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.suggestions = list(suggestions)


class MissingDiagramTypeError(DiagramSyntaxError):
    """First line does not declare a recognized diagram type."""


class UnbalancedDelimiterError(DiagramSyntaxError):
    """A line opens and closes a delimiter a different number of times."""

    def __init__(self, kind: str, line: int, suggestions: Iterable[str] = ()):
        super().__init__(f"Unbalanced {kind} on line {line}", line, suggestions)
        self.kind = kind


class InvalidArrowSyntaxError(DiagramSyntaxError):
    """A flowchart connector is missing its source or target."""


class UnclosedBlockError(DiagramSyntaxError):
    """A subgraph is never closed with `end`."""


class InvalidMessageSyntaxError(DiagramSyntaxError):
    """A sequence message line does not read `Actor1->>Actor2: Message`."""
