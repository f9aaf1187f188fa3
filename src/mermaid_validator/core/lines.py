"""Line splitting and classification."""

from __future__ import annotations

from mermaid_validator.schemas import Line

COMMENT_MARKER = "%%"


def split_lines(text: str) -> list[Line]:
    """Split diagram text into numbered lines.

    Empty input yields a single blank line. Windows line endings are
    treated like plain newlines.
    """
    lines = []
    for index, raw in enumerate(text.split("\n"), start=1):
        raw = raw.rstrip("\r")
        trimmed = raw.strip()
        lines.append(Line(
            index=index,
            raw_text=raw,
            trimmed_text=trimmed,
            is_blank=not trimmed,
            is_comment=trimmed.startswith(COMMENT_MARKER),
        ))
    return lines


def content_lines(lines: list[Line]) -> list[Line]:
    """Lines that are neither blank nor comments."""
    return [line for line in lines if line.is_content]
