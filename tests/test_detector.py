"""Tests for diagram type detection."""

import pytest

from mermaid_validator.core.detector import VALID_KEYWORDS, detect_type, match_type
from mermaid_validator.core.errors import MissingDiagramTypeError
from mermaid_validator.core.lines import split_lines
from mermaid_validator.schemas import DiagramType


class TestMatchType:
    """Tests for the keyword registry."""

    @pytest.mark.parametrize(
        ("declaration", "expected"),
        [
            ("graph TD", DiagramType.FLOWCHART),
            ("flowchart LR", DiagramType.FLOWCHART),
            ("sequenceDiagram", DiagramType.SEQUENCE),
            ("classDiagram", DiagramType.CLASS),
            ("stateDiagram-v2", DiagramType.STATE),
            ("erDiagram", DiagramType.ER),
            ("gitGraph", DiagramType.GIT_GRAPH),
            ("journey", DiagramType.JOURNEY),
            ("gantt", DiagramType.GANTT),
            ("pie title Pets", DiagramType.PIE),
            ("quadrantChart", DiagramType.QUADRANT_CHART),
            ("mindmap", DiagramType.MINDMAP),
            ("timeline", DiagramType.TIMELINE),
        ],
    )
    def test_known_keywords(self, declaration: str, expected: DiagramType) -> None:
        assert match_type(declaration) is expected

    def test_prefix_match_only(self) -> None:
        """Keywords match as prefixes, not whole words."""
        assert match_type("graphTheMovie") is DiagramType.FLOWCHART

    def test_unknown(self) -> None:
        assert match_type("not a diagram") is DiagramType.UNKNOWN

    def test_case_sensitive(self) -> None:
        assert match_type("SequenceDiagram") is DiagramType.UNKNOWN


class TestDetectType:
    """Tests for detect_type."""

    def test_detects_from_first_line(self) -> None:
        assert detect_type(split_lines("sequenceDiagram\n  A->>B: hi")) is DiagramType.SEQUENCE

    def test_leading_whitespace_is_trimmed(self) -> None:
        assert detect_type(split_lines("   flowchart TD")) is DiagramType.FLOWCHART

    def test_unknown_type_reports_line_one(self) -> None:
        with pytest.raises(MissingDiagramTypeError) as exc_info:
            detect_type(split_lines("not a diagram"))
        assert exc_info.value.line == 1
        assert exc_info.value.suggestions

    def test_error_lists_valid_types(self) -> None:
        with pytest.raises(MissingDiagramTypeError) as exc_info:
            detect_type(split_lines("hello"))
        for keyword in VALID_KEYWORDS:
            assert keyword in exc_info.value.message

    def test_blank_first_line_is_not_skipped(self) -> None:
        with pytest.raises(MissingDiagramTypeError):
            detect_type(split_lines("\ngraph TD\n  A --> B"))

    def test_comment_first_line_is_not_skipped(self) -> None:
        with pytest.raises(MissingDiagramTypeError):
            detect_type(split_lines("%% title\ngraph TD"))
