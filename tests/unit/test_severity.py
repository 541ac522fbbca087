"""Tests for userror.severity module."""

import pytest

from userror.severity import PROGRAM_COLOR, Severity


class TestSeverity:
    """Tests for Severity labels and colors."""

    @pytest.mark.parametrize(
        ("severity", "label"),
        [
            (Severity.INFO, "info"),
            (Severity.WARNING, "warning"),
            (Severity.ERROR, "error"),
            (Severity.FATAL, "fatal"),
            (Severity.INTERNAL, "internal"),
        ],
    )
    def test_labels(self, severity: Severity, label: str) -> None:
        assert severity.label == label

    def test_info_and_warning_have_their_own_colors(self) -> None:
        assert Severity.INFO.color == "magenta"
        assert Severity.WARNING.color == "yellow"

    def test_failures_share_red(self) -> None:
        assert {Severity.ERROR.color, Severity.FATAL.color, Severity.INTERNAL.color} == {"red"}

    def test_program_color_is_distinct(self) -> None:
        assert PROGRAM_COLOR == "blue"
        assert all(s.color != PROGRAM_COLOR for s in Severity)

    def test_every_severity_has_a_color(self) -> None:
        for severity in Severity:
            assert severity.color

    def test_properties_are_documented(self) -> None:
        assert Severity.label.__doc__
        assert Severity.color.__doc__
