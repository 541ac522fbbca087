"""Severity kinds and their labels and colors."""

from __future__ import annotations

from enum import Enum

# The program-name prefix is always painted in this color.
PROGRAM_COLOR = "blue"


class Severity(Enum):
    """Category of a diagnostic message.

    Each member's value is the label printed in front of the message.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"
    INTERNAL = "internal"

    @property
    def label(self) -> str:
        """Text printed in front of the message."""
        return self.value

    @property
    def color(self) -> str:
        """Rich color name used for this severity's label."""
        return _COLORS[self]


_COLORS = {
    Severity.INFO: "magenta",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
    Severity.FATAL: "red",
    Severity.INTERNAL: "red",
}
