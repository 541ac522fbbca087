"""Source location annotations for messages.

``flm()`` ("file, line, message") puts the caller's file and line in front of
a message, which is mostly useful for internal errors::

    flm()                      # "tool/cli.py:12"
    flm("bad state")           # "tool/cli.py:13: bad state"
    flm("value={}", 5)         # "tool/cli.py:14: value=5"

``expect()`` and ``internal_flm()`` build on it.
"""

from __future__ import annotations

import sys
from typing import NamedTuple, TypeVar

from userror.exceptions import ExpectationError
from userror.logging import get_logger
from userror.printer import get_printer

LOG = get_logger(__name__)

T = TypeVar("T")


class Location(NamedTuple):
    """A source file and line number."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"

    @classmethod
    def caller(cls, depth: int = 1) -> Location:
        """Capture the location ``depth`` frames above the function calling this.

        With the default depth, a helper calling ``Location.caller()`` gets the
        location of whoever called the helper.
        """
        frame = sys._getframe(depth + 1)
        return cls(frame.f_code.co_filename, frame.f_lineno)

    def annotate(self, *args: object) -> str:
        """Prefix a message with this location.

        With no arguments returns just ``file:line``. With one argument the
        message is used verbatim. With more, the first argument is a
        ``str.format`` template for the rest.
        """
        if not args:
            return str(self)
        template, *values = args
        message = str(template).format(*values) if values else str(template)
        return f"{self}: {message}"


def flm(*args: object) -> str:
    """Return the message prefixed with the file and line of this call."""
    return Location.caller().annotate(*args)


def expect(value: T | BaseException | None, *args: object) -> T:
    """Return ``value``, or raise if it is None or an exception.

    The error message is the location of the ``expect()`` call, followed by
    the optional message (formatted like ``flm()``). An exception value is
    appended to the message and chained as the cause.

    Raises:
        ExpectationError: If ``value`` is None or an exception instance.
    """
    if value is None or isinstance(value, BaseException):
        location = Location.caller()
        message = location.annotate(*args)
        if isinstance(value, BaseException):
            message = f"{message}: {value!r}"
        LOG.debug("expectation_failed", location=str(location))
        raise ExpectationError(message, str(location)) from (
            value if isinstance(value, BaseException) else None
        )
    return value


def internal_flm(template: object, *values: object) -> None:
    """Print an internal error annotated with the file and line of this call.

    Raises:
        MessageWriteError: If the line cannot be written.
    """
    get_printer().internal(Location.caller().annotate(template, *values))
