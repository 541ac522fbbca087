"""User-facing diagnostic lines on standard error.

Every line has the shape ``[<program>:]<label>: <message>``. The program name
and the severity label are colored when the printer was built with
``ColorMode.ENABLED``; the message text is always written as given.

Most programs only need the module-level helpers::

    from userror import error, fatal

    error("could not open output file, printing to screen")
    fatal("no input given")

Programs that want plain output (or settings-driven output) install their own
printer once at startup with :func:`set_printer`.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from rich.console import Console
from rich.text import Text

from userror.exceptions import MessageWriteError
from userror.logging import get_logger
from userror.severity import PROGRAM_COLOR, Severity

if TYPE_CHECKING:
    from userror.config import UserrorSettings

LOG = get_logger(__name__)

# Exit status of a process ended by fatal(); the conventional panic status.
FATAL_EXIT_STATUS = 101


class ColorMode(Enum):
    """Whether severity labels and the program name are colored."""

    ENABLED = "enabled"
    DISABLED = "disabled"


def current_program() -> str | None:
    """Return the base name of the running program.

    Looked up on every call from ``sys.argv[0]``. Returns None when there is
    no usable name, in which case lines are printed without the prefix. Under
    ``python -c`` there is no program name; under ``python -m pkg`` the
    package name is used instead of ``__main__.py``.
    """
    argv = getattr(sys, "argv", None)
    if not argv or not argv[0] or argv[0] == "-c":
        LOG.debug("program_name_unavailable", argv0=argv[0] if argv else None)
        return None

    path = Path(argv[0])
    name = path.name
    if name == "__main__.py" and path.parent.name:
        name = path.parent.name
    if not name:
        LOG.debug("program_name_unavailable", argv0=argv[0])
        return None
    return name


def _stderr_console(color: ColorMode) -> Console:
    # Explicit values everywhere so NO_COLOR, FORCE_COLOR and TTY detection
    # never override the mode the printer was built with.
    if color is ColorMode.ENABLED:
        return Console(
            stderr=True,
            force_terminal=True,
            force_interactive=False,
            color_system="standard",
            no_color=False,
            highlight=False,
        )
    return Console(
        stderr=True,
        force_terminal=False,
        force_interactive=False,
        color_system=None,
        no_color=True,
        highlight=False,
    )


def _flush_stdout() -> None:
    # Output the host already printed must survive os._exit().
    stream = sys.stdout
    if stream is None:
        return
    try:
        stream.flush()
    except (OSError, ValueError) as exc:
        LOG.debug("stdout_flush_failed", error=str(exc))


class Printer:
    """Formats diagnostic lines and writes them to standard error.

    Args:
        color: Color mode, fixed for the lifetime of the printer.
        console: Console to render with and write to. Defaults to a stderr
            console configured for ``color``.
        program: Callable returning the program name, or None to omit the
            prefix. Called once per printed line.
    """

    def __init__(
        self,
        color: ColorMode = ColorMode.ENABLED,
        *,
        console: Console | None = None,
        program: Callable[[], str | None] = current_program,
    ) -> None:
        self.color = color
        self.console = console if console is not None else _stderr_console(color)
        self._program = program

    @classmethod
    def from_settings(cls, settings: UserrorSettings | None = None) -> Printer:
        """Build a printer from ``UserrorSettings`` (environment driven)."""
        from userror.config import get_settings

        settings = settings or get_settings()
        return cls(settings.color)

    def prefix(self, severity: Severity) -> Text:
        """Build the styled ``[name:]label`` part of a line."""
        label = Text(severity.label, style=severity.color)
        name = self._program()
        if name is None:
            return label
        return Text.assemble(Text(name, style=PROGRAM_COLOR), ":", label)

    def format(self, severity: Severity, message: str) -> str:
        """Build the uncolored line for a message, without the trailing newline."""
        return f"{self.prefix(severity).plain}: {message}"

    def render(self, severity: Severity, message: str) -> str:
        """Render the full line, escape codes and newline included.

        Only the prefix goes through the console; the message is appended
        as given, tabs and control characters included.
        """
        with self.console.capture() as capture:
            self.console.print(
                self.prefix(severity),
                end="",
                soft_wrap=True,
                crop=False,
                highlight=False,
                markup=False,
                emoji=False,
            )
        return f"{capture.get()}: {message}\n"

    def print(self, severity: Severity, message: str) -> None:
        """Write one diagnostic line to the console's stream.

        Raises:
            MessageWriteError: If the stream refuses the write.
        """
        line = self.render(severity, message)
        stream = self.console.file
        try:
            stream.write(line)
            stream.flush()
        except OSError as exc:
            LOG.debug("write_failed", severity=severity.label, error=str(exc))
            raise MessageWriteError(f"failed to write {severity.label} message: {exc}") from exc

    def info(self, message: str) -> None:
        """Print some non-erroneous information."""
        self.print(Severity.INFO, message)

    def warn(self, message: str) -> None:
        """Print a warning.

        Warnings lead to sub-optimal but not strictly incorrect behaviour, such
        as falling back to a default stylesheet when a custom one fails to load.
        """
        self.print(Severity.WARNING, message)

    def error(self, message: str) -> None:
        """Print an error.

        Errors are recoverable but stop the program from working properly or
        in its entirety, such as printing results to screen because the
        output file could not be opened.
        """
        self.print(Severity.ERROR, message)

    def internal(self, message: str) -> None:
        """Print an internal error: a bug or failed invariant, not necessarily fatal."""
        self.print(Severity.INTERNAL, message)

    def fatal(self, message: str) -> NoReturn:
        """Print a fatal error and end the process.

        Fatal errors cannot be recovered from, such as failing to read user
        input. The process exits with ``FATAL_EXIT_STATUS`` right after the
        line is written and stdout is flushed, or aborts at once if the line
        cannot be written. No ``atexit`` handlers or ``finally`` blocks run in
        either case.
        """
        try:
            self.print(Severity.FATAL, message)
        except Exception:
            LOG.debug("fatal_abort")
            os.abort()
        _flush_stdout()
        LOG.debug("fatal_exit", status=FATAL_EXIT_STATUS)
        os._exit(FATAL_EXIT_STATUS)


# Process-wide printer used by the module-level helpers
_printer: Printer | None = None


def get_printer() -> Printer:
    """Get or create the process-wide printer (color enabled by default)."""
    global _printer
    if _printer is None:
        _printer = Printer(ColorMode.ENABLED)
    return _printer


def set_printer(printer: Printer) -> None:
    """Install the printer the module-level helpers write with."""
    global _printer
    _printer = printer


def reset_printer() -> None:
    """Reset the process-wide printer (useful for testing)."""
    global _printer
    _printer = None


def info(message: str) -> None:
    """Print some non-erroneous information."""
    get_printer().info(message)


def warn(message: str) -> None:
    """Print a warning message."""
    get_printer().warn(message)


def error(message: str) -> None:
    """Print an error message."""
    get_printer().error(message)


def internal(message: str) -> None:
    """Print an internal error message. The caller decides whether to continue."""
    get_printer().internal(message)


def fatal(message: str) -> NoReturn:
    """Print a fatal error message and end the process."""
    get_printer().fatal(message)
