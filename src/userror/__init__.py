"""userror - user-facing error messages for command-line programs.

Print categorized diagnostics to standard error, optionally with colored
severity labels and the program's name in front of each line.

This package provides:
- info/warn/error/internal helpers that write one line each
- fatal, which prints and then ends the process
- flm/expect/internal_flm for messages annotated with file and line

Example:
    >>> from userror import error, flm, internal_flm
    >>> error("disk full")                  # mytool:error: disk full
    >>> internal_flm("bad index {}", 3)     # mytool:internal: app.py:7: bad index 3
"""

from userror.config import UserrorSettings, get_settings
from userror.exceptions import ExpectationError, MessageWriteError, UserrorError
from userror.location import Location, expect, flm, internal_flm
from userror.logging import configure_logging
from userror.printer import (
    FATAL_EXIT_STATUS,
    ColorMode,
    Printer,
    current_program,
    error,
    fatal,
    get_printer,
    info,
    internal,
    reset_printer,
    set_printer,
    warn,
)
from userror.severity import Severity

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Printing
    "info",
    "warn",
    "error",
    "fatal",
    "internal",
    "Printer",
    "ColorMode",
    "Severity",
    "FATAL_EXIT_STATUS",
    "current_program",
    "get_printer",
    "set_printer",
    "reset_printer",
    # Location annotation
    "Location",
    "flm",
    "expect",
    "internal_flm",
    # Configuration
    "UserrorSettings",
    "get_settings",
    "configure_logging",
    # Exceptions
    "UserrorError",
    "MessageWriteError",
    "ExpectationError",
]
