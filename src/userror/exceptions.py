"""Custom exceptions for userror package."""

from __future__ import annotations


class UserrorError(Exception):
    """Base exception class for all userror errors."""


class MessageWriteError(UserrorError, OSError):
    """Raised when a diagnostic line cannot be written to standard error.

    Always chained from the ``OSError`` the stream raised, and catchable as
    ``OSError`` itself.
    """


class ExpectationError(UserrorError):
    """A value passed to ``expect()`` was missing or an exception.

    Attributes:
        location: ``file:line`` of the ``expect()`` call.
        message: The full annotated message.
    """

    def __init__(self, message: str, location: str) -> None:
        super().__init__(message)
        self.message = message
        self.location = location
