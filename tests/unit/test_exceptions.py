"""Tests for userror.exceptions module."""

from __future__ import annotations

import pytest

from userror.exceptions import ExpectationError, MessageWriteError, UserrorError


class TestMessageWriteError:
    """Tests for MessageWriteError exception."""

    def test_inherits_from_userror_error(self) -> None:
        assert issubclass(MessageWriteError, UserrorError)

    def test_catchable_as_os_error(self) -> None:
        with pytest.raises(OSError):
            raise MessageWriteError("failed to write error message")

    def test_str_representation(self) -> None:
        err = MessageWriteError("failed to write error message")
        assert str(err) == "failed to write error message"


class TestExpectationError:
    """Tests for ExpectationError exception."""

    def test_inherits_from_userror_error(self) -> None:
        assert issubclass(ExpectationError, UserrorError)

    def test_attributes_stored(self) -> None:
        err = ExpectationError("app.py:3: no config", "app.py:3")
        assert err.message == "app.py:3: no config"
        assert err.location == "app.py:3"

    def test_str_representation(self) -> None:
        err = ExpectationError("app.py:3: no config", "app.py:3")
        assert str(err) == "app.py:3: no config"

    def test_not_an_os_error(self) -> None:
        assert not issubclass(ExpectationError, OSError)
