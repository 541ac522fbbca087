"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console


class BrokenStream(io.StringIO):
    """A stream whose writes fail like a closed pipe."""

    def write(self, s: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")


@pytest.fixture
def plain_console() -> Console:
    """Console writing uncolored output to an in-memory buffer."""
    return Console(file=io.StringIO(), no_color=True, highlight=False)


@pytest.fixture
def color_console() -> Console:
    """Console writing 8-color ANSI output to an in-memory buffer."""
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="standard",
        no_color=False,
        highlight=False,
    )


@pytest.fixture
def broken_console() -> Console:
    """Console whose underlying stream refuses every write."""
    return Console(file=BrokenStream(), no_color=True, highlight=False)

