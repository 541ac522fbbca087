"""Pytest configuration for userror tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to sys.path for test imports
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch):
    """Isolate each test from process-wide userror state.

    This fixture:
    - Removes USERROR_* environment variables
    - Resets the global printer and settings instances before each test
    - Detaches any stderr log handler added by configure_logging()
    """
    for name in ("USERROR_COLOR", "USERROR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    from userror.config import reset_settings
    from userror.logging import reset_logging
    from userror.printer import reset_printer

    reset_settings()
    reset_printer()
    yield
    reset_printer()
    reset_logging()
