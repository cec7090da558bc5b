"""Shared fixtures for ft_logging tests."""

import io

import pytest

from ft_logging import redirect_output


@pytest.fixture
def log_output():
    """Redirect the shared output sink to an in-memory buffer."""
    buffer = io.StringIO()
    with redirect_output(buffer):
        yield buffer


@pytest.fixture
def last_line(log_output):
    """Return a callable giving the most recent captured line."""
    def _last_line() -> str:
        lines = log_output.getvalue().splitlines()
        return lines[-1] if lines else ""
    return _last_line
