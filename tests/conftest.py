"""
Root pytest configuration and fixtures for yes-or-no.

Provides common fixtures and test utilities for the test suite.
"""

from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.utils.mocks import FakeTerminal  # noqa: E402


@pytest.fixture
def question():
    """Question text used by prompt tests."""
    return "Do you like Python?"


@pytest.fixture
def make_terminal():
    """Factory for scripted terminal doubles."""

    def _make(events=(), fail_on=None) -> FakeTerminal:
        return FakeTerminal(events=events, fail_on=fail_on)

    return _make
