"""Pytest plugin providing reporter fixtures."""

import pytest

from gauntlet.reporters.builtin import NullReporter
from gauntlet.testing.reporter import RecordingReporter


@pytest.fixture
def recording_reporter() -> RecordingReporter:
    """Reporter that records failures for inspection."""
    return RecordingReporter()


@pytest.fixture
def null_reporter() -> NullReporter:
    """Reporter that discards failures."""
    return NullReporter()
