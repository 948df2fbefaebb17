"""Shared fixtures for gauntlet tests."""

from unittest.mock import Mock

import pytest

from gauntlet.testing.reporter import RecordingReporter


@pytest.fixture
def reporter() -> RecordingReporter:
    """Create reporter that records failures."""
    return RecordingReporter()


@pytest.fixture
def then() -> Mock:
    """Create continuation mock."""
    return Mock(return_value=None)
