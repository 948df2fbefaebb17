"""Helpers for testing code that uses gauntlet."""

from gauntlet.testing.errors import EquatableError, MockError, WrongError
from gauntlet.testing.reporter import RecordingReporter

__all__ = ["EquatableError", "MockError", "RecordingReporter", "WrongError"]
