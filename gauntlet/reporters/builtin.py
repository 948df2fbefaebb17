"""Reporters shipped with gauntlet."""

import logging
from dataclasses import dataclass, field

import pytest

from gauntlet.reporters.base import Reporter

FAILURE_LOGGER = "gauntlet.failures"


def _located(message: str, file: str, line: int) -> str:
    return f"{file}:{line}: {message}"


class NullReporter(Reporter):
    """Reporter that discards every failure."""

    def report(self, message: str, file: str, line: int) -> None:
        """Ignore the failure."""


class PytestReporter(Reporter):
    """Reporter that fails the running pytest test."""

    def report(self, message: str, file: str, line: int) -> None:
        """Fail the current test without a traceback."""
        pytest.fail(_located(message, file, line), pytrace=False)


class RaisingReporter(Reporter):
    """Reporter that raises ``AssertionError``, for unittest and scripts.

    Inside a continuation the raised error is captured by the outer
    assertion and reported again as a continuation failure.
    """

    def report(self, message: str, file: str, line: int) -> None:
        """Raise the failure as an ``AssertionError``."""
        raise AssertionError(_located(message, file, line))


@dataclass(frozen=True, kw_only=True)
class LoggingReporter(Reporter):
    """Reporter that logs failures and lets the caller carry on."""

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger(FAILURE_LOGGER)
    )

    def report(self, message: str, file: str, line: int) -> None:
        """Log the failure at ERROR level."""
        self.logger.error("%s:%d: %s", file, line, message)
