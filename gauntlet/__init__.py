"""Assertions over expressions that may raise, with pluggable failure reporting."""

from gauntlet.asserts import (
    assert_equal,
    assert_identical,
    assert_no_throw,
    assert_not_identical,
    assert_throws_error,
    assert_zero,
    async_assert_throws_error,
    await_assert_equal,
    await_assert_identical,
    await_assert_no_throw,
    await_assert_not_identical,
    await_assert_throws_error,
    await_assert_zero,
)
from gauntlet.config import GauntletConfig
from gauntlet.models.report import FailureReport, SourceLocation
from gauntlet.reporters import (
    LoggingReporter,
    NullReporter,
    PytestReporter,
    RaisingReporter,
    Reporter,
    ReporterNotFoundError,
)

__all__ = [
    "FailureReport",
    "GauntletConfig",
    "LoggingReporter",
    "NullReporter",
    "PytestReporter",
    "RaisingReporter",
    "Reporter",
    "ReporterNotFoundError",
    "SourceLocation",
    "assert_equal",
    "assert_identical",
    "assert_no_throw",
    "assert_not_identical",
    "assert_throws_error",
    "assert_zero",
    "async_assert_throws_error",
    "await_assert_equal",
    "await_assert_identical",
    "await_assert_no_throw",
    "await_assert_not_identical",
    "await_assert_throws_error",
    "await_assert_zero",
]
