"""Pluggable sinks for assertion failures."""

from gauntlet.reporters.base import Reporter
from gauntlet.reporters.builtin import (
    LoggingReporter,
    NullReporter,
    PytestReporter,
    RaisingReporter,
)
from gauntlet.reporters.loading import (
    ReporterNotFoundError,
    default_reporter,
    load_reporter_class,
)

__all__ = [
    "LoggingReporter",
    "NullReporter",
    "PytestReporter",
    "RaisingReporter",
    "Reporter",
    "ReporterNotFoundError",
    "default_reporter",
    "load_reporter_class",
]
