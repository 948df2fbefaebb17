"""Reporting and continuation dispatch shared by every assertion."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from gauntlet.evaluator import evaluate, evaluate_async
from gauntlet.formatting import format_failure
from gauntlet.judgment import judge_continuation
from gauntlet.models.report import FailureReport, SourceLocation
from gauntlet.models.result import AssertionResult, Failed, Passed
from gauntlet.reporters.base import Reporter
from gauntlet.reporters.loading import default_reporter

log = logging.getLogger(__name__)

type Continuation = Callable[..., Any] | None
type AsyncContinuation = Callable[..., Awaitable[Any] | Any] | None


@dataclass(frozen=True, kw_only=True)
class AssertionContext:
    """Call-scoped state of one assertion.

    Holds what every step after evaluation needs: the name failures are
    stamped with, the caller's custom message, where to report and which
    call site to attribute the report to.
    """

    name: str
    message: str
    reporter: Reporter
    location: SourceLocation

    @classmethod
    def create(
        cls,
        name: str,
        message: str,
        reporter: Reporter | None,
        location: SourceLocation,
    ) -> "AssertionContext":
        """Create a context, falling back to the default reporter."""
        if reporter is None:
            reporter = default_reporter()
        return cls(name=name, message=message, reporter=reporter, location=location)

    def conclude[T](self, result: AssertionResult[T]) -> Passed[T] | None:
        """Report a failed judgment, or return the passing one.

        Args:
            result: Judgment of the assertion or its continuation

        Returns:
            The ``Passed`` result, or None after reporting a failure

        """
        if isinstance(result, Failed):
            self._report(result)
            return None
        return result

    def dispatch(self, then: Continuation, *args: Any) -> None:
        """Run a continuation once and report it if it raises."""
        if then is None:
            return
        self.conclude(judge_continuation(evaluate(lambda: then(*args))))

    async def dispatch_async(self, then: AsyncContinuation, *args: Any) -> None:
        """Run a sync or async continuation once and report it if it raises."""
        if then is None:
            return
        self.conclude(judge_continuation(await evaluate_async(lambda: then(*args))))

    def _report(self, failed: Failed) -> None:
        report = FailureReport.at(
            self.location, format_failure(self.name, failed, self.message)
        )
        log.debug(
            "%s failed (%s) at %s:%d",
            self.name,
            failed.reason,
            report.file,
            report.line,
        )
        self.reporter.submit(report)
