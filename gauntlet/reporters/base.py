"""Abstract base class for failure reporters."""

from abc import ABC, abstractmethod

from gauntlet.models.report import FailureReport


class Reporter(ABC):
    """Sink that records assertion failures.

    The engine calls a reporter once per failing assertion and once per
    failing continuation, and never otherwise. Whether a report halts the
    current test is up to the implementation. A reporter shared between
    concurrent callers serialises its own access.
    """

    @abstractmethod
    def report(self, message: str, file: str, line: int) -> None:
        """Record a failure.

        Args:
            message: Formatted diagnostic message
            file: File identifier of the assertion call site
            line: Line number of the assertion call site

        """

    def submit(self, report: FailureReport) -> None:
        """Record a prepared failure report."""
        self.report(report.message, report.file, report.line)
