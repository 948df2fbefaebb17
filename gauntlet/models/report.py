"""Models for failure reports handed to reporters."""

from pydantic import Field

from gauntlet.models.base import Model


class SourceLocation(Model):
    """Call site an assertion failure is attributed to."""

    file: str = Field(..., description="File identifier of the assertion call")
    line: int = Field(..., ge=0, description="Line number of the assertion call")


class FailureReport(Model):
    """A single failing assertion or failing continuation."""

    message: str = Field(..., description="Formatted diagnostic message")
    file: str = Field(..., description="File identifier of the assertion call")
    line: int = Field(..., ge=0, description="Line number of the assertion call")

    @classmethod
    def at(cls, location: SourceLocation, message: str) -> "FailureReport":
        """Build a report attributed to the given call site."""
        return cls(message=message, file=location.file, line=location.line)

    @property
    def location(self) -> SourceLocation:
        """Call site of the report."""
        return SourceLocation(file=self.file, line=self.line)
