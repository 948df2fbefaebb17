"""Attribution of failures to the assertion's call site."""

import sys

from gauntlet.models.report import SourceLocation


def call_site(file: str | None, line: int | None, depth: int = 2) -> SourceLocation:
    """Resolve the location a failure is reported at.

    Explicit values are used as given. Missing ones are taken from the frame
    ``depth`` levels above this function, which for a direct call from an
    assertion is the line that invoked the assertion.

    Args:
        file: File identifier supplied by the caller, if any
        line: Line number supplied by the caller, if any
        depth: Frames to walk up from this function

    Returns:
        The resolved call site

    """
    if file is None or line is None:
        frame = sys._getframe(depth)
        if file is None:
            file = frame.f_code.co_filename
        if line is None:
            line = frame.f_lineno
    return SourceLocation(file=file, line=line)
