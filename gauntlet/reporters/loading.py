"""Loading of reporters from entry points."""

import logging
from importlib.metadata import entry_points

from gauntlet.config import GauntletConfig
from gauntlet.reporters.base import Reporter

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "gauntlet.reporters"


class ReporterNotFoundError(Exception):
    """Raised when a reporter is not found."""


def load_reporter_class(key: str) -> type[Reporter]:
    """Load a reporter class by key.

    Args:
        key: The reporter key as registered in pyproject.toml
             (e.g., "pytest", "null")

    Returns:
        The reporter class

    Raises:
        ReporterNotFoundError: If no reporter with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            reporter_cls: type[Reporter] = entry.load()
            log.debug("Loaded reporter %s from %s", key, entry.value)
            return reporter_cls

    available = [e.name for e in entries]
    raise ReporterNotFoundError(
        f"Reporter '{key}' not found. Available reporters: {available}"
    )


def default_reporter(config: GauntletConfig | None = None) -> Reporter:
    """Instantiate the reporter used when an assertion is given none.

    Args:
        config: Configuration to use; read from the environment when omitted

    Returns:
        A fresh instance of the configured reporter

    """
    if config is None:
        config = GauntletConfig.from_env()
    return load_reporter_class(config.reporter)()
