"""Configuration for gauntlet."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

REPORTER_ENV_VAR = "GAUNTLET_REPORTER"


class GauntletConfig(BaseModel):
    """Configuration for gauntlet."""

    reporter: str = Field(
        default="pytest",
        min_length=1,
        description="Entry-point key of the reporter used when none is passed",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GauntletConfig":
        """Build configuration from ``GAUNTLET_*`` environment variables."""
        if environ is None:
            environ = os.environ
        values: dict[str, str] = {}
        if reporter := environ.get(REPORTER_ENV_VAR, "").strip():
            values["reporter"] = reporter
        return cls(**values)
