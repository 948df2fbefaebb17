"""Tests for configuration."""

import pytest
from pydantic import ValidationError

from gauntlet.config import REPORTER_ENV_VAR, GauntletConfig


def test_defaults_to_pytest_reporter() -> None:
    """Uses the pytest reporter without configuration."""
    assert GauntletConfig.from_env({}).reporter == "pytest"


def test_reads_reporter_from_environment() -> None:
    """Reads the reporter key from the environment."""
    config = GauntletConfig.from_env({REPORTER_ENV_VAR: " log "})

    assert config.reporter == "log"


def test_ignores_blank_environment_value() -> None:
    """Treats a blank variable as unset."""
    assert GauntletConfig.from_env({REPORTER_ENV_VAR: "  "}).reporter == "pytest"


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Falls back to os.environ when no mapping is given."""
    monkeypatch.setenv(REPORTER_ENV_VAR, "null")

    assert GauntletConfig.from_env().reporter == "null"


def test_rejects_empty_reporter() -> None:
    """Rejects an empty reporter key."""
    with pytest.raises(ValidationError):
        GauntletConfig(reporter="")
