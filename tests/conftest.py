"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test runs with HOME pointed at a temporary directory, so config
files written by the code under test never touch the real home, and
with ANYTHING_CLI_* overrides cleared.
"""

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from anything_cli.core.config import get_settings
from anything_cli.core.logging import setup_logging

ENV_OVERRIDES = (
    "ANYTHING_CLI_LOG_LEVEL",
    "ANYTHING_CLI_LOG_FORMAT",
    "ANYTHING_CLI_LOG_FILE",
    "ANYTHING_CLI_TIMEOUT",
)

EXECUTABLE_NAME = "anything-cli"


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging() -> None:
    """Route structlog through stdlib at WARNING with no console output."""
    setup_logging(level="WARNING", enable_console=False)


@pytest.fixture(autouse=True)
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point HOME at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    yield home
    get_settings.cache_clear()


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def config_path(home_dir: Path) -> Path:
    """Config file location for the default executable name."""
    return home_dir / f".{EXECUTABLE_NAME}" / "config.json"


@pytest.fixture
def write_config(config_path: Path) -> Callable[..., Path]:
    """
    Write a config file for the default executable name.

    Usage:
        def test_something(write_config):
            write_config(base_url="https://api.test", headers={"A": "1"})
    """

    def _write(**data: Any) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data), encoding="utf-8")
        return config_path

    return _write
