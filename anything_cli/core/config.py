"""
Configuration Management.

Three sources, each with its own loader:

Settings (YAML, packaged):
    anything_cli/settings/logging.yaml - Logging defaults

Environment (ANYTHING_CLI_*):
    LOG_LEVEL, LOG_FORMAT, LOG_FILE, TIMEOUT

User config (JSON):
    ~/.<executable-name>/config.json - API base URL and static headers.
    Keyed by executable name so renamed copies of the CLI keep separate
    configurations.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from anything_cli.core.config_schema import ClientConfig
from anything_cli.core.exceptions import ConfigError

logger = structlog.get_logger(__name__)

SETTINGS_DIR = Path(__file__).resolve().parent.parent / "settings"
CONFIG_FILENAME = "config.json"


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from the packaged settings directory."""
    config_path = SETTINGS_DIR / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class Settings(BaseSettings):
    """Per-run overrides read from ANYTHING_CLI_* environment variables."""

    log_level: str | None = None
    log_format: str | None = None
    log_file: str | None = None
    timeout: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="ANYTHING_CLI_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings."""
    return Settings()


def get_config_path(executable_name: str) -> Path:
    """Return the config file path for the given executable name."""
    return Path.home() / f".{executable_name}" / CONFIG_FILENAME


def load_config(executable_name: str) -> tuple[ClientConfig | None, Path]:
    """
    Load the user config for an executable.

    Returns:
        Tuple of (config, path). Config is None when the file is missing,
        unreadable, or does not match the expected shape. The path is
        always returned so callers can report or create it.
    """
    config_path = get_config_path(executable_name)

    if not config_path.exists():
        logger.debug("Config file not found", path=str(config_path))
        return None, config_path

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug("Config file unreadable", path=str(config_path), error=str(e))
        return None, config_path

    try:
        return ClientConfig.model_validate_json(content), config_path
    except ValidationError as e:
        logger.debug("Config file invalid", path=str(config_path), error=str(e))
        return None, config_path


def require_config(executable_name: str) -> ClientConfig:
    """Load the user config or raise ConfigError with a user-facing hint."""
    config, config_path = load_config(executable_name)
    if config is None:
        raise ConfigError(
            f"Failed to load config. Ensure {str(config_path)!r} exists "
            "and has the correct format."
        )
    return config


def save_config(config: ClientConfig, config_path: Path) -> None:
    """
    Write the config as pretty-printed JSON, creating its directory.

    Raises:
        ConfigError: If the directory or file cannot be written.
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(
            f"Error creating config directory {str(config_path.parent)!r}: {e}"
        ) from e

    try:
        config_path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Error writing config file: {e}") from e

    logger.debug("Config saved", path=str(config_path))
