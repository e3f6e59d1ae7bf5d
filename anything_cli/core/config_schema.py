"""
Configuration Schemas.

Pydantic models defining the expected structure of configuration sources.

    LoggingSchema  → anything_cli/settings/logging.yaml (packaged defaults)
    ClientConfig   → ~/.<executable-name>/config.json (user config)

The packaged YAML is strict so a typo in a shipped default fails loudly.
The user config ignores unknown keys so hand-edited files keep loading.
"""

from pydantic import BaseModel, ConfigDict


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int
    backup_count: int


class LoggingHandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: str
    format: str
    handlers: LoggingHandlersSchema


# =============================================================================
# config.json
# =============================================================================


class ClientConfig(BaseModel):
    """User configuration: the API base URL and static request headers."""

    base_url: str
    headers: dict[str, str] | None = None

    model_config = ConfigDict(extra="ignore")
