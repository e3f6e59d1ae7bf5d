"""
Directive Envelope Schemas.

The server answers with either arbitrary content or a directive envelope:

    {
        "schema": "anything-cli/v0.1.0",
        "instructions": [
            {"action": "print", "content": "hello"},
            {"action": "execute", "content": "make build", "error": true}
        ]
    }

Field names are camelCase on the wire and only the wire names are read,
so ``schema_id`` is an unknown field. Unknown fields are ignored.
Types are validated strictly: "true" is not a boolean here.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

SCHEMA_PREFIX = "anything-cli/v0"


class Action(str, Enum):
    """Directive vocabulary. Anything the client does not know is UNSUPPORTED."""

    PING = "ping"
    EXECUTE = "execute"
    PRINT = "print"
    NONE = "none"
    UNSUPPORTED = "unsupported"

    @classmethod
    def parse(cls, value: str) -> "Action":
        try:
            return cls(value)
        except ValueError:
            return cls.UNSUPPORTED


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        strict=True,
        frozen=True,
    )


class Instruction(_WireModel):
    """One directive. ``action`` keeps the raw string for diagnostics."""

    action: str
    content: str | None = None
    error: bool | None = None

    @property
    def kind(self) -> Action:
        return Action.parse(self.action)

    @property
    def is_error(self) -> bool:
        return bool(self.error)


class Envelope(_WireModel):
    """Top-level directive document."""

    schema_id: str = Field(alias="schema")
    instructions: list[Instruction] | None = None

    def is_supported(self) -> bool:
        """True when the schema is a supported version and instructions are present."""
        return self.schema_id.startswith(SCHEMA_PREFIX) and self.instructions is not None

    def to_json(self) -> str:
        """Serialize back to the wire format."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


def validate(body: str | bytes) -> Envelope | None:
    """
    Accept a response body as a directive envelope, or reject it.

    Returns None for malformed JSON, a shape mismatch, an unsupported
    schema version, or a missing instruction list. A rejection means
    "print the body as-is"; it is not an error.
    """
    try:
        envelope = Envelope.model_validate_json(body)
    except ValidationError:
        return None

    if not envelope.is_supported():
        return None
    return envelope
