"""
Directive Protocol.

Validates a response body as a directive envelope and executes its
instructions.
"""

from anything_cli.protocol.envelope import (
    SCHEMA_PREFIX,
    Action,
    Envelope,
    Instruction,
    validate,
)
from anything_cli.protocol.executor import ExecutionOutcome, execute
from anything_cli.protocol.runner import run_script

__all__ = [
    "SCHEMA_PREFIX",
    "Action",
    "Envelope",
    "ExecutionOutcome",
    "Instruction",
    "execute",
    "run_script",
    "validate",
]
