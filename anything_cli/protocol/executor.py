"""
Instruction Executor.

Walks an envelope's instructions in order and reports one aggregate
outcome. A declared failure (``error: true``) is remembered, never acted
on early: every instruction after it still runs.

    ping     -> prints "pong"
    execute  -> runs content through the shell; no content is a no-op
    print    -> content to stdout, or stderr when error is set;
                no content prints a blank line
    none     -> nothing visible
    other    -> "Unsupported action: <action>" on stderr, never a failure
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

import click

from anything_cli.core.logging import get_logger, log_with_source
from anything_cli.protocol.envelope import Action, Instruction
from anything_cli.protocol.runner import run_script

logger = get_logger(__name__)

ScriptRunner = Callable[[str], int | None]


@dataclass(frozen=True)
class ExecutionOutcome:
    """Aggregate result of one pass over an instruction list."""

    has_error: bool
    visited: int = 0

    @property
    def exit_code(self) -> int:
        return 1 if self.has_error else 0


def execute(
    instructions: Iterable[Instruction],
    runner: ScriptRunner = run_script,
) -> ExecutionOutcome:
    """
    Run every instruction in order and aggregate declared failures.

    Args:
        instructions: Instructions in server order.
        runner: Callable that runs a shell script. Its status is ignored.

    Returns:
        ExecutionOutcome with has_error set if any visited instruction
        declared a failure.
    """
    has_error = False
    visited = 0

    for instruction in instructions:
        visited += 1
        kind = instruction.kind

        log_with_source(
            logger,
            "protocol",
            "debug",
            "Dispatching instruction",
            index=visited,
            action=instruction.action,
            error=instruction.is_error,
        )

        if kind is Action.PING:
            click.echo("pong")

        elif kind is Action.EXECUTE:
            if instruction.content is not None:
                runner(instruction.content)
                if instruction.is_error:
                    has_error = True

        elif kind is Action.PRINT:
            if instruction.content is None:
                click.echo()
            elif instruction.is_error:
                click.echo(instruction.content, err=True)
                has_error = True
            else:
                click.echo(instruction.content)

        elif kind is Action.NONE:
            if instruction.is_error:
                has_error = True

        else:
            click.echo(f"Unsupported action: {instruction.action}", err=True)

    log_with_source(
        logger, "protocol", "debug", "Instructions processed",
        visited=visited, has_error=has_error,
    )
    return ExecutionOutcome(has_error=has_error, visited=visited)
