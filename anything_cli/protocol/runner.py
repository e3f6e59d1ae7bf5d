"""
Script Runner.

Runs one shell command line synchronously with inherited stdio.
The exit status is informational: it is reported, never raised.
Whether a step counts as a failure is the server's call, made through
the instruction's own error flag.
"""

import subprocess

import click

from anything_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def run_script(script: str) -> int | None:
    """
    Execute a script through the system shell and wait for it.

    Returns:
        The exit status, negative when the shell was killed by a signal,
        or None when the shell could not be started.
    """
    log_with_source(logger, "shell", "debug", "Running script", script=script)

    try:
        result = subprocess.run(script, shell=True)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        log_with_source(logger, "shell", "debug", "Script failed to start", error=str(e))
        return None

    returncode = result.returncode
    if returncode < 0:
        click.echo(f"Error: script terminated by signal {-returncode}", err=True)
    elif returncode != 0:
        click.echo(f"Error: script exited with status {returncode}", err=True)

    log_with_source(logger, "shell", "debug", "Script finished", returncode=returncode)
    return returncode
