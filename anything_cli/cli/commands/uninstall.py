"""
Uninstall Command.

    <exe> self:uninstall

Deletes this executable's config file and uninstalls the package from
the running interpreter's environment, after confirmation.
"""

import subprocess
import sys

import click
from rich.console import Console

from anything_cli.core.config import load_config
from anything_cli.core.logging import get_logger, log_with_source
from anything_cli.utils.executable import DIST_NAME

logger = get_logger(__name__)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _pip_uninstall_command() -> list[str]:
    return [sys.executable, "-m", "pip", "uninstall", "-y", DIST_NAME]


def handle_uninstall(executable_name: str, commands: list[str]) -> int:
    """Remove config and package. Declining the prompt is not a failure."""
    _, config_path = load_config(executable_name)
    pip_command = _pip_uninstall_command()

    console.print("This will permanently delete:")
    if config_path.exists():
        console.print(f"  - Config file: {config_path}")
    console.print(f"  - Package: {DIST_NAME} ({sys.executable})")

    try:
        confirmed = click.confirm("Are you sure?", default=False)
    except click.Abort:
        confirmed = False

    if not confirmed:
        console.print("Exited.")
        return 0

    if config_path.exists():
        try:
            config_path.unlink()
        except OSError as e:
            err_console.print(f"[red]Failed to delete config file: {e}[/red]")
        else:
            console.print("Config file deleted.")

    log_with_source(logger, "cli", "info", "Uninstalling package", command=pip_command)
    result = subprocess.run(pip_command)

    if result.returncode != 0:
        err_console.print("[red]Failed to uninstall package. Please run the command manually:[/red]")
        err_console.print(f"  {' '.join(pip_command)}")
        return 1

    console.print("Package uninstalled.")
    return 0
