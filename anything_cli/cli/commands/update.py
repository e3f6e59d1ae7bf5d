"""
Update Command.

    <exe> self:update

Compares the installed version with the latest release on PyPI and
upgrades through pip when they differ.
"""

import subprocess
import sys

import httpx
from rich.console import Console

from anything_cli import __version__
from anything_cli.cli.client import APIClient
from anything_cli.core.exceptions import TransportError, UpdateError
from anything_cli.core.logging import get_logger, log_with_source
from anything_cli.utils.executable import DIST_NAME

logger = get_logger(__name__)
console = Console(highlight=False)

PYPI_URL = f"https://pypi.org/pypi/{DIST_NAME}/json"


def get_latest_version(transport: httpx.BaseTransport | None = None) -> str:
    """
    Fetch the latest released version from the PyPI JSON API.

    Raises:
        UpdateError: If the release metadata cannot be fetched or read.
    """
    with APIClient(PYPI_URL, transport=transport) as client:
        try:
            response = client.get(
                PYPI_URL,
                headers={"User-Agent": f"anything-cli/{__version__}"},
            )
        except TransportError as e:
            raise UpdateError(f"Failed to fetch release info: {e.message}") from e

    if not response.is_success:
        raise UpdateError(f"PyPI returned status: {response.status_code}")

    try:
        version = response.json()["info"]["version"]
    except (ValueError, KeyError, TypeError) as e:
        raise UpdateError("No version found in release metadata") from e

    if not isinstance(version, str) or not version:
        raise UpdateError("No version found in release metadata")

    return version.removeprefix("v")


def _pip_upgrade_command(version: str) -> list[str]:
    return [sys.executable, "-m", "pip", "install", "--upgrade", f"{DIST_NAME}=={version}"]


def handle_update(executable_name: str, commands: list[str]) -> int:
    """Upgrade to the latest release if a newer one exists."""
    console.print("Checking for updates...")
    console.print(f"Current version: {__version__}")

    latest_version = get_latest_version()
    console.print(f"Latest version: {latest_version}")

    if latest_version == __version__:
        console.print("You already have the latest version!")
        return 0

    pip_command = _pip_upgrade_command(latest_version)
    log_with_source(logger, "update", "info", "Upgrading package", command=pip_command)

    result = subprocess.run(pip_command)
    if result.returncode != 0:
        raise UpdateError(f"Failed to update package: pip exited with status {result.returncode}")

    console.print(f"[green]Successfully updated to version {latest_version}![/green]")
    console.print(f"You can now use the updated version of {executable_name}.")
    return 0
