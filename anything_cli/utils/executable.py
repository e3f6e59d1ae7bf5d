"""Executable-name discovery."""

import sys
from pathlib import Path

DEFAULT_NAME = "default"
DIST_NAME = "anything-cli"


def get_executable_name(argv0: str | None = None) -> str:
    """
    Name the CLI was invoked as, without directory or extension.

    Selects the config directory (``~/.<name>/``), so installing the same
    CLI under two names gives two independent configurations.
    ``python -m anything_cli`` maps to the distribution name.
    """
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv else ""

    stem = Path(argv0).stem
    if not stem:
        return DEFAULT_NAME
    if stem == "__main__":
        return DIST_NAME
    return stem
