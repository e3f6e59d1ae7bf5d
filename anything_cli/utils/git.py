"""
Git Context.

Reads the origin remote and current branch of the working directory so
the server can tailor its answer to the repository the user is in.
Every failure collapses to "no context"; nothing here raises.
"""

import subprocess
from typing import NamedTuple

from anything_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class GitContext(NamedTuple):
    remote_url: str
    repo_name: str
    branch_name: str


def _git(*args: str) -> str | None:
    """Run a git subcommand and return its trimmed stdout, or None on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
        )
    except OSError:
        return None

    if result.returncode != 0:
        return None
    return result.stdout.strip()


def is_git_installed() -> bool:
    return _git("--version") is not None


def is_git_repository() -> bool:
    return _git("rev-parse", "--is-inside-work-tree") == "true"


def get_remote_url() -> str | None:
    return _git("config", "--get", "remote.origin.url")


def extract_repo_name(remote_url: str) -> str | None:
    """
    Repository name from a remote URL: the last path segment minus ``.git``.

    Returns None when the last segment has no ``.git`` suffix.
    """
    last = remote_url.split("/")[-1]
    if not last.endswith(".git"):
        return None
    return last[: -len(".git")]


def get_current_branch() -> str | None:
    """Current branch name; None on a detached HEAD."""
    return _git("symbolic-ref", "--short", "HEAD")


def get_git_repo_info() -> GitContext | None:
    """Collect git context, or None if any piece is unavailable."""
    if not is_git_installed() or not is_git_repository():
        return None

    remote_url = get_remote_url()
    if not remote_url:
        return None

    repo_name = extract_repo_name(remote_url)
    if repo_name is None:
        return None

    branch_name = get_current_branch()
    if branch_name is None:
        return None

    log_with_source(
        logger, "git", "debug", "Git context found",
        repo_name=repo_name, branch=branch_name,
    )
    return GitContext(remote_url, repo_name, branch_name)
