"""
anything-cli entry point.

Every argument is passed through to the configured API:

    anything-cli users list --limit 10 -v
        GET <base_url>/users/list?limit=10&v=true

The response is printed as-is, unless it is a directive envelope, in
which case its instructions are executed. Internal commands live under
the ``self:`` prefix:

    anything-cli self:set-base-url https://api.example.com
    anything-cli self:set-header Authorization "Bearer ..."
    anything-cli self:set-header Authorization        # remove
    anything-cli self:update
    anything-cli self:uninstall
    anything-cli --version

Exit status is 0 on success and 1 when a directive declared a failure,
the server answered with a non-2xx status, or the request could not be
made.
"""

import json
import math
import sys

import click
import httpx

from anything_cli import __version__
from anything_cli.cli.client import APIClient, build_headers, read_text
from anything_cli.cli.commands import INTERNAL_COMMANDS
from anything_cli.cli.tokenizer import split_arguments, tokenize
from anything_cli.core.config import get_settings, require_config
from anything_cli.core.exceptions import ApplicationError
from anything_cli.core.logging import get_logger, log_with_source, setup_logging
from anything_cli.protocol import execute, validate
from anything_cli.utils.executable import get_executable_name
from anything_cli.utils.git import get_git_repo_info

logger = get_logger(__name__)

VERSION_FLAGS = frozenset({"-v", "--version"})

CONTEXT_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "help_option_names": [],
}


def _finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


def _reject_constant(literal: str) -> float:
    raise ValueError(f"Not a JSON value: {literal}")


def render_raw(text: str) -> str:
    """
    Compact JSON bodies; pass anything else through trimmed.

    NaN, Infinity and numbers that overflow a float are not JSON, so such
    bodies are printed as text rather than rewritten.
    """
    try:
        value = json.loads(
            text, parse_float=_finite_float, parse_constant=_reject_constant,
        )
    except ValueError:
        return text.strip()
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def handle_body(text: str) -> int:
    """Execute a directive envelope, or print the body. Returns an exit code."""
    envelope = validate(text)
    if envelope is None:
        click.echo(render_raw(text))
        return 0

    outcome = execute(envelope.instructions or [])
    return outcome.exit_code


def run(tokens: list[str], transport: httpx.BaseTransport | None = None) -> int:
    """
    Handle one invocation and return its exit code.

    Args:
        tokens: Raw command-line tokens, without the program name.
        transport: Optional httpx transport for the API request.

    Raises:
        ApplicationError: On missing config, usage errors, transport or
            decode failures. The caller maps these to exit code 1.
    """
    commands, flags = split_arguments(tokens)
    executable_name = get_executable_name()

    if not commands and any(flag in VERSION_FLAGS for flag in flags):
        click.echo(f"anything-cli v{__version__}")
        return 0

    if commands and commands[0] in INTERNAL_COMMANDS:
        log_with_source(logger, "cli", "debug", "Internal command", command=commands[0])
        return INTERNAL_COMMANDS[commands[0]](executable_name, commands)

    config = require_config(executable_name)
    params = tokenize(flags)
    headers = build_headers(config.headers, executable_name, get_git_repo_info())

    with APIClient(config.base_url, timeout=get_settings().timeout, transport=transport) as client:
        response = client.get(client.endpoint(commands), params=params, headers=headers)
        text = read_text(response)

    exit_code = handle_body(text)

    if not response.is_success:
        log_with_source(
            logger, "http", "debug", "Non-success status",
            status_code=response.status_code,
        )
        return 1
    return exit_code


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def main(tokens: tuple[str, ...]) -> None:
    """Send arguments to the configured API and act on its answer."""
    setup_logging()

    try:
        exit_code = run(list(tokens))
    except ApplicationError as e:
        click.echo(e.message, err=True)
        log_with_source(logger, "cli", "debug", "Command failed", code=e.code, error=e.message)
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
