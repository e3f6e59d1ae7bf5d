"""
Set Header Command.

    <exe> self:set-header <KEY> [VALUE]

Sets a static request header, or removes it when VALUE is omitted.
Creates the config file if it does not exist yet.
"""

from rich.console import Console

from anything_cli.core.config import load_config, save_config
from anything_cli.core.config_schema import ClientConfig
from anything_cli.core.exceptions import UsageError
from anything_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)
console = Console()


def handle_set_header(executable_name: str, commands: list[str]) -> int:
    """Add, replace, or remove a configured header."""
    if len(commands) < 2:
        raise UsageError(f"Usage: {executable_name} self:set-header <KEY> [VALUE]")

    key = commands[1]
    value = commands[2] if len(commands) > 2 else None

    config, config_path = load_config(executable_name)
    if config is None:
        config = ClientConfig(base_url="", headers={})

    headers = dict(config.headers or {})
    if value is None:
        headers.pop(key, None)
        message = f"Header [bold]{key}[/bold] removed"
    else:
        headers[key] = value
        message = f"Header [bold]{key}[/bold] set"
    config.headers = headers

    save_config(config, config_path)

    log_with_source(logger, "config", "info", "Header updated", header=key, removed=value is None)
    console.print(message, highlight=False)
    return 0
