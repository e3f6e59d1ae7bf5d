"""
Set Base URL Command.

    <exe> self:set-base-url <URL>

Creates the config file if it does not exist yet.
"""

from rich.console import Console

from anything_cli.core.config import load_config, save_config
from anything_cli.core.config_schema import ClientConfig
from anything_cli.core.exceptions import UsageError
from anything_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)
console = Console()


def handle_set_base_url(executable_name: str, commands: list[str]) -> int:
    """Store a new API base URL in the config."""
    if len(commands) < 2:
        raise UsageError(f"Usage: {executable_name} self:set-base-url <URL>")

    new_url = commands[1]

    config, config_path = load_config(executable_name)
    if config is None:
        config = ClientConfig(base_url="")

    config.base_url = new_url
    save_config(config, config_path)

    log_with_source(logger, "config", "info", "Base URL updated", base_url=new_url)
    console.print(f"Base URL set to [bold]{new_url}[/bold]", highlight=False)
    return 0
