"""
Internal Commands.

Selected by the first positional segment; everything else becomes an
API request. Each handler takes (executable_name, commands) and returns
an exit code.
"""

from collections.abc import Callable

from anything_cli.cli.commands.set_base_url import handle_set_base_url
from anything_cli.cli.commands.set_header import handle_set_header
from anything_cli.cli.commands.uninstall import handle_uninstall
from anything_cli.cli.commands.update import handle_update

CommandHandler = Callable[[str, list[str]], int]

INTERNAL_COMMANDS: dict[str, CommandHandler] = {
    "self:set-header": handle_set_header,
    "self:set-base-url": handle_set_base_url,
    "self:uninstall": handle_uninstall,
    "self:update": handle_update,
}

__all__ = [
    "INTERNAL_COMMANDS",
    "handle_set_base_url",
    "handle_set_header",
    "handle_uninstall",
    "handle_update",
]
