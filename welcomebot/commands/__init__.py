"""
Welcome Bot - Commands Package
==============================

Slash command handlers and the table the dispatcher routes through.

DESIGN:
    Each handler is a plain coroutine taking (interaction, client) and
    sending exactly one reply. The dispatcher looks the command name up
    in COMMAND_HANDLERS and falls back to UNKNOWN_COMMAND_HANDLER.

Available Commands:
    /ping: Replies with Pong!
    /hello: Greets the invoking user by name
    /info: Bot statistics (servers, users, latency)
    /server: Guild statistics (members, creation date, owner)
"""

from typing import Awaitable, Callable, Dict

import discord

from .general import hello, ping, unknown
from .info import info, server
from .registry import COMMAND_DESCRIPTORS, CommandDescriptor, register_commands


CommandHandler = Callable[[discord.Interaction, discord.Client], Awaitable[None]]


# =============================================================================
# Command Handler Registry
# =============================================================================

COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "ping": ping,
    "hello": hello,
    "info": info,
    "server": server,
}

UNKNOWN_COMMAND_HANDLER: CommandHandler = unknown


def get_handler(name: str) -> CommandHandler:
    return COMMAND_HANDLERS.get(name, UNKNOWN_COMMAND_HANDLER)


__all__ = [
    "CommandHandler",
    "COMMAND_HANDLERS",
    "UNKNOWN_COMMAND_HANDLER",
    "COMMAND_DESCRIPTORS",
    "CommandDescriptor",
    "get_handler",
    "register_commands",
]
