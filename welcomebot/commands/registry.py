"""
Welcome Bot - Command Registry
==============================

The fixed set of slash commands and their registration with Discord.

DESIGN:
    Registration is one bulk overwrite of the application's global
    commands, so running it on every startup is idempotent and replaces
    whatever set was registered before. Descriptors are plain data and
    never read back; the dispatcher routes by name.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

import discord

from welcomebot.core.logger import logger


CHAT_INPUT = 1
"""Discord application command type for slash commands."""


@dataclass(frozen=True)
class CommandDescriptor:
    """Name and description of one slash command."""

    name: str
    description: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "type": CHAT_INPUT,
        }


COMMAND_DESCRIPTORS = (
    CommandDescriptor("ping", "Replies with Pong!"),
    CommandDescriptor("info", "Shows bot information"),
    CommandDescriptor("hello", "Says hello to the user"),
    CommandDescriptor("server", "Displays server information"),
)


def build_payload() -> List[Dict[str, Any]]:
    return [descriptor.to_payload() for descriptor in COMMAND_DESCRIPTORS]


async def register_commands(client: discord.Client) -> bool:
    """
    Replace the application's global slash commands with the fixed set.

    Failures are logged and swallowed; commands stay unavailable until
    the next restart.

    Args:
        client: Logged-in client whose application owns the commands.

    Returns:
        True if Discord accepted the commands.
    """
    application_id = client.application_id or (client.user.id if client.user else None)
    if application_id is None:
        logger.error("Command Registration Skipped", [("Reason", "Application ID unknown")])
        return False

    logger.info("🔄 Registering slash commands...")
    try:
        # Raw bulk overwrite instead of tree.sync: the tree holds no commands.
        await client.http.bulk_upsert_global_commands(application_id, build_payload())
    except Exception as e:
        logger.error("Command Registration Failed", [
            ("Application", str(application_id)),
            ("Error Type", type(e).__name__),
            ("Error", str(e)[:100]),
        ])
        return False

    logger.tree("Commands Registered", [
        ("Count", str(len(COMMAND_DESCRIPTORS))),
        ("Available", ", ".join(f"/{d.name}" for d in COMMAND_DESCRIPTORS)),
    ], emoji="✅")
    return True


__all__ = [
    "CHAT_INPUT",
    "CommandDescriptor",
    "COMMAND_DESCRIPTORS",
    "build_payload",
    "register_commands",
]
