"""
Welcome Bot - Interaction Events
================================

Routes slash command interactions to their handlers.

DESIGN:
    Only chat-input application commands are handled; buttons, modals,
    autocomplete and context menus are ignored. Every handled interaction
    gets exactly one reply: the handler's, or an ephemeral fallback if
    the handler raised before replying.
"""

from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from welcomebot.commands import get_handler
from welcomebot.commands.registry import CHAT_INPUT
from welcomebot.core.logger import logger
from welcomebot.utils.error_handler import ErrorHandler

if TYPE_CHECKING:
    from welcomebot.bot import WelcomeBot


FALLBACK_ERROR_MESSAGE = "❌ An error occurred while processing this command!"


def is_chat_input_command(interaction: discord.Interaction) -> bool:
    if interaction.type != discord.InteractionType.application_command:
        return False
    data = interaction.data or {}
    return data.get("type", CHAT_INPUT) == CHAT_INPUT


async def send_fallback_reply(interaction: discord.Interaction) -> None:
    """Send the ephemeral error reply unless the interaction was already answered."""
    if interaction.response.is_done():
        return
    try:
        await interaction.response.send_message(FALLBACK_ERROR_MESSAGE, ephemeral=True)
    except Exception as e:
        logger.error("Fallback Reply Failed", [
            ("Error Type", type(e).__name__),
            ("Error", str(e)[:100]),
        ])


async def dispatch_interaction(client: discord.Client, interaction: discord.Interaction) -> None:
    """
    Run the handler for a slash command interaction.

    Args:
        client: Connected client passed through to the handler.
        interaction: The incoming interaction.
    """
    if not is_chat_input_command(interaction):
        return

    name = (interaction.data or {}).get("name", "")
    handler = get_handler(name)

    logger.info(f"/{name} used by {interaction.user} in {interaction.guild.name if interaction.guild else 'DM'}")

    try:
        await handler(interaction, client)
    except Exception as e:
        ErrorHandler.handle(e, location=f"commands.{name or 'unknown'}", interaction=interaction)
        await send_fallback_reply(interaction)


# =============================================================================
# Interaction Cog
# =============================================================================

class InteractionEvents(commands.Cog):
    """Slash command dispatch."""

    def __init__(self, bot: "WelcomeBot") -> None:
        self.bot = bot

    @commands.Cog.listener()
    async def on_interaction(self, interaction: discord.Interaction) -> None:
        await dispatch_interaction(self.bot, interaction)


async def setup(bot: "WelcomeBot") -> None:
    """Load the InteractionEvents cog."""
    await bot.add_cog(InteractionEvents(bot))


__all__ = [
    "FALLBACK_ERROR_MESSAGE",
    "InteractionEvents",
    "dispatch_interaction",
    "is_chat_input_command",
    "send_fallback_reply",
]
