"""
Welcome Bot - General Commands
==============================

/ping and /hello, plus the reply for names outside the command set.
"""

import discord


async def ping(interaction: discord.Interaction, client: discord.Client) -> None:
    await interaction.response.send_message("🏓 Pong!")


async def hello(interaction: discord.Interaction, client: discord.Client) -> None:
    await interaction.response.send_message(f"👋 Hello, {interaction.user.name}!")


async def unknown(interaction: discord.Interaction, client: discord.Client) -> None:
    await interaction.response.send_message("❌ Unknown command!")


__all__ = ["ping", "hello", "unknown"]
