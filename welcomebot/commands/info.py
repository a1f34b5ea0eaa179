"""
Welcome Bot - Information Commands
==================================

/info reports on the bot itself, /server on the guild it was used in.

DESIGN:
    Both read only what the client already has cached; neither makes a
    request beyond the reply itself.
"""

import math
from datetime import datetime

import discord

from welcomebot.core.config import EmbedColors, NY_TZ


def format_latency(latency: float) -> str:
    """
    Render gateway latency (seconds) as whole milliseconds.

    Returns "N/A" before the first heartbeat, when discord.py reports nan.
    """
    if math.isnan(latency) or math.isinf(latency):
        return "N/A"
    return f"{round(latency * 1000)}ms"


# =============================================================================
# /info
# =============================================================================

def build_info_embed(client: discord.Client) -> discord.Embed:
    embed = discord.Embed(
        title="🤖 Bot Information",
        description="A Discord bot that welcomes new members and responds to commands!",
        color=EmbedColors.INFO,
        timestamp=datetime.now(NY_TZ),
    )
    embed.add_field(name="📊 Servers", value=str(len(client.guilds)), inline=True)
    embed.add_field(name="👥 Users", value=str(len(client.users)), inline=True)
    embed.add_field(name="🏓 Ping", value=format_latency(client.latency), inline=True)
    embed.set_footer(text="Made with discord.py")
    return embed


async def info(interaction: discord.Interaction, client: discord.Client) -> None:
    await interaction.response.send_message(embed=build_info_embed(client))


# =============================================================================
# /server
# =============================================================================

def build_server_embed(guild: discord.Guild) -> discord.Embed:
    embed = discord.Embed(
        title=f"📋 {guild.name}",
        color=EmbedColors.SERVER,
        timestamp=datetime.now(NY_TZ),
    )
    if guild.icon:
        embed.set_thumbnail(url=guild.icon.url)

    embed.add_field(name="👥 Members", value=str(guild.member_count), inline=True)
    embed.add_field(name="📅 Created", value=discord.utils.format_dt(guild.created_at, "F"), inline=True)
    embed.add_field(name="👑 Owner", value=f"<@{guild.owner_id}>", inline=True)
    embed.set_footer(text=f"Server ID: {guild.id}")
    return embed


async def server(interaction: discord.Interaction, client: discord.Client) -> None:
    """Reply with guild metadata, or an ephemeral error outside a guild."""
    if interaction.guild is None:
        await interaction.response.send_message(
            "❌ This command can only be used in a server!",
            ephemeral=True,
        )
        return

    await interaction.response.send_message(embed=build_server_embed(interaction.guild))


__all__ = [
    "format_latency",
    "build_info_embed",
    "build_server_embed",
    "info",
    "server",
]
