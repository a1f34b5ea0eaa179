"""
Welcome Bot - Member Events
===========================

Posts the welcome card when a member joins.

DESIGN:
    Each step is a guard: a missing channel or missing permissions logs
    one warning and stops. Any other failure is logged and swallowed so a
    broken welcome never affects the rest of the bot.
"""

from datetime import datetime
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from welcomebot.core.config import Config, EmbedColors, NY_TZ
from welcomebot.core.logger import logger
from welcomebot.utils.error_handler import ErrorHandler

if TYPE_CHECKING:
    from welcomebot.bot import WelcomeBot


AVATAR_SIZE = 256


def build_welcome_embed(member: discord.Member, config: Config) -> discord.Embed:
    guild = member.guild
    embed = discord.Embed(
        title="🌟 Welcome!",
        description=(
            f"Welcome {member.mention}, to **{guild.name}**! ♡\n\n"
            f"Follow the rules! <#{config.rules_channel_id}>\n"
            f"Chat in <#{config.chat_channel_id}>\n"
            f"Owner is <@{config.owner_user_id}>"
        ),
        color=EmbedColors.WELCOME,
        timestamp=datetime.now(NY_TZ),
    )
    embed.set_thumbnail(url=member.display_avatar.with_size(AVATAR_SIZE).url)
    embed.set_image(url=config.welcome_banner_url)
    embed.set_footer(text=f"Member #{guild.member_count}")
    return embed


async def send_welcome(client: discord.Client, member: discord.Member, config: Config) -> bool:
    """
    Send the welcome card for a new member.

    Args:
        client: Connected client.
        member: The member who joined.
        config: Source of the channel IDs and banner.

    Returns:
        True if the message was sent.
    """
    try:
        guild = member.guild
        channel = guild.get_channel(config.welcome_channel_id)
        if channel is None:
            logger.warning(f"Welcome channel not found in {guild.name}")
            return False

        me = guild.me
        perms = channel.permissions_for(me) if me is not None else None
        if perms is None or not (perms.send_messages and perms.embed_links):
            logger.warning(f"No permissions to send messages in welcome channel in {guild.name}")
            return False

        await channel.send(content=member.mention, embed=build_welcome_embed(member, config))

        logger.tree("Welcome Sent", [
            ("Member", f"{member} ({member.id})"),
            ("Guild", guild.name),
            ("Member Count", str(guild.member_count)),
        ], emoji="👋")
        return True

    except Exception as e:
        ErrorHandler.handle(e, location="events.members.send_welcome", member=member)
        return False


# =============================================================================
# Member Cog
# =============================================================================

class MemberEvents(commands.Cog):
    """Member event handlers."""

    def __init__(self, bot: "WelcomeBot") -> None:
        self.bot = bot
        self.config = bot.config

    @commands.Cog.listener()
    async def on_member_join(self, member: discord.Member) -> None:
        await send_welcome(self.bot, member, self.config)


async def setup(bot: "WelcomeBot") -> None:
    """Load the MemberEvents cog."""
    await bot.add_cog(MemberEvents(bot))


__all__ = ["MemberEvents", "build_welcome_embed", "send_welcome"]
