"""
Welcome Bot - Main Bot Class
============================

Discord client that greets new members and answers four slash commands.

SERVICE INITIALIZATION ORDER:
    1. setup_hook (after login, before the gateway connects):
       - Event cog loading
       - Loop-wide exception handler
    2. on_ready (first time only):
       - Global slash command registration
"""

import asyncio
import sys
from datetime import datetime
from typing import Any, Dict, Optional

import discord
from discord import app_commands
from discord.ext import commands

from welcomebot.commands import register_commands
from welcomebot.core.config import Config, get_config
from welcomebot.core.logger import logger
from welcomebot.utils.error_handler import ErrorHandler


# =============================================================================
# Command Tree
# =============================================================================

class PassthroughTree(app_commands.CommandTree):
    """
    Command tree that never dispatches.

    Slash commands are routed by the on_interaction listener instead, so
    the tree must not answer (or report CommandNotFound for) any of them.
    """

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        return False


# =============================================================================
# WelcomeBot Class
# =============================================================================

class WelcomeBot(commands.Bot):
    """
    Main Discord bot class.

    Attributes:
        config: Loaded configuration.
        start_time: When this instance was created.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or get_config()

        intents = discord.Intents.default()
        intents.guilds = True
        intents.members = True  # Needed for welcome messages

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            help_command=None,
            tree_cls=PassthroughTree,
        )

        self.start_time: datetime = datetime.now()
        self._ready_initialized: bool = False

        logger.info("Bot Instance Created")

    # =========================================================================
    # Setup Hook
    # =========================================================================

    async def setup_hook(self) -> None:
        """Load event cogs and install the loop-wide error handler."""
        from welcomebot.events import EVENT_COGS
        for cog in EVENT_COGS:
            try:
                await self.load_extension(cog)
                logger.debug(f"Event Cog Loaded: {cog.split('.')[-1]}")
            except Exception as e:
                logger.error("Failed to Load Event Cog", [("Cog", cog), ("Error", str(e))])

        asyncio.get_running_loop().set_exception_handler(self.handle_loop_exception)

    # =========================================================================
    # On Ready
    # =========================================================================

    async def on_ready(self) -> None:
        """Register slash commands the first time the gateway is ready."""
        if self._ready_initialized:
            logger.info("Bot Reconnected (skipping re-initialization)")
            return

        self._ready_initialized = True

        if not self.user:
            return

        logger.tree("BOT ONLINE", [
            ("Name", str(self.user)),
            ("ID", str(self.user.id)),
            ("Guilds", str(len(self.guilds))),
        ], emoji="🤖")

        await register_commands(self)

    # =========================================================================
    # Error Handling
    # =========================================================================

    async def on_error(self, event_method: str, *args: Any, **kwargs: Any) -> None:
        """Log exceptions escaping event listeners; the bot keeps running."""
        error = sys.exc_info()[1]
        if error is None:
            logger.error("Discord Client Error", [("Event", event_method)])
            return
        ErrorHandler.handle(error, location=f"event.{event_method}")

    def handle_loop_exception(self, loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
        """Log unhandled asyncio task errors without stopping the loop."""
        error = context.get("exception")
        if error is not None:
            ErrorHandler.handle(error, location="asyncio.unhandled")
            return
        logger.error("Unhandled Async Error", [
            ("Message", str(context.get("message", "unknown"))[:200]),
        ])

    # =========================================================================
    # Shutdown
    # =========================================================================

    async def close(self) -> None:
        logger.info("Initiating Graceful Shutdown")
        await super().close()
        logger.tree("SHUTDOWN COMPLETE", [
            ("Uptime", str(datetime.now() - self.start_time)),
        ], emoji="🛑")


__all__ = ["WelcomeBot", "PassthroughTree"]
