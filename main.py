#!/usr/bin/env python3
"""
Welcome Bot Entry Point
=======================

Starts the keep-alive HTTP server, then connects the bot to Discord.

Exit status 1 on:
- invalid configuration
- missing DISCORD_TOKEN (unless REQUIRE_DISCORD_TOKEN=false)
- keep-alive port already in use
- login or connection failure
"""

import asyncio
import sys

from dotenv import load_dotenv

from welcomebot.bot import WelcomeBot
from welcomebot.core.config import ConfigValidationError, validate_and_log_config
from welcomebot.core.keep_alive import KeepAliveServer
from welcomebot.core.logger import logger
from welcomebot.utils.error_handler import ErrorHandler


async def main() -> None:
    """
    Main entry point for the bot.

    Handles the complete lifecycle:
    1. Loads environment configuration
    2. Validates the Discord bot token
    3. Starts the keep-alive server
    4. Connects to Discord until shutdown

    Raises:
        SystemExit: If configuration is invalid or the bot fails to start
    """
    load_dotenv()

    try:
        config = validate_and_log_config()
    except ConfigValidationError as e:
        logger.error("Invalid Configuration", [("Error", str(e))])
        sys.exit(1)

    if config.require_token and not config.discord_token:
        logger.error("❌ Missing DISCORD_TOKEN in environment variables!")
        logger.error("   Add your bot token to the environment or a .env file")
        sys.exit(1)

    keep_alive = KeepAliveServer(config.port)
    try:
        await keep_alive.start()
    except OSError:
        sys.exit(1)

    try:
        bot = WelcomeBot(config)
        async with bot:
            await bot.start(config.discord_token)
    except Exception as e:
        ErrorHandler.handle(
            e,
            location="main.main",
            critical=True,
            token_present=bool(config.discord_token),
        )
        sys.exit(1)
    finally:
        await keep_alive.stop()


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("🛑 Bot stopped by user (Ctrl+C)")


if __name__ == "__main__":
    run()
