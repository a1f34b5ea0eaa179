"""
Welcome Bot - Source Package
============================

A small Discord bot that welcomes new members and answers a handful of
slash commands, with an HTTP keep-alive endpoint for the host.

Package Structure:
- bot.py: Main Discord bot class and lifecycle events
- commands/: Slash command handlers and registration
- core/: Configuration, logging and the keep-alive server
- events/: Member join and interaction event cogs
- utils/: Error handling helpers
"""

__version__ = "1.0.0"
