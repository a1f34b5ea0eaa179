"""
Welcome Bot - Error Handler
===========================

Error categorisation and contextual logging for handler boundaries.

Features:
- Error categorization (Discord, API, general)
- Recovery suggestions per error type
- Discord-specific context capture (member, interaction)
- Traceback logging for critical errors
"""

import traceback
from typing import Any, Dict

import discord

from welcomebot.core.logger import logger


class ErrorContext:
    """Captures and formats detailed error context"""

    @staticmethod
    def get_full_context(e: BaseException, location: str, **kwargs) -> Dict[str, Any]:
        """
        Get comprehensive error context.

        Args:
            e: The exception
            location: Where the error occurred
            **kwargs: Additional context (member, interaction, etc.)

        Returns:
            Dictionary with full error context
        """
        context = {
            'error_type': type(e).__name__,
            'error_message': str(e),
            'traceback': ''.join(traceback.format_exception(type(e), e, e.__traceback__)),
        }

        member = kwargs.get('member')
        if isinstance(member, discord.Member):
            context['member_context'] = {
                'name': str(member),
                'id': member.id,
                'guild': member.guild.name,
            }

        interaction = kwargs.get('interaction')
        if isinstance(interaction, discord.Interaction):
            context['interaction_context'] = {
                'user': str(interaction.user),
                'guild': interaction.guild.name if interaction.guild else 'DM',
                'command': (interaction.data or {}).get('name'),
            }

        return context


class ErrorHandler:
    """Error handling with context and recovery hints"""

    ERROR_CATEGORIES = {
        'discord': (
            discord.Forbidden,
            discord.NotFound,
            discord.HTTPException,
        ),
        'api': (
            ConnectionError,
            TimeoutError,
            OSError,
        ),
    }

    SUGGESTIONS = (
        (discord.Forbidden, "Check bot permissions in server settings"),
        (discord.NotFound, "Resource not found - check IDs and channels"),
        (discord.HTTPException, "Discord API issue - check status and request payload"),
        (ConnectionError, "Network connection issue - check internet connection"),
        (TimeoutError, "Request timed out - the platform may be degraded"),
        (OSError, "System resource issue - check ports and permissions"),
    )

    @classmethod
    def categorize_error(cls, e: BaseException) -> str:
        for category, error_types in cls.ERROR_CATEGORIES.items():
            if isinstance(e, error_types):
                return category
        return 'general'

    @classmethod
    def get_recovery_suggestion(cls, e: BaseException) -> str:
        for error_type, suggestion in cls.SUGGESTIONS:
            if isinstance(e, error_type):
                return suggestion
        return "Unexpected error - check logs for details"

    @classmethod
    def handle(cls, e: BaseException, location: str, critical: bool = False, **context) -> None:
        """
        Log an error with full context.

        Args:
            e: The exception
            location: Where the error occurred
            critical: Whether this error stops execution
            **context: Additional context
        """
        category = cls.categorize_error(e)
        suggestion = cls.get_recovery_suggestion(e)
        full_context = ErrorContext.get_full_context(e, location, **context)

        details = [
            ("Location", location),
            ("Category", category.upper()),
            ("Type", full_context['error_type']),
            ("Error", full_context['error_message'][:200]),
            ("Recovery", suggestion),
        ]

        if 'member_context' in full_context:
            mc = full_context['member_context']
            details.append(("Member", f"{mc['name']} ({mc['id']}) in {mc['guild']}"))
        if 'interaction_context' in full_context:
            ic = full_context['interaction_context']
            details.append(("Interaction", f"/{ic['command']} by {ic['user']} in {ic['guild']}"))

        if critical:
            logger.error("💥 CRITICAL ERROR", details)
            logger.critical(f"Traceback:\n{full_context['traceback']}")
        else:
            logger.error("Handler Error", details)
            logger.debug(f"Traceback:\n{full_context['traceback']}")


__all__ = ["ErrorContext", "ErrorHandler"]
