"""
Welcome Bot - Events Package
============================

Event handler Cogs, loaded by the bot with load_extension().

Event routing:
    - members.py: member join (welcome card)
    - interactions.py: slash command dispatch
"""

# =============================================================================
# Event Cog Registry
# =============================================================================

EVENT_COGS = [
    "welcomebot.events.members",
    "welcomebot.events.interactions",
]


__all__ = [
    "EVENT_COGS",
]
