"""
Welcome Bot - Test Fixtures
===========================

Shared fixtures for all tests.
"""

import os
import sys
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep log files out of the working tree; read on the logger's first write
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="welcomebot-test-logs-")

import discord  # noqa: E402

from welcomebot.core import config as config_module  # noqa: E402


CONFIG_ENV_VARS = (
    "DISCORD_TOKEN",
    "REQUIRE_DISCORD_TOKEN",
    "PORT",
    "WELCOME_CHANNEL_ID",
    "RULES_CHANNEL_ID",
    "CHAT_CHANNEL_ID",
    "OWNER_USER_ID",
    "WELCOME_BANNER_URL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an empty configuration environment."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def config():
    """Configuration with default values."""
    return config_module.Config()


def make_response():
    """
    Mock InteractionResponse whose is_done() flips after the first reply,
    matching discord.py's one-response rule.
    """
    response = MagicMock()
    state = {"done": False}

    async def send_message(*args, **kwargs):
        state["done"] = True

    response.send_message = AsyncMock(side_effect=send_message)
    response.is_done = MagicMock(side_effect=lambda: state["done"])
    return response


# =============================================================================
# Mock Discord Objects
# =============================================================================

@pytest.fixture
def mock_discord_guild():
    """Create a mock Discord guild."""
    guild = MagicMock()
    guild.id = 987654321
    guild.name = "Test Server"
    guild.member_count = 42
    guild.owner_id = 111222333
    guild.created_at = datetime(2020, 9, 13, 12, 0, 0, tzinfo=timezone.utc)
    guild.icon = None
    guild.me = MagicMock()
    guild.me.id = 999888777
    guild.get_channel = MagicMock(return_value=None)
    return guild


@pytest.fixture
def mock_discord_user():
    """Create a mock Discord user."""
    user = MagicMock()
    user.id = 123456789
    user.name = "testuser"
    user.display_name = "Test User"
    user.mention = "<@123456789>"
    user.__str__.return_value = "testuser"
    return user


@pytest.fixture
def mock_discord_member(mock_discord_guild):
    """Create a mock Discord member of mock_discord_guild."""
    member = MagicMock()
    member.id = 123456789
    member.name = "testuser"
    member.mention = "<@123456789>"
    member.guild = mock_discord_guild
    member.display_avatar.with_size.return_value.url = "https://example.com/avatar.png?size=256"
    return member


@pytest.fixture
def mock_welcome_channel(mock_discord_guild):
    """Create a welcome channel the bot can post embeds in."""
    channel = MagicMock()
    channel.id = 1417740297030602854
    channel.guild = mock_discord_guild
    channel.send = AsyncMock()
    channel.permissions_for = MagicMock(
        return_value=MagicMock(send_messages=True, embed_links=True)
    )
    return channel


@pytest.fixture
def make_interaction(mock_discord_user, mock_discord_guild):
    """Factory for mock interactions; defaults to a slash command in a guild."""

    def factory(
        name="ping",
        guild=mock_discord_guild,
        interaction_type=discord.InteractionType.application_command,
        command_type=1,
    ):
        interaction = MagicMock()
        interaction.type = interaction_type
        interaction.data = {"name": name, "type": command_type}
        interaction.user = mock_discord_user
        interaction.guild = guild
        interaction.response = make_response()
        return interaction

    return factory


@pytest.fixture
def mock_discord_interaction(make_interaction):
    """Create a mock /ping interaction."""
    return make_interaction("ping")


@pytest.fixture
def mock_client():
    """Create a mock connected client."""
    client = MagicMock()
    client.application_id = 555000111
    client.user = MagicMock()
    client.user.id = 555000111
    client.guilds = [MagicMock(), MagicMock(), MagicMock()]
    client.users = [MagicMock() for _ in range(7)]
    client.latency = 0.0456
    client.http.bulk_upsert_global_commands = AsyncMock(return_value=[])
    return client

