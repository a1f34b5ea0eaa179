"""
Welcome Bot - Slash Command Handler Tests
=========================================

Each handler is exercised directly with a mock interaction and client.
"""

import math

import pytest

from welcomebot.commands.general import hello, ping, unknown
from welcomebot.commands.info import format_latency, info, server
from welcomebot.core.config import EmbedColors


def _single_reply(interaction):
    interaction.response.send_message.assert_awaited_once()
    call = interaction.response.send_message.await_args
    return call.args, call.kwargs


# =============================================================================
# /ping and /hello
# =============================================================================

class TestGeneralCommands:
    """Tests for the plain-text commands."""

    @pytest.mark.asyncio
    async def test_ping_replies_pong(self, mock_discord_interaction, mock_client):
        await ping(mock_discord_interaction, mock_client)

        args, kwargs = _single_reply(mock_discord_interaction)
        assert args == ("🏓 Pong!",)
        assert kwargs.get("ephemeral", False) is False

    @pytest.mark.asyncio
    async def test_hello_uses_user_name(self, make_interaction, mock_client):
        interaction = make_interaction("hello")
        interaction.user.name = "alice"

        await hello(interaction, mock_client)

        args, kwargs = _single_reply(interaction)
        assert args == ("👋 Hello, alice!",)
        assert kwargs.get("ephemeral", False) is False

    @pytest.mark.asyncio
    async def test_unknown_reply(self, make_interaction, mock_client):
        interaction = make_interaction("dance")

        await unknown(interaction, mock_client)

        args, _ = _single_reply(interaction)
        assert args == ("❌ Unknown command!",)


# =============================================================================
# /info
# =============================================================================

class TestInfoCommand:
    """Tests for /info."""

    @pytest.mark.asyncio
    async def test_info_fields_match_client_state(self, make_interaction, mock_client):
        interaction = make_interaction("info")

        await info(interaction, mock_client)

        _, kwargs = _single_reply(interaction)
        assert kwargs.get("ephemeral", False) is False
        embed = kwargs["embed"]
        assert embed.title == "🤖 Bot Information"
        assert embed.color.value == EmbedColors.INFO

        fields = {field.name: field for field in embed.fields}
        assert fields["📊 Servers"].value == "3"
        assert fields["👥 Users"].value == "7"
        assert fields["🏓 Ping"].value == "46ms"
        assert all(field.inline for field in embed.fields)

    @pytest.mark.asyncio
    async def test_info_reads_values_at_call_time(self, make_interaction, mock_client):
        mock_client.guilds = []
        mock_client.latency = 0.2
        interaction = make_interaction("info")

        await info(interaction, mock_client)

        embed = interaction.response.send_message.await_args.kwargs["embed"]
        fields = {field.name: field.value for field in embed.fields}
        assert fields["📊 Servers"] == "0"
        assert fields["🏓 Ping"] == "200ms"

    def test_format_latency(self):
        assert format_latency(0.0) == "0ms"
        assert format_latency(0.1234) == "123ms"
        assert format_latency(math.nan) == "N/A"
        assert format_latency(math.inf) == "N/A"


# =============================================================================
# /server
# =============================================================================

class TestServerCommand:
    """Tests for /server."""

    @pytest.mark.asyncio
    async def test_server_in_guild(self, make_interaction, mock_client, mock_discord_guild):
        interaction = make_interaction("server")

        await server(interaction, mock_client)

        _, kwargs = _single_reply(interaction)
        assert kwargs.get("ephemeral", False) is False
        embed = kwargs["embed"]
        assert embed.title == "📋 Test Server"
        assert embed.color.value == EmbedColors.SERVER
        assert embed.footer.text == "Server ID: 987654321"

        created = int(mock_discord_guild.created_at.timestamp())
        fields = {field.name: field.value for field in embed.fields}
        assert fields["👥 Members"] == "42"
        assert fields["📅 Created"] == f"<t:{created}:F>"
        assert fields["👑 Owner"] == "<@111222333>"

    @pytest.mark.asyncio
    async def test_server_thumbnail_uses_guild_icon(self, make_interaction, mock_client, mock_discord_guild):
        mock_discord_guild.icon = type("Icon", (), {"url": "https://example.com/icon.png"})()
        interaction = make_interaction("server")

        await server(interaction, mock_client)

        embed = interaction.response.send_message.await_args.kwargs["embed"]
        assert embed.thumbnail.url == "https://example.com/icon.png"

    @pytest.mark.asyncio
    async def test_server_outside_guild_is_ephemeral_error(self, make_interaction, mock_client):
        interaction = make_interaction("server", guild=None)

        await server(interaction, mock_client)

        args, kwargs = _single_reply(interaction)
        assert args == ("❌ This command can only be used in a server!",)
        assert kwargs["ephemeral"] is True
        assert "embed" not in kwargs
