"""
Welcome Bot - Configuration Module
==================================

Centralized configuration loaded from environment variables.

DESIGN:
    A single Config dataclass is the source of truth for every tunable
    value. It is loaded once at startup through get_config(), so parsing
    and validation happen once rather than on every access.

    The channel/user IDs and banner URL used by the welcome message are
    configurable, with the production server's values as defaults.
"""

import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from welcomebot.core.logger import NY_TZ


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PORT = 3000
DEFAULT_WELCOME_CHANNEL_ID = 1417740297030602854
DEFAULT_RULES_CHANNEL_ID = 1417741717288779937
DEFAULT_CHAT_CHANNEL_ID = 1417563604252758190
DEFAULT_OWNER_USER_ID = 1169065695867322411
DEFAULT_WELCOME_BANNER_URL = (
    "https://cdn.discordapp.com/banners/1417732734591307836/"
    "8bfde384640e1937452804550ff0b50a.png?size=1024"
)


# =============================================================================
# Configuration Dataclass
# =============================================================================

@dataclass
class Config:
    """
    Bot configuration loaded from environment variables.

    Attributes:
        discord_token: Discord bot authentication token (may be None).
        require_token: Exit at startup when the token is missing.
        port: Port for the keep-alive HTTP listener.
        welcome_channel_id: Channel that receives welcome messages.
        rules_channel_id: Channel linked as the rules channel.
        chat_channel_id: Channel linked as the general chat.
        owner_user_id: User mentioned as the server owner.
        welcome_banner_url: Image shown at the bottom of the welcome embed.
    """

    # -------------------------------------------------------------------------
    # Discord
    # -------------------------------------------------------------------------

    discord_token: Optional[str] = None
    require_token: bool = True

    # -------------------------------------------------------------------------
    # Keep-Alive Server
    # -------------------------------------------------------------------------

    port: int = DEFAULT_PORT

    # -------------------------------------------------------------------------
    # Welcome Message
    # -------------------------------------------------------------------------

    welcome_channel_id: int = DEFAULT_WELCOME_CHANNEL_ID
    rules_channel_id: int = DEFAULT_RULES_CHANNEL_ID
    chat_channel_id: int = DEFAULT_CHAT_CHANNEL_ID
    owner_user_id: int = DEFAULT_OWNER_USER_ID
    welcome_banner_url: str = DEFAULT_WELCOME_BANNER_URL


# =============================================================================
# Embed Colors
# =============================================================================

class EmbedColors:
    """Color palette for the bot's embeds."""

    WELCOME = 0x808080  # #808080 - welcome card
    INFO = 0x0099FF     # #0099FF - /info
    SERVER = 0x00FF00   # #00FF00 - /server


# =============================================================================
# Validation
# =============================================================================

class ConfigValidationError(Exception):
    """Raised when a configuration value is present but invalid."""

    pass


def _parse_int_with_default(
    value: Optional[str],
    default: int,
    name: str,
    min_val: Optional[int] = None,
    max_val: Optional[int] = None,
) -> int:
    """
    Parse an optional integer, falling back to a default when unset.

    Raises:
        ConfigValidationError: If the value is set but not an integer,
            or falls outside [min_val, max_val].
    """
    if value is None or not value.strip():
        return default
    try:
        result = int(value.strip())
    except ValueError:
        raise ConfigValidationError(f"Invalid integer for {name}: {value}")

    if min_val is not None and result < min_val:
        raise ConfigValidationError(f"{name} must be >= {min_val}, got {result}")
    if max_val is not None and result > max_val:
        raise ConfigValidationError(f"{name} must be <= {max_val}, got {result}")
    return result


def _parse_bool(value: Optional[str], default: bool, name: str) -> bool:
    if value is None or not value.strip():
        return default
    raw = value.strip().lower()
    if raw in ("1", "true", "yes", "y", "on"):
        return True
    if raw in ("0", "false", "no", "n", "off"):
        return False
    raise ConfigValidationError(f"Invalid boolean for {name}: {value}")


def _validate_url(value: Optional[str], default: str, name: str) -> str:
    if value is None or not value.strip():
        return default
    url = value.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigValidationError(f"{name} must be an http(s) URL: {value}")
    return url


def load_config() -> Config:
    """
    Load configuration from environment variables.

    The token itself is not validated here; main decides what a missing
    token means based on require_token.

    Raises:
        ConfigValidationError: If any set value is malformed.
    """
    token = os.getenv("DISCORD_TOKEN")

    return Config(
        discord_token=token.strip() if token and token.strip() else None,
        require_token=_parse_bool(os.getenv("REQUIRE_DISCORD_TOKEN"), True, "REQUIRE_DISCORD_TOKEN"),
        port=_parse_int_with_default(os.getenv("PORT"), DEFAULT_PORT, "PORT", min_val=0, max_val=65535),
        welcome_channel_id=_parse_int_with_default(
            os.getenv("WELCOME_CHANNEL_ID"), DEFAULT_WELCOME_CHANNEL_ID, "WELCOME_CHANNEL_ID", min_val=1
        ),
        rules_channel_id=_parse_int_with_default(
            os.getenv("RULES_CHANNEL_ID"), DEFAULT_RULES_CHANNEL_ID, "RULES_CHANNEL_ID", min_val=1
        ),
        chat_channel_id=_parse_int_with_default(
            os.getenv("CHAT_CHANNEL_ID"), DEFAULT_CHAT_CHANNEL_ID, "CHAT_CHANNEL_ID", min_val=1
        ),
        owner_user_id=_parse_int_with_default(
            os.getenv("OWNER_USER_ID"), DEFAULT_OWNER_USER_ID, "OWNER_USER_ID", min_val=1
        ),
        welcome_banner_url=_validate_url(
            os.getenv("WELCOME_BANNER_URL"), DEFAULT_WELCOME_BANNER_URL, "WELCOME_BANNER_URL"
        ),
    )


# =============================================================================
# Global Config Instance
# =============================================================================

_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance, loading it on first use.

    Raises:
        ConfigValidationError: On first call if config is invalid.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached instance so the next get_config() re-reads the environment."""
    global _config
    _config = None


def validate_and_log_config() -> Config:
    """
    Load the configuration and log a summary of it.

    Raises:
        ConfigValidationError: If configuration is invalid.
    """
    from welcomebot.core.logger import logger

    config = get_config()

    logger.tree("Configuration Loaded", [
        ("Token", "set" if config.discord_token else "missing"),
        ("Token Required", str(config.require_token)),
        ("Keep-Alive Port", str(config.port)),
        ("Welcome Channel", str(config.welcome_channel_id)),
    ], emoji="⚙️")

    return config


__all__ = [
    "Config",
    "ConfigValidationError",
    "EmbedColors",
    "NY_TZ",
    "get_config",
    "load_config",
    "reset_config",
    "validate_and_log_config",
]
