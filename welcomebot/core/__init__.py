"""
Welcome Bot - Core Package
==========================

Configuration, logging and the keep-alive HTTP server.

DESIGN:
    Core modules expose process-wide instances:
    - get_config() returns the same Config instance
    - logger is a global TreeLogger instance
"""

from .config import (
    Config,
    ConfigValidationError,
    EmbedColors,
    NY_TZ,
    get_config,
    reset_config,
)

from .logger import logger, TreeLogger

from .keep_alive import KeepAliveServer, RUNNING_MESSAGE


__all__ = [
    # Config
    "Config",
    "ConfigValidationError",
    "EmbedColors",
    "NY_TZ",
    "get_config",
    "reset_config",
    # Logger
    "logger",
    "TreeLogger",
    # Keep-alive
    "KeepAliveServer",
    "RUNNING_MESSAGE",
]
