"""
Welcome Bot - Utilities Package
===============================

Shared helpers used by commands and event handlers.
"""

from .error_handler import ErrorContext, ErrorHandler


__all__ = ["ErrorContext", "ErrorHandler"]
