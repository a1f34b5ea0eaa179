"""
Welcome Bot - Logger Module
===========================

Tree-style logging with Eastern timestamps and daily log files.

DESIGN:
    Console output is the primary observability surface for this bot, so
    the logger favours output that is easy to scan on a hosting dashboard.
    Related values are grouped under a title with tree connectors, and
    every line is mirrored to a dated log file.

    Key features:
    - Tree-style formatting for structured data
    - Eastern timezone timestamps (auto EST/EDT handling)
    - Daily log files in dated folders under LOG_DIR
    - Retention cleanup of old log folders
    - Session header with a unique run ID
"""

import os
import uuid
from datetime import datetime
from pathlib import Path
from typing import List, Tuple, Optional

from zoneinfo import ZoneInfo


# =============================================================================
# Constants
# =============================================================================

DEFAULT_LOGS_DIR = "logs"
"""Log directory used when LOG_DIR is not set."""

LOG_RETENTION_DAYS = 7
"""Number of days to retain log directories before cleanup."""

NY_TZ = ZoneInfo("America/New_York")
"""Eastern timezone for consistent timestamps."""

Details = List[Tuple[str, str]]


def resolve_logs_dir() -> Path:
    """Read LOG_DIR at call time."""
    return Path(os.getenv("LOG_DIR", DEFAULT_LOGS_DIR))


# =============================================================================
# Tree Logger Class
# =============================================================================

class TreeLogger:
    """
    Logger with tree-style formatting and Eastern timezone timestamps.

    Log files are opened on the first write when no directory is given,
    which lets the entry point load .env before LOG_DIR is read.

    Attributes:
        run_id: Unique identifier for this bot session.
        log_file: Path to the main log file.
        error_file: Path to the error-only log file.
    """

    def __init__(self, logs_dir: Optional[Path] = None) -> None:
        self.run_id: str = str(uuid.uuid4())[:8]
        self.logs_dir: Optional[Path] = logs_dir
        self.log_dir: Optional[Path] = None
        self.log_file: Optional[Path] = None
        self.error_file: Optional[Path] = None

        if logs_dir is not None:
            self._open_files()

    def _open_files(self) -> None:
        if self.logs_dir is None:
            self.logs_dir = resolve_logs_dir()

        today = datetime.now(NY_TZ).strftime("%Y-%m-%d")
        self.log_dir = self.logs_dir / today
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.log_file = self.log_dir / f"WelcomeBot-{today}.log"
        self.error_file = self.log_dir / f"WelcomeBot-Errors-{today}.log"

        self._cleanup_old_logs()
        self._write_session_header()

    # =========================================================================
    # Log Cleanup
    # =========================================================================

    def _cleanup_old_logs(self) -> None:
        """Remove dated log directories older than the retention period."""
        now = datetime.now()
        deleted = 0

        for item in self.logs_dir.iterdir():
            if not item.is_dir():
                continue
            try:
                dir_date = datetime.strptime(item.name, "%Y-%m-%d")
            except ValueError:
                continue  # not a dated folder
            if (now - dir_date).days > LOG_RETENTION_DAYS:
                for f in item.iterdir():
                    f.unlink()
                item.rmdir()
                deleted += 1

        if deleted > 0:
            print(f"[LOG CLEANUP] Removed {deleted} old log directories")

    def _write_session_header(self) -> None:
        header = f"""
============================================================
NEW SESSION - RUN ID: {self.run_id}
[{datetime.now(NY_TZ).strftime("%I:%M:%S %p %Z")}]
============================================================
"""
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(header)

    # =========================================================================
    # Core Logging
    # =========================================================================

    def _get_timestamp(self) -> str:
        """
        Get current timestamp in Eastern timezone.

        Returns:
            Formatted timestamp string like "[02:30:45 PM EST]".
        """
        return datetime.now(NY_TZ).strftime("[%I:%M:%S %p %Z]")

    def _write(
        self,
        message: str,
        emoji: str = "",
        include_timestamp: bool = True,
        is_error: bool = False,
    ) -> None:
        """
        Write a log line to the console and the log file.

        Args:
            message: Log message content.
            emoji: Optional emoji prefix.
            include_timestamp: Whether to prepend timestamp.
            is_error: Whether to also write to the error log.
        """
        if include_timestamp:
            timestamp = self._get_timestamp()
            full_message = f"{timestamp} {emoji} {message}" if emoji else f"{timestamp} {message}"
        else:
            full_message = f"{emoji} {message}" if emoji else message

        if self.log_file is None:
            self._open_files()

        print(full_message)

        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(f"{full_message}\n")

        if is_error:
            with open(self.error_file, "a", encoding="utf-8") as f:
                f.write(f"{full_message}\n")

    def _write_details(self, details: Details, is_error: bool = False) -> None:
        for i, (key, value) in enumerate(details):
            prefix = "└─" if i == len(details) - 1 else "├─"
            self._write(f"  {prefix} {key}: {value}", include_timestamp=False, is_error=is_error)

    # =========================================================================
    # Tree Formatting
    # =========================================================================

    def tree(self, title: str, items: Details, emoji: str = "📦") -> None:
        """
        Log structured data in tree format.

        Example output:
            [02:30:45 PM EST] 🚀 Bot Online
              ├─ Name: WelcomeBot
              ├─ Guilds: 5
              └─ Commands: 4
        """
        self._write(title, emoji=emoji)
        self._write_details(items)

    # =========================================================================
    # Log Levels
    # =========================================================================

    def debug(self, msg: str) -> None:
        """Log debug message (only if DEBUG env var set)."""
        if os.getenv("DEBUG"):
            self._write(msg, "🔍")

    def info(self, msg: str) -> None:
        self._write(msg, "ℹ️")

    def warning(self, msg: str, details: Optional[Details] = None) -> None:
        """
        Log warning message with optional structured details.

        Args:
            msg: Warning message or title.
            details: Optional list of (key, value) detail tuples.
        """
        self._write(msg, "⚠️")
        if details:
            self._write_details(details)

    def error(self, msg: str, details: Optional[Details] = None) -> None:
        """
        Log error message with optional structured details.

        Errors are always written to both the main and error log files.

        Args:
            msg: Error message or title.
            details: Optional list of (key, value) detail tuples.
        """
        self._write(msg, "❌", is_error=True)
        if details:
            self._write_details(details, is_error=True)

    def critical(self, msg: str) -> None:
        self._write(msg, "🚨", is_error=True)


# =============================================================================
# Global Instance
# =============================================================================

logger = TreeLogger()
"""Global logger instance shared by every module."""


__all__ = [
    "logger",
    "TreeLogger",
    "DEFAULT_LOGS_DIR",
    "resolve_logs_dir",
    "NY_TZ",
]
