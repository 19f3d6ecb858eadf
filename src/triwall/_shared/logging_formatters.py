# Area: Shared
# PRD: docs/prd-rules.md
"""
triwall._shared.logging_formatters — Logging formatters and filters
===================================================================

Contains formatter/filter classes and the quiet-mode flag/functions.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Flag to keep the terminal free for the game's own output
_quiet_mode_enabled = False


class QuietFilter(logging.Filter):
    """Filter that drops terminal records below WARNING in quiet mode.

    Interactive frontends print announcements themselves; routine INFO
    logs would interleave with the board prompt.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not _quiet_mode_enabled:
            return True
        return record.levelno >= logging.WARNING


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        error_type = getattr(record, "error_type", None)
        if error_type:
            record.msg = f"[{error_type}] {record.msg}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        error_type = getattr(record, "error_type", None)
        if error_type:
            log_data["error_type"] = error_type
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def enable_quiet_mode() -> None:
    """Enable quiet mode: only warnings and errors reach the terminal.

    File logging remains unchanged.
    """
    global _quiet_mode_enabled
    _quiet_mode_enabled = True


def disable_quiet_mode() -> None:
    """Disable quiet mode (restore standard terminal logging)."""
    global _quiet_mode_enabled
    _quiet_mode_enabled = False


def is_quiet_mode_enabled() -> bool:
    """Check if quiet mode is enabled."""
    return _quiet_mode_enabled
