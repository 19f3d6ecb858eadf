# Area: Shared
# PRD: docs/prd-rules.md
"""
Shared utilities used by the frontends.

This package contains:
- Logging configuration
- The terminal announcer
"""

from .logging_config import setup_logging, log_error
from .logging_formatters import (
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)
from .announcer import ConsoleAnnouncer

__all__ = [
    "setup_logging",
    "log_error",
    "enable_quiet_mode",
    "disable_quiet_mode",
    "is_quiet_mode_enabled",
    "ConsoleAnnouncer",
]
