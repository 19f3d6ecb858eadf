# Area: Shared
# PRD: docs/prd-rules.md
"""
triwall._shared.logging_config — Structured logging setup
=========================================================

Configures dual logging: terminal (colored) + optional file (JSON).
Provides structured error logging.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from .logging_formatters import JSONFormatter, QuietFilter, TerminalFormatter

if TYPE_CHECKING:
    from ..errors import TriwallError

# Package logger
logger = logging.getLogger("triwall")


def setup_logging(
    log_file_path: Optional[str] = None,
    level: Union[int, str] = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str, optional
        Path to a JSON-lines log file. No file logging when None.
    level : int or str
        Logging level. Defaults to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    pkg_logger = logging.getLogger("triwall")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(QuietFilter())
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_error(error: "TriwallError") -> None:
    """
    Log an error in the structured format.

    Errors without ``format_error_log`` are logged as a single line.
    """
    formatter = getattr(error, "format_error_log", None)
    if formatter is not None:
        # Print to terminal (bypassing logger for exact formatting)
        print(formatter(), file=sys.stderr)

    logger.error(
        f"{error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )
