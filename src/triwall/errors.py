"""
triwall.errors — Custom exception classes
=========================================

Defines the exception hierarchy for the rule engine.
Errors that carry context can render themselves as a structured
block for the terminal and the log file.

Illegal clicks are never errors: the engine ignores them.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class TriwallError(Exception):
    """Base exception for all triwall errors."""
    pass


class TopologyError(TriwallError):
    """Raised when the static board tables are inconsistent."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(
            f"Board topology is invalid ({len(self.problems)} problem(s)): "
            f"{self.problems[:3]}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="TOPOLOGY_INVALID",
            source="board tables",
            details=None,
            problems=self.problems,
        )


class ConfigError(TriwallError):
    """Raised when game settings fail validation."""

    def __init__(
        self,
        source: str,
        settings: Dict[str, Any],
        validation_errors: List[str],
    ):
        self.source = source
        self.settings = settings
        self.validation_errors = validation_errors
        super().__init__(
            f"Invalid settings from {source}: {validation_errors}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CONFIG_INVALID",
            source=self.source,
            details=self.settings,
            problems=self.validation_errors,
        )


class GameFinishedError(TriwallError):
    """Raised when the engine is asked to resolve a move after the game ended."""

    def __init__(self, move_count: int):
        self.move_count = move_count
        super().__init__(
            f"Game already finished after {move_count} move(s)"
        )


class FaceAlreadyOwnedError(TriwallError):
    """Raised when a face that already has an owner is assigned again."""

    def __init__(self, face_index: int, owner: int, new_owner: int):
        self.face_index = face_index
        self.owner = owner
        self.new_owner = new_owner
        super().__init__(
            f"Face {face_index} is owned by player {owner}, "
            f"cannot assign to player {new_owner}"
        )


def _format_error_block(
    error_type: str,
    source: str,
    details: Optional[Dict[str, Any]],
    problems: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal and log output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " TRIWALL ERROR — CANNOT START GAME",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Source:       {source}",
    ]

    if details is not None:
        lines.append("")
        lines.append(" ── SETTINGS " + "─" * 51)
        lines.append(_indent_json(details))

    if problems:
        lines.append("")
        lines.append(" ── PROBLEMS " + "─" * 51)
        for problem in problems:
            lines.append(f" • {problem}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
