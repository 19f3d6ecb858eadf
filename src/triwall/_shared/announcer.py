# Area: Shared
# PRD: docs/prd-rules.md
"""
triwall._shared.announcer — Terminal announcements
==================================================

Prints turn messages, the final scoreboard and warnings to a text
stream, colored by message kind.
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Optional, Sequence, TextIO

from ..collaborators import Announcer

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Turn messages
ORANGE = "\033[38;5;208m"  # Scoreboard
RED = "\033[31m"           # Warnings
RESET = "\033[0m"


class ConsoleAnnouncer(Announcer):
    """Announcer writing to a terminal stream."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.color = color

    def _now(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _paint(self, code: str, text: str) -> str:
        return f"{code}{text}{RESET}" if self.color else text

    def announce(self, text: str) -> None:
        line = f"{self._now()} | TURN  | {text}"
        print(self._paint(GREEN, line), file=self.stream)

    def announce_summary(self, lines: Sequence[str]) -> None:
        print(self._paint(ORANGE, "=" * 40), file=self.stream)
        print(self._paint(ORANGE, "  GAME OVER"), file=self.stream)
        for line in lines:
            print(self._paint(ORANGE, f"  {line}"), file=self.stream)
        print(self._paint(ORANGE, "=" * 40), file=self.stream)

    def warn(self, text: str) -> None:
        for part in text.splitlines() or [""]:
            print(self._paint(RED, f"[WARNING] {part}"), file=self.stream)
