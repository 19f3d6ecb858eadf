"""
triwall.runner — Console game loop
==================================

Plays a game in a terminal. Each input line is one command:

    <n>          click vertex n (0-36)
    click X Y    click at board-local pixel (X, Y)
    show         print the current position
    reset        start a new game
    help         list commands
    quit         leave

The loop stops at end of input or on ``quit``. Once the game is over
clicks are ignored until ``reset``.
"""

from __future__ import annotations
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from ._engine.enums import HitOutcome
from ._shared.announcer import ConsoleAnnouncer
from ._shared.logging_formatters import (
    disable_quiet_mode,
    enable_quiet_mode,
    is_quiet_mode_enabled,
)
from .collaborators import ShapeRecorder
from .controller import GameController, initialize_game

logger = logging.getLogger("triwall.runner")

HELP_TEXT = """Commands:
  <n>          click vertex n
  click X Y    click at board pixel (X, Y)
  show         print the current position
  reset        start a new game
  help         show this help
  quit         leave the game"""


class ConsoleRunner:
    """
    Line-oriented frontend.

    Usage
    -----
        runner = ConsoleRunner.from_settings({"player_count": 2})
        runner.run()
    """

    def __init__(
        self,
        controller: GameController,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.controller = controller
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._running = False

    @classmethod
    def from_settings(
        cls,
        settings: Dict[str, Any],
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        color: bool = True,
    ) -> "ConsoleRunner":
        out = stdout if stdout is not None else sys.stdout
        # Keep startup INFO logs off the terminal the game prints to
        was_quiet = is_quiet_mode_enabled()
        enable_quiet_mode()
        try:
            controller = initialize_game(
                settings,
                renderer=ShapeRecorder(),
                announcer=ConsoleAnnouncer(stream=out, color=color),
            )
        finally:
            if not was_quiet:
                disable_quiet_mode()
        return cls(controller, stdin=stdin, stdout=out)

    # ── Main loop ─────────────────────────────────────────────

    def run(self) -> None:
        """Read commands until end of input or ``quit``."""
        self._running = True
        was_quiet = is_quiet_mode_enabled()
        enable_quiet_mode()
        try:
            while self._running:
                line = self.stdin.readline()
                if not line:
                    break
                self.execute(line)
        finally:
            if not was_quiet:
                disable_quiet_mode()
        logger.info("Console runner stopped")

    def execute(self, line: str) -> None:
        """Run one command line."""
        parts = line.split()
        if not parts:
            return

        command = parts[0].lower()
        if command.isdecimal():
            self._click_vertex(int(command))
        elif command == "click" and len(parts) == 3:
            self._click_point(parts[1], parts[2])
        elif command == "show":
            self._print_lines(self.describe())
        elif command == "reset":
            self.controller.reset()
        elif command == "help":
            self._print(HELP_TEXT)
        elif command in ("quit", "exit"):
            self._running = False
        else:
            self._print(f"Unknown command: {line.strip()} (try 'help')")

    # ── Commands ──────────────────────────────────────────────

    def _click_vertex(self, index: int) -> None:
        count = self.controller.state.topology.vertex_count
        if not 0 <= index < count:
            self._print(f"No vertex {index} (0-{count - 1})")
            return
        self._report(self.controller.click_vertex(index))

    def _click_point(self, raw_x: str, raw_y: str) -> None:
        try:
            x, y = float(raw_x), float(raw_y)
        except ValueError:
            self._print(f"Bad coordinates: {raw_x} {raw_y}")
            return
        self._report(self.controller.handle_pointer(x, y))

    def _report(self, result) -> None:
        if result is None:
            self._print("The game is over. Type 'reset' to play again.")
        elif result.outcome is HitOutcome.SELECTED:
            candidates = self.controller.state.topology.reachable(result.vertex)
            self._print(f"Selected {result.vertex}; reachable: {list(candidates)}")
        elif result.outcome is HitOutcome.CANCELLED:
            self._print(f"Released {result.vertex}")
        elif result.outcome is HitOutcome.IGNORED and result.vertex is not None:
            self._print(f"Vertex {result.vertex} is not reachable")

    def describe(self) -> List[str]:
        """Human-readable summary of the current position."""
        snap = self.controller.snapshot()
        lines = [
            f"Move {snap['move_count']}, {snap['current_label']} to play",
            f"Selected origin: {snap['pending_origin'] if snap['pending_origin'] is not None else '-'}",
            f"Walls: {len(snap['visible_edges'])} edge(s), vertices {snap['wall_vertices']}",
        ]
        for entry in snap["scores"]:
            lines.append(f"  {entry['label']}: {entry['faces']} face(s)")
        open_faces = sum(1 for f in snap["faces"] if f["owner"] is None)
        lines.append(f"Open faces: {open_faces}")
        if snap["finished"]:
            lines.append("Game over")
        return lines

    def _print(self, text: str) -> None:
        print(text, file=self.stdout)

    def _print_lines(self, lines: List[str]) -> None:
        for line in lines:
            self._print(line)
