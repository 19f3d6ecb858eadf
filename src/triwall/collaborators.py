# Area: Frontend Seams
# PRD: docs/prd-rules.md
"""
triwall.collaborators — The outside world the engine talks to
=============================================================

The engine never paints pixels, reads devices or prints. It hands
those jobs to three collaborators, injected at startup:

    Renderer     — paints an ordered list of shapes
    Announcer    — shows turn messages, the final scoreboard, warnings
    InputSource  — turns device coordinates into board-local pixels

Subclass the abstract classes to plug in a frontend. The simple
implementations below are enough for headless play and tests:

    from triwall import initialize_game, ShapeRecorder, RecordingAnnouncer
    controller = initialize_game({"player_count": 2},
                                 renderer=ShapeRecorder(),
                                 announcer=RecordingAnnouncer())
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from ._render.shapes import Shape


class Renderer(ABC):
    """
    Drawing backend.

    ``render`` receives the whole scene on every redraw, in painting
    order. Each shape is filled, then stroked.
    """

    @abstractmethod
    def render(self, shapes: Sequence[Shape]) -> None:
        ...


class Announcer(ABC):
    """Text sink for player-facing messages."""

    @abstractmethod
    def announce(self, text: str) -> None:
        """Show a turn message, e.g. "Player 2 (red)'s turn."."""
        ...

    @abstractmethod
    def announce_summary(self, lines: Sequence[str]) -> None:
        """Show the final scoreboard, one line per player."""
        ...

    @abstractmethod
    def warn(self, text: str) -> None:
        """Show a non-fatal warning, e.g. an invalid player count."""
        ...


class InputSource(ABC):
    """Maps device coordinates to board-local pixel coordinates."""

    @abstractmethod
    def to_board_point(self, device_x: float, device_y: float) -> Tuple[float, float]:
        ...


class SurfaceOriginInput(InputSource):
    """Subtracts the drawing surface's origin from device coordinates."""

    def __init__(self, origin_x: float = 0.0, origin_y: float = 0.0):
        self.origin_x = origin_x
        self.origin_y = origin_y

    def to_board_point(self, device_x: float, device_y: float) -> Tuple[float, float]:
        return device_x - self.origin_x, device_y - self.origin_y


class ShapeRecorder(Renderer):
    """Keeps the last rendered frame instead of drawing it."""

    def __init__(self):
        self.frames = 0
        self.shapes: List[Shape] = []

    def render(self, shapes: Sequence[Shape]) -> None:
        self.frames += 1
        self.shapes = list(shapes)


class RecordingAnnouncer(Announcer):
    """Collects every message in order."""

    def __init__(self):
        self.messages: List[str] = []
        self.summaries: List[List[str]] = []
        self.warnings: List[str] = []

    def announce(self, text: str) -> None:
        self.messages.append(text)

    def announce_summary(self, lines: Sequence[str]) -> None:
        self.summaries.append(list(lines))

    def warn(self, text: str) -> None:
        self.warnings.append(text)

    @property
    def last_message(self) -> str:
        return self.messages[-1] if self.messages else ""
