"""
triwall.pygame_runner — Window frontend (optional)
==================================================

Requires the ``pygame`` extra:

    pip install triwall[pygame]
    triwall --gui --players 3

The window has a status bar on top and the board below it. Mouse
positions arrive in window coordinates, so the input source subtracts
the board surface's origin. Escape quits, R starts a new game.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Sequence

import pygame

from ._render.shapes import Circle, Polygon, Shape
from .collaborators import Announcer, Renderer, SurfaceOriginInput
from .config import GameConfig
from .controller import GameController, initialize_game

logger = logging.getLogger("triwall.pygame")

WINDOW_TITLE = "Triwall"
STATUS_BAR_HEIGHT = 60
BACKGROUND = "white"
STATUS_BACKGROUND = (30, 30, 30)
STATUS_TEXT = (255, 255, 255)
WARNING_TEXT = (255, 120, 80)
FPS = 30


class PygameRenderer(Renderer):
    """Paints shapes onto a pygame surface, fill then stroke."""

    def __init__(self, surface: "pygame.Surface", background: str = BACKGROUND):
        self.surface = surface
        self.background = pygame.Color(background)

    def render(self, shapes: Sequence[Shape]) -> None:
        self.surface.fill(self.background)
        for shape in shapes:
            self.draw(shape)

    def draw(self, shape: Shape) -> None:
        if isinstance(shape, Circle):
            pygame.draw.circle(self.surface, pygame.Color(shape.fill), shape.center, shape.radius)
            pygame.draw.circle(self.surface, pygame.Color(shape.stroke), shape.center, shape.radius, 1)
        elif isinstance(shape, Polygon):
            pygame.draw.polygon(self.surface, pygame.Color(shape.fill), shape.points)
            pygame.draw.polygon(self.surface, pygame.Color(shape.stroke), shape.points, 1)
        else:
            raise TypeError(f"Unsupported shape: {type(shape).__name__}")


class PygameAnnouncer(Announcer):
    """Keeps the latest messages for the status bar."""

    def __init__(self):
        self.status = ""
        self.summary: List[str] = []
        self.warning = ""

    def announce(self, text: str) -> None:
        self.status = text

    def announce_summary(self, lines: Sequence[str]) -> None:
        self.summary = list(lines)

    def warn(self, text: str) -> None:
        self.warning = " ".join(text.split())

    def status_lines(self) -> List[str]:
        if self.summary:
            return ["Game over: " + "  ".join(self.summary)]
        lines = [self.status]
        if self.warning:
            lines.append(self.warning)
        return lines


class PygameRunner:
    """Main window loop."""

    def __init__(self, settings: Dict[str, Any]):
        config, warnings = GameConfig.from_settings(settings)

        pygame.init()
        self.screen = pygame.display.set_mode(
            (config.canvas_width, config.canvas_height + STATUS_BAR_HEIGHT)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 22)
        self.running = False

        board_surface = self.screen.subsurface(
            (0, STATUS_BAR_HEIGHT, config.canvas_width, config.canvas_height)
        )
        self.announcer = PygameAnnouncer()
        for warning in warnings:
            self.announcer.warn(warning)

        self.controller: GameController = initialize_game(
            config,
            renderer=PygameRenderer(board_surface),
            announcer=self.announcer,
            input_source=SurfaceOriginInput(0, STATUS_BAR_HEIGHT),
        )

    def run(self) -> None:
        """Run until the window is closed or Escape is pressed."""
        self.running = True
        while self.running:
            self.handle_events()
            self.draw_status_bar()
            pygame.display.flip()
            self.clock.tick(FPS)
        self.quit()

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                self.announcer.summary = []
                self.controller.reset()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                # Clicks on the status bar land outside the board and miss
                self.controller.handle_pointer(*event.pos)

    def draw_status_bar(self) -> None:
        width = self.screen.get_width()
        pygame.draw.rect(self.screen, STATUS_BACKGROUND, (0, 0, width, STATUS_BAR_HEIGHT))
        for row, line in enumerate(self.announcer.status_lines()[:2]):
            color = WARNING_TEXT if row and self.announcer.warning else STATUS_TEXT
            text = self.font.render(line, True, color)
            self.screen.blit(text, (10, 10 + row * 22))

    def quit(self) -> None:
        """Clean up pygame on exit."""
        pygame.quit()
