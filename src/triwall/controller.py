"""
triwall.controller — Event handling for one game
================================================

The GameController is what frontends instantiate. It owns the game
state and processes one pointer event at a time to completion:

    device point → board point → hit vertex → move resolver
        → turn engine (on a completed move) → redraw

Usage
-----
    from triwall import initialize_game, ConsoleAnnouncer, ShapeRecorder

    controller = initialize_game(
        {"player_count": 3},
        renderer=ShapeRecorder(),
        announcer=ConsoleAnnouncer(),
    )
    controller.click_vertex(0)     # select
    controller.click_vertex(3)     # build the wall 0 → 3
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Tuple, Union

from ._board.setup import build_game_state
from ._engine.enums import HitOutcome
from ._engine.move_resolver import HitResult, MoveResolver
from ._engine.snapshot import build_state_snapshot
from ._engine.turn_engine import TurnEngine, TurnResult
from ._render.hit_test import find_hit
from ._render.scene import build_scene, vertex_centers
from ._render.view import ViewTransform
from .collaborators import Announcer, InputSource, Renderer, SurfaceOriginInput
from .config import GameConfig
from .types import GameSnapshot

logger = logging.getLogger("triwall.controller")


class GameController:
    """
    Wires input to the rule engine and requests redraws.

    Attributes:
        config: Validated settings
        state: Current GameState (replaced on reset)
        view: Board → canvas transform
        last_turn: Result of the most recent resolved move
    """

    def __init__(
        self,
        config: GameConfig,
        renderer: Renderer,
        announcer: Announcer,
        input_source: Optional[InputSource] = None,
    ):
        self.config = config
        self.renderer = renderer
        self.announcer = announcer
        self.input_source = input_source or SurfaceOriginInput()
        self.view = ViewTransform(
            width=config.canvas_width,
            height=config.canvas_height,
            scale=config.board_scale,
        )
        self.last_turn: Optional[TurnResult] = None
        self._new_game()

    def _new_game(self) -> None:
        self.state = build_game_state(self.config.player_count)
        self.resolver = MoveResolver(self.state)
        self.turns = TurnEngine(self.state, self.announcer)
        self._centers = vertex_centers(self.state, self.view)
        self.last_turn = None

    # ── Lifecycle ─────────────────────────────────────────────

    def start(self) -> None:
        """Draw the first frame and announce the first player."""
        self.redraw()
        self.turns.announce_current()

    def reset(self) -> None:
        """Discard the current game and start a new one."""
        logger.info("Resetting game")
        self._new_game()
        self.start()

    @property
    def finished(self) -> bool:
        return self.state.finished

    # ── Input ─────────────────────────────────────────────────

    def handle_pointer(self, device_x: float, device_y: float) -> Optional[HitResult]:
        """
        Process one pointer event in device coordinates.

        Returns:
            The HitResult, or None if the game is over and the event
            was dropped
        """
        x, y = self.input_source.to_board_point(device_x, device_y)
        return self.handle_board_point(x, y)

    def handle_board_point(self, x: float, y: float) -> Optional[HitResult]:
        if self.state.finished:
            logger.debug(f"Game finished, dropping click at ({x:.0f}, {y:.0f})")
            return None

        vertex = find_hit((x, y), self._centers, self.config.vertex_radius)
        result = self.resolver.handle_hit(vertex)

        if result.outcome is HitOutcome.COMPLETED and result.move is not None:
            self.last_turn = self.turns.on_move_completed(result.move)

        self.redraw()
        return result

    def click_vertex(self, index: int) -> Optional[HitResult]:
        """Click at the centre of a vertex (board-local pixels)."""
        x, y = self.vertex_center(index)
        return self.handle_board_point(x, y)

    def vertex_center(self, index: int) -> Tuple[float, float]:
        return self._centers[index]

    # ── Output ────────────────────────────────────────────────

    def redraw(self) -> None:
        self.renderer.render(build_scene(
            self.state,
            self.view,
            vertex_radius=self.config.vertex_radius,
            wall_width=self.config.wall_width,
        ))

    def snapshot(self) -> GameSnapshot:
        return build_state_snapshot(self.state)


def initialize_game(
    settings: Union[Dict[str, Any], GameConfig],
    renderer: Renderer,
    announcer: Announcer,
    input_source: Optional[InputSource] = None,
) -> GameController:
    """
    Build a controller from settings and start the game.

    A raw settings dict is validated first; an invalid player count is
    reported through ``announcer.warn`` and replaced by 4.

    Raises:
        ConfigError: If any other setting is invalid
    """
    if isinstance(settings, GameConfig):
        config = settings
    else:
        config, warnings = GameConfig.from_settings(settings)
        for warning in warnings:
            announcer.warn(warning)

    logger.info(
        f"Starting game: {config.player_count} players, "
        f"canvas {config.canvas_width}x{config.canvas_height}"
    )
    controller = GameController(config, renderer, announcer, input_source)
    controller.start()
    return controller
