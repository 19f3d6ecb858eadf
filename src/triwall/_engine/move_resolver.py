# Area: Engine
# PRD: docs/prd-rules.md
"""
triwall._engine.move_resolver — Two-click move state machine
============================================================

Turns vertex hits into moves. The first click selects an origin and
marks its reachable vertices as candidates; the second click either
cancels (origin again), builds a wall (a reachable vertex) or is
ignored (anything else).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from .enums import HitOutcome, ResolverState
from .wall_chain import CompletedMove, build_wall_chain
from .._board.entities import GameState, VertexStatus

logger = logging.getLogger("triwall.engine.resolver")


# Valid transitions: {current_state: {outcome: next_state}}
TRANSITIONS = {
    ResolverState.IDLE: {
        HitOutcome.IGNORED: ResolverState.IDLE,
        HitOutcome.SELECTED: ResolverState.ORIGIN_SELECTED,
    },
    ResolverState.ORIGIN_SELECTED: {
        HitOutcome.IGNORED: ResolverState.ORIGIN_SELECTED,
        HitOutcome.CANCELLED: ResolverState.IDLE,
        HitOutcome.COMPLETED: ResolverState.IDLE,
    },
}


@dataclass(frozen=True)
class HitResult:
    """Result of handling one hit."""
    outcome: HitOutcome
    state: ResolverState
    vertex: Optional[int] = None
    move: Optional[CompletedMove] = None


class MoveResolver:
    """
    State machine for move selection.

    The state lives in the GameState (pending origin and candidate
    marks) so a render pass sees it; the resolver only drives it.

    Attributes:
        game: The game state being mutated
    """

    def __init__(self, game: GameState):
        self.game = game

    @property
    def current_state(self) -> ResolverState:
        if self.game.pending_origin is None:
            return ResolverState.IDLE
        return ResolverState.ORIGIN_SELECTED

    def handle_hit(self, vertex: Optional[int]) -> HitResult:
        """
        Handle a click that hit ``vertex`` (None for a miss).

        Returns:
            HitResult with the outcome; ``move`` is set only when a wall
            was built
        """
        state = self.current_state

        if vertex is None:
            return self._result(state, HitOutcome.IGNORED)

        if state is ResolverState.IDLE:
            self._select(vertex)
            return self._result(state, HitOutcome.SELECTED, vertex)

        origin = self.game.pending_origin
        if vertex == origin:
            self._clear_selection()
            logger.info(f"Selection of vertex {origin} cancelled")
            return self._result(state, HitOutcome.CANCELLED, vertex)

        if vertex in self.game.topology.reachable(origin):
            self._clear_selection()
            move = build_wall_chain(self.game, origin, vertex)
            return self._result(state, HitOutcome.COMPLETED, vertex, move)

        logger.debug(f"Ignoring vertex {vertex}: not reachable from {origin}")
        return self._result(state, HitOutcome.IGNORED, vertex)

    # ── Internals ────────────────────────────────────────────

    def _select(self, vertex: int) -> None:
        game = self.game
        game.pending_origin = vertex
        game.vertices[vertex].is_pending_origin = True

        for target in game.topology.reachable(vertex):
            candidate = game.vertices[target]
            prior = candidate.status
            if candidate.set_status(VertexStatus.CANDIDATE):
                game.candidate_marks[target] = prior

        logger.info(
            f"{game.active_player.label} selected vertex {vertex}; "
            f"candidates={sorted(game.candidate_marks)}"
        )

    def _clear_selection(self) -> None:
        game = self.game
        for target, prior in game.candidate_marks.items():
            vertex = game.vertices[target]
            if vertex.status is VertexStatus.CANDIDATE:
                vertex.status = prior
        game.candidate_marks.clear()

        if game.pending_origin is not None:
            game.vertices[game.pending_origin].is_pending_origin = False
        game.pending_origin = None

    @staticmethod
    def _result(
        state: ResolverState,
        outcome: HitOutcome,
        vertex: Optional[int] = None,
        move: Optional[CompletedMove] = None,
    ) -> HitResult:
        return HitResult(
            outcome=outcome,
            state=TRANSITIONS[state][outcome],
            vertex=vertex,
            move=move,
        )
