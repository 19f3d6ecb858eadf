# Area: Engine
# PRD: docs/prd-rules.md
"""
triwall._engine.turn_engine — Face completion and turn rotation
===============================================================

Runs once after every committed move:

1. Credits every newly closed face to the player who moved.
2. Passes the turn to the next player and announces it.
3. Ends the game with a scoreboard when every face is owned.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import logging

from .scoring import Scoreboard, compute_scores, format_scoreboard, format_turn
from .wall_chain import CompletedMove
from .._board.entities import GameState
from ..collaborators import Announcer
from ..errors import GameFinishedError

logger = logging.getLogger("triwall.engine.turns")


@dataclass(frozen=True)
class TurnResult:
    """
    Outcome of one resolved turn.

    Attributes:
        mover: Player who made the move
        completed_faces: Faces credited to the mover this turn
        next_player: Player whose turn it is now
        scoreboard: Final scores if this move ended the game
    """
    mover: int
    completed_faces: Tuple[int, ...]
    next_player: int
    scoreboard: Optional[Scoreboard] = None

    @property
    def finished(self) -> bool:
        return self.scoreboard is not None


class TurnEngine:
    """Resolves faces and turns for one game."""

    def __init__(self, game: GameState, announcer: Announcer):
        self.game = game
        self.announcer = announcer

    def announce_current(self) -> None:
        self.announcer.announce(format_turn(self.game.active_player.label))

    def on_move_completed(self, move: CompletedMove) -> TurnResult:
        """
        Resolve the consequences of ``move``.

        Raises:
            GameFinishedError: If the game had already ended
        """
        game = self.game
        if game.finished:
            raise GameFinishedError(game.move_count)

        mover = game.current_player
        game.move_count += 1

        completed = []
        for face in game.faces:
            if not face.completed and game.face_is_closed(face):
                face.assign(mover)
                completed.append(face.index)

        if completed:
            logger.info(
                f"{game.players[mover].label} completed face(s) {completed} "
                f"with wall {move.origin} → {move.target}"
            )

        game.advance_player()
        self.announce_current()

        scoreboard = None
        if game.all_faces_completed():
            scoreboard = compute_scores(game)
            self.announcer.announce_summary(format_scoreboard(scoreboard))
            game.finished = True
            leaders = [game.players[i].label for i in scoreboard.leaders]
            outcome = f"draw between {leaders}" if scoreboard.is_draw else f"won by {leaders[0]}"
            logger.info(
                f"Game over after {game.move_count} moves, {outcome}: "
                f"{[s.faces for s in scoreboard.scores]}"
            )

        return TurnResult(
            mover=mover,
            completed_faces=tuple(completed),
            next_player=game.current_player,
            scoreboard=scoreboard,
        )
