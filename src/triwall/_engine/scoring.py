# Area: Engine
# PRD: docs/prd-rules.md
"""Scoring at the end of a game: one point per owned face."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from .._board.entities import GameState


@dataclass(frozen=True)
class PlayerScore:
    player: int
    label: str
    faces: int


@dataclass(frozen=True)
class Scoreboard:
    """
    Final face counts.

    Attributes:
        scores: One entry per player, in player order
        leaders: Indices of the player(s) with the most faces
        is_draw: True if more than one player shares the lead
    """
    scores: Tuple[PlayerScore, ...]
    leaders: Tuple[int, ...]

    @property
    def is_draw(self) -> bool:
        return len(self.leaders) > 1


def compute_scores(state: GameState) -> Scoreboard:
    """Count owned faces per player."""
    counts = [0] * state.player_count
    for face in state.faces:
        if face.owner is not None:
            counts[face.owner] += 1

    scores = tuple(
        PlayerScore(player=p.index, label=p.label, faces=counts[p.index])
        for p in state.players
    )
    best = max(counts)
    leaders = tuple(i for i, count in enumerate(counts) if count == best)
    return Scoreboard(scores=scores, leaders=leaders)


def format_scoreboard(scoreboard: Scoreboard) -> List[str]:
    return [f"{s.label} got {s.faces} points." for s in scoreboard.scores]


def format_turn(label: str) -> str:
    return f"{label}'s turn."
