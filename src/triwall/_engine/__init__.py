# Area: Engine
# PRD: docs/prd-rules.md
"""
Rule engine: move selection, wall building, turns and scoring.
"""

from .enums import HitOutcome, ResolverState
from .move_resolver import HitResult, MoveResolver, TRANSITIONS
from .wall_chain import CompletedMove, build_wall_chain
from .turn_engine import TurnEngine, TurnResult
from .scoring import PlayerScore, Scoreboard, compute_scores, format_scoreboard, format_turn
from .snapshot import build_state_snapshot

__all__ = [
    "HitOutcome",
    "ResolverState",
    "HitResult",
    "MoveResolver",
    "TRANSITIONS",
    "CompletedMove",
    "build_wall_chain",
    "TurnEngine",
    "TurnResult",
    "PlayerScore",
    "Scoreboard",
    "compute_scores",
    "format_scoreboard",
    "format_turn",
    "build_state_snapshot",
]
