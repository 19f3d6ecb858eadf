# Area: Engine
# PRD: docs/prd-rules.md
"""
triwall._engine.snapshot — Game state snapshot builder
======================================================

Builds a serializable snapshot of a game for frontends and logs.
"""

from .scoring import compute_scores
from .._board.entities import GameState, VertexStatus
from ..types import FaceSnapshot, GameSnapshot, ScoreEntry


def build_state_snapshot(state: GameState) -> GameSnapshot:
    """Build a serializable snapshot of ``state``."""
    return {
        "current_player": state.current_player,
        "current_label": state.active_player.label,
        "pending_origin": state.pending_origin,
        "candidates": _vertices_with(state, VertexStatus.CANDIDATE),
        "wall_vertices": _vertices_with(state, VertexStatus.WALL),
        "visible_edges": [e.index for e in state.edges if e.visible],
        "faces": [_face_snapshot(face) for face in state.faces],
        "scores": _score_entries(state),
        "move_count": state.move_count,
        "finished": state.finished,
    }


def _vertices_with(state: GameState, status: VertexStatus) -> list:
    return [v.index for v in state.vertices if v.status is status]


def _face_snapshot(face) -> FaceSnapshot:
    return {
        "index": face.index,
        "vertices": list(face.vertices),
        "owner": face.owner,
    }


def _score_entries(state: GameState) -> list:
    board = compute_scores(state)
    return [
        ScoreEntry(player=s.player, label=s.label, faces=s.faces)
        for s in board.scores
    ]
