"""
triwall.types — TypedDict schemas for game snapshots
====================================================

Structure of the read-only snapshot returned by
``GameController.snapshot()``. All types are exported from the main
package:

    from triwall import GameSnapshot, ScoreEntry

Use __annotations__ to inspect fields:

    >>> ScoreEntry.__annotations__
    {'player': int, 'label': str, 'faces': int}
"""

from typing import TypedDict, List, Optional


class ScoreEntry(TypedDict):
    """Faces owned by one player."""
    player: int             # 0-based player index
    label: str              # e.g., "Player 1 (green)"
    faces: int              # number of owned faces


class FaceSnapshot(TypedDict):
    """One face of the board.

    Fields
    ------
    index : int
        Face index.
    vertices : List[int]
        The three outline vertices.
    owner : Optional[int]
        Owning player index, None while open.
    """
    index: int
    vertices: List[int]
    owner: Optional[int]


class GameSnapshot(TypedDict):
    """Serializable view of a game between two events.

    Fields
    ------
    current_player : int
        Index of the player to move.
    current_label : str
        That player's label.
    pending_origin : Optional[int]
        Selected origin vertex, None when idle.
    candidates : List[int]
        Vertices currently marked as candidates.
    wall_vertices : List[int]
        Vertices that are part of a wall.
    visible_edges : List[int]
        Edges that have been built.
    faces : List[FaceSnapshot]
        Every face with its owner.
    scores : List[ScoreEntry]
        Owned faces per player so far.
    move_count : int
        Moves completed so far.
    finished : bool
        True once every face is owned.
    """
    current_player: int
    current_label: str
    pending_origin: Optional[int]
    candidates: List[int]
    wall_vertices: List[int]
    visible_edges: List[int]
    faces: List[FaceSnapshot]
    scores: List[ScoreEntry]
    move_count: int
    finished: bool


__all__ = [
    "ScoreEntry",
    "FaceSnapshot",
    "GameSnapshot",
]
