# Area: Board
# PRD: docs/prd-rules.md
"""
triwall._board.entities — Per-game mutable state
================================================

Vertices, edges, faces and players for one game, layered over the
immutable BoardTopology. Cross references are indices into the
GameState collections, never object references.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple
import logging

from .topology import BoardTopology, Line, Point
from ..errors import FaceAlreadyOwnedError

logger = logging.getLogger("triwall.board")


class VertexStatus(Enum):
    """Display status of a vertex. WALL is absorbing."""
    DEFAULT   = "default"     # Untouched
    CANDIDATE = "candidate"   # Reachable from the selected origin
    WALL      = "wall"        # Part of a built wall, permanent


@dataclass
class Vertex:
    """One lattice point."""
    index: int
    position: Point
    lines: Tuple[Line, ...]
    incident_edges: List[int] = field(default_factory=list)
    status: VertexStatus = VertexStatus.DEFAULT
    is_pending_origin: bool = False

    def set_status(self, status: VertexStatus) -> bool:
        """Change status unless the vertex is already a wall.

        Returns True if the status changed.
        """
        if self.status is VertexStatus.WALL or self.status is status:
            return False
        self.status = status
        return True


@dataclass
class Edge:
    """A segment between two vertices; shown once it is part of a wall."""
    index: int
    endpoints: Tuple[int, int]
    visible: bool = False

    def joins(self, a: int, b: int) -> bool:
        return {a, b} == set(self.endpoints)


@dataclass
class Face:
    """A triangular cell bounded by three edges."""
    index: int
    edges: Tuple[int, int, int]
    vertices: Tuple[int, ...]
    owner: Optional[int] = None
    completed: bool = False

    def assign(self, player: int) -> None:
        if self.owner is not None:
            raise FaceAlreadyOwnedError(self.index, self.owner, player)
        self.owner = player
        self.completed = True


@dataclass(frozen=True)
class Player:
    index: int
    label: str
    color: str


@dataclass
class GameState:
    """
    Full state of one game.

    Owned and mutated by a single event-handling path; renderers only
    read it between events.
    """
    topology: BoardTopology
    vertices: List[Vertex]
    edges: List[Edge]
    faces: List[Face]
    players: Tuple[Player, ...]
    current_player: int = 0
    pending_origin: Optional[int] = None

    # vertex index -> status it had before being marked as candidate
    candidate_marks: Dict[int, VertexStatus] = field(default_factory=dict)

    finished: bool = False
    move_count: int = 0

    # ── Queries ──────────────────────────────────────────────

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def active_player(self) -> Player:
        return self.players[self.current_player]

    def all_faces_completed(self) -> bool:
        return all(face.completed for face in self.faces)

    def face_is_closed(self, face: Face) -> bool:
        return all(self.edges[e].visible for e in face.edges)

    def find_edge(self, a: int, b: int) -> Optional[Edge]:
        """Find the edge joining two vertices via ``a``'s incident edges."""
        for edge_index in self.vertices[a].incident_edges:
            edge = self.edges[edge_index]
            if edge.joins(a, b):
                return edge
        return None

    def advance_player(self) -> Player:
        self.current_player = (self.current_player + 1) % self.player_count
        logger.debug(f"Current player → {self.active_player.label}")
        return self.active_player
