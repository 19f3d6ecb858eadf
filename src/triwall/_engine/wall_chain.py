# Area: Engine
# PRD: docs/prd-rules.md
"""
triwall._engine.wall_chain — Multi-segment wall construction
============================================================

Commits a move from an origin to the far end of one of its lines:
every vertex on the way becomes a wall and every edge between
consecutive vertices becomes visible.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import logging

from .._board.entities import GameState, VertexStatus
from ..errors import TopologyError

logger = logging.getLogger("triwall.engine.walls")


@dataclass(frozen=True)
class CompletedMove:
    """
    A committed move.

    Attributes:
        player: Index of the player who made the move
        origin: Vertex the wall starts from
        target: Vertex the wall ends at
        path: Every vertex on the wall, origin and target included
        edges: Edge indices made visible, in path order
    """
    player: int
    origin: int
    target: int
    path: Tuple[int, ...]
    edges: Tuple[int, ...]


def build_wall_chain(state: GameState, origin: int, target: int) -> CompletedMove:
    """
    Build the wall from ``origin`` to ``target``.

    Raises:
        TopologyError: If ``target`` ends none of the origin's lines, or
            two consecutive vertices on the line are not joined by an edge
    """
    line = state.topology.line_to(origin, target)
    if line is None:
        raise TopologyError([f"no line from vertex {origin} ends at vertex {target}"])

    path = (origin,) + tuple(line)
    state.vertices[origin].set_status(VertexStatus.WALL)

    shown = []
    for p, q in zip(path, path[1:]):
        state.vertices[q].set_status(VertexStatus.WALL)
        edge = state.find_edge(p, q)
        if edge is None:
            raise TopologyError([f"no edge between vertex {p} and vertex {q}"])
        edge.visible = True
        shown.append(edge.index)

    logger.info(
        f"Wall {origin} → {target} by {state.active_player.label}: "
        f"path={list(path)} edges={shown}"
    )
    return CompletedMove(
        player=state.current_player,
        origin=origin,
        target=target,
        path=path,
        edges=tuple(shown),
    )
