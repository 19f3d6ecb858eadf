# Area: Board
# PRD: docs/prd-rules.md
"""
triwall._board.setup — Game state construction
==============================================

Builds a fresh GameState for a topology and player count. Nothing
created here is ever destroyed; a new game builds a new state.
"""

from __future__ import annotations
from typing import Tuple
import logging

from .entities import Edge, Face, GameState, Player, Vertex
from .topology import BoardTopology, STANDARD_BOARD

logger = logging.getLogger("triwall.board")

MIN_PLAYERS = 2
MAX_PLAYERS = 4

PLAYER_LABELS = (
    "Player 1 (green)",
    "Player 2 (red)",
    "Player 3 (blue)",
    "Player 4 (yellow)",
)
PLAYER_COLORS = ("forestgreen", "tomato", "navy", "gold")


def build_players(count: int) -> Tuple[Player, ...]:
    if not MIN_PLAYERS <= count <= MAX_PLAYERS:
        raise ValueError(
            f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {count}"
        )
    return tuple(
        Player(index=i, label=PLAYER_LABELS[i], color=PLAYER_COLORS[i])
        for i in range(count)
    )


def build_game_state(
    player_count: int,
    topology: BoardTopology = STANDARD_BOARD,
) -> GameState:
    """
    Instantiate vertices, edges and faces for a new game.

    Args:
        player_count: Number of players, 2 to 4
        topology: Board structure to layer the state over

    Returns:
        A GameState with player 0 to move and no pending origin

    Raises:
        ValueError: If player_count is out of range
    """
    players = build_players(player_count)

    vertices = [
        Vertex(
            index=i,
            position=pos,
            lines=topology.lines[i],
            incident_edges=list(topology.incident_edges(i)),
        )
        for i, pos in enumerate(topology.positions)
    ]

    edges = [
        Edge(index=i, endpoints=(a, b))
        for i, (a, b) in enumerate(topology.edges)
    ]

    faces = [
        Face(index=i, edges=face_edges, vertices=topology.face_vertices(i))
        for i, face_edges in enumerate(topology.faces)
    ]

    logger.info(
        f"New game: {player_count} players, {len(vertices)} vertices, "
        f"{len(edges)} edges, {len(faces)} faces"
    )
    return GameState(
        topology=topology,
        vertices=vertices,
        edges=edges,
        faces=faces,
        players=players,
    )
