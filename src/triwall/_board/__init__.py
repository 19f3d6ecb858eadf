# Area: Board
# PRD: docs/prd-rules.md
"""
Board topology and per-game entities.

This package contains:
- Static board tables and the immutable BoardTopology
- Vertex / Edge / Face / Player entities and GameState
- Construction of a fresh GameState
"""

from .topology import BoardTopology, STANDARD_BOARD, build_topology, validate_topology
from .entities import Edge, Face, GameState, Player, Vertex, VertexStatus
from .setup import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    PLAYER_COLORS,
    PLAYER_LABELS,
    build_game_state,
    build_players,
)

__all__ = [
    "BoardTopology",
    "STANDARD_BOARD",
    "build_topology",
    "validate_topology",
    "Edge",
    "Face",
    "GameState",
    "Player",
    "Vertex",
    "VertexStatus",
    "MAX_PLAYERS",
    "MIN_PLAYERS",
    "PLAYER_COLORS",
    "PLAYER_LABELS",
    "build_game_state",
    "build_players",
]
