# Area: Board Tests
# PRD: docs/prd-rules.md
"""Tests for triwall._board.setup — fresh game construction."""

import pytest

from triwall._board.entities import VertexStatus
from triwall._board.setup import (
    PLAYER_COLORS,
    PLAYER_LABELS,
    build_game_state,
    build_players,
)
from triwall._board.topology import STANDARD_BOARD


class TestBuildPlayers:
    @pytest.mark.parametrize("count", [2, 3, 4])
    def test_valid_counts(self, count):
        players = build_players(count)
        assert len(players) == count
        assert [p.index for p in players] == list(range(count))

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_invalid_counts_raise(self, count):
        with pytest.raises(ValueError):
            build_players(count)

    def test_labels_and_colors(self):
        players = build_players(4)
        assert [p.label for p in players] == list(PLAYER_LABELS)
        assert [p.color for p in players] == list(PLAYER_COLORS)
        assert players[3].label == "Player 4 (yellow)"
        assert players[3].color == "gold"


class TestBuildGameState:
    """A new game has untouched entities and player 1 to move."""

    def test_entity_counts(self):
        state = build_game_state(2)
        assert len(state.vertices) == 37
        assert len(state.edges) == 90
        assert len(state.faces) == 54

    def test_initial_values(self):
        state = build_game_state(3)
        assert state.player_count == 3
        assert state.current_player == 0
        assert state.pending_origin is None
        assert state.candidate_marks == {}
        assert state.finished is False
        assert state.move_count == 0

    def test_everything_starts_untouched(self):
        state = build_game_state(2)
        assert all(v.status is VertexStatus.DEFAULT for v in state.vertices)
        assert not any(v.is_pending_origin for v in state.vertices)
        assert not any(e.visible for e in state.edges)
        assert all(f.owner is None and not f.completed for f in state.faces)

    def test_incident_edges_match_topology(self):
        state = build_game_state(2)
        for vertex in state.vertices:
            assert tuple(vertex.incident_edges) == STANDARD_BOARD.incident_edges(vertex.index)

    def test_face_vertices_match_topology(self):
        state = build_game_state(2)
        for face in state.faces:
            assert face.vertices == STANDARD_BOARD.face_vertices(face.index)

    def test_vertex_lines_come_from_topology(self):
        state = build_game_state(2)
        assert state.vertices[0].lines == STANDARD_BOARD.lines[0]

    def test_games_do_not_share_state(self):
        first = build_game_state(2)
        second = build_game_state(2)
        first.edges[0].visible = True
        assert second.edges[0].visible is False
