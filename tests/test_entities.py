# Area: Board Tests
# PRD: docs/prd-rules.md
"""Tests for triwall._board.entities — vertices, edges, faces, game state."""

import pytest

from triwall._board.entities import Edge, Face, Vertex, VertexStatus
from triwall._board.setup import build_game_state
from triwall.errors import FaceAlreadyOwnedError


def make_vertex(status=VertexStatus.DEFAULT):
    return Vertex(index=0, position=(0.0, 0.0), lines=((1, 2, 3),), status=status)


class TestVertexStatus:
    """WALL is absorbing; other statuses change freely."""

    def test_default_to_candidate(self):
        vertex = make_vertex()
        assert vertex.set_status(VertexStatus.CANDIDATE) is True
        assert vertex.status is VertexStatus.CANDIDATE

    def test_candidate_to_wall(self):
        vertex = make_vertex(VertexStatus.CANDIDATE)
        assert vertex.set_status(VertexStatus.WALL) is True
        assert vertex.status is VertexStatus.WALL

    def test_wall_never_reverts(self):
        vertex = make_vertex(VertexStatus.WALL)
        assert vertex.set_status(VertexStatus.CANDIDATE) is False
        assert vertex.set_status(VertexStatus.DEFAULT) is False
        assert vertex.status is VertexStatus.WALL

    def test_same_status_reports_no_change(self):
        vertex = make_vertex()
        assert vertex.set_status(VertexStatus.DEFAULT) is False


class TestEdge:
    def test_joins_either_order(self):
        edge = Edge(index=0, endpoints=(4, 9))
        assert edge.joins(4, 9)
        assert edge.joins(9, 4)
        assert not edge.joins(4, 10)

    def test_starts_hidden(self):
        assert Edge(index=0, endpoints=(0, 1)).visible is False


class TestFace:
    def test_assign_sets_owner_and_completed(self):
        face = Face(index=7, edges=(15, 16, 25), vertices=(4, 9, 10))
        face.assign(2)
        assert face.owner == 2
        assert face.completed is True

    def test_assign_twice_raises(self):
        """A face is owned by exactly one player, once."""
        face = Face(index=7, edges=(15, 16, 25), vertices=(4, 9, 10))
        face.assign(0)
        with pytest.raises(FaceAlreadyOwnedError) as exc_info:
            face.assign(1)
        assert exc_info.value.face_index == 7
        assert exc_info.value.owner == 0
        assert face.owner == 0


class TestGameState:
    """Tests for GameState queries."""

    def test_active_player_starts_at_zero(self):
        state = build_game_state(3)
        assert state.current_player == 0
        assert state.active_player.label == "Player 1 (green)"

    def test_advance_player_wraps(self):
        state = build_game_state(2)
        assert state.advance_player().index == 1
        assert state.advance_player().index == 0

    def test_find_edge_via_incident_edges(self):
        state = build_game_state(2)
        assert state.find_edge(0, 1).index == 0
        assert state.find_edge(1, 0).index == 0

    def test_find_edge_missing(self):
        state = build_game_state(2)
        assert state.find_edge(0, 2) is None

    def test_face_is_closed_needs_all_three_edges(self):
        state = build_game_state(2)
        face = state.faces[0]
        for edge in face.edges[:2]:
            state.edges[edge].visible = True
        assert state.face_is_closed(face) is False
        state.edges[face.edges[2]].visible = True
        assert state.face_is_closed(face) is True

    def test_all_faces_completed(self):
        state = build_game_state(2)
        assert state.all_faces_completed() is False
        for face in state.faces:
            face.assign(0)
        assert state.all_faces_completed() is True
