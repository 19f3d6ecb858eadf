# Area: Engine Tests
# PRD: docs/prd-rules.md
"""Tests for the two-click move state machine."""

import pytest

from triwall._board.entities import VertexStatus
from triwall._board.setup import build_game_state
from triwall._engine.enums import HitOutcome, ResolverState
from triwall._engine.move_resolver import TRANSITIONS, MoveResolver


@pytest.fixture
def state():
    return build_game_state(2)


@pytest.fixture
def resolver(state):
    return MoveResolver(state)


class TestTransitions:
    """Tests for the TRANSITIONS table."""

    def test_idle_allows_select_and_ignore_only(self):
        assert set(TRANSITIONS[ResolverState.IDLE]) == {
            HitOutcome.IGNORED, HitOutcome.SELECTED,
        }

    def test_selected_returns_to_idle_on_cancel_and_complete(self):
        row = TRANSITIONS[ResolverState.ORIGIN_SELECTED]
        assert row[HitOutcome.CANCELLED] is ResolverState.IDLE
        assert row[HitOutcome.COMPLETED] is ResolverState.IDLE
        assert row[HitOutcome.IGNORED] is ResolverState.ORIGIN_SELECTED


class TestSelect:
    """First click: pick an origin."""

    def test_initial_state_is_idle(self, resolver):
        assert resolver.current_state is ResolverState.IDLE

    def test_miss_is_ignored(self, resolver, state):
        result = resolver.handle_hit(None)
        assert result.outcome is HitOutcome.IGNORED
        assert result.state is ResolverState.IDLE
        assert state.pending_origin is None

    def test_select_marks_origin(self, resolver, state):
        result = resolver.handle_hit(0)
        assert result.outcome is HitOutcome.SELECTED
        assert result.state is ResolverState.ORIGIN_SELECTED
        assert result.vertex == 0
        assert state.pending_origin == 0
        assert state.vertices[0].is_pending_origin is True
        assert resolver.current_state is ResolverState.ORIGIN_SELECTED

    def test_select_marks_far_ends_as_candidates(self, resolver, state):
        resolver.handle_hit(0)
        candidates = {v.index for v in state.vertices if v.status is VertexStatus.CANDIDATE}
        assert candidates == {3, 15, 18}
        assert sorted(state.candidate_marks) == [3, 15, 18]

    def test_select_does_not_mark_intermediate_vertices(self, resolver, state):
        resolver.handle_hit(0)
        assert state.vertices[1].status is VertexStatus.DEFAULT
        assert state.vertices[2].status is VertexStatus.DEFAULT


class TestCancel:
    """Clicking the origin again releases it."""

    def test_cancel_restores_everything(self, resolver, state):
        resolver.handle_hit(0)
        result = resolver.handle_hit(0)
        assert result.outcome is HitOutcome.CANCELLED
        assert result.state is ResolverState.IDLE
        assert state.pending_origin is None
        assert state.vertices[0].is_pending_origin is False
        assert state.candidate_marks == {}
        assert all(v.status is VertexStatus.DEFAULT for v in state.vertices)

    def test_cancel_keeps_existing_walls(self, resolver, state):
        resolver.handle_hit(0)
        resolver.handle_hit(3)
        # 18 reaches 3 through 12 and 7; 3 is already a wall
        resolver.handle_hit(18)
        assert 3 not in state.candidate_marks
        resolver.handle_hit(18)
        assert state.vertices[3].status is VertexStatus.WALL

    def test_cancel_does_not_count_as_move(self, resolver, state):
        resolver.handle_hit(5)
        resolver.handle_hit(5)
        assert state.move_count == 0
        assert not any(e.visible for e in state.edges)


class TestIgnored:
    """Clicks that are neither the origin nor reachable change nothing."""

    def test_unreachable_vertex_is_ignored(self, resolver, state):
        resolver.handle_hit(0)
        result = resolver.handle_hit(1)
        assert result.outcome is HitOutcome.IGNORED
        assert result.state is ResolverState.ORIGIN_SELECTED
        assert result.vertex == 1
        assert state.pending_origin == 0
        assert state.vertices[1].status is VertexStatus.DEFAULT

    def test_miss_while_selected_keeps_selection(self, resolver, state):
        resolver.handle_hit(0)
        result = resolver.handle_hit(None)
        assert result.outcome is HitOutcome.IGNORED
        assert state.pending_origin == 0
        assert state.vertices[3].status is VertexStatus.CANDIDATE


class TestComplete:
    """Clicking a reachable vertex builds the wall."""

    def test_complete_returns_move(self, resolver):
        resolver.handle_hit(0)
        result = resolver.handle_hit(3)
        assert result.outcome is HitOutcome.COMPLETED
        assert result.state is ResolverState.IDLE
        assert result.move.path == (0, 1, 2, 3)
        assert result.move.edges == (0, 1, 2)

    def test_complete_clears_selection(self, resolver, state):
        resolver.handle_hit(0)
        resolver.handle_hit(3)
        assert state.pending_origin is None
        assert state.candidate_marks == {}
        assert state.vertices[0].is_pending_origin is False

    def test_unused_candidates_revert(self, resolver, state):
        resolver.handle_hit(0)
        resolver.handle_hit(3)
        assert state.vertices[15].status is VertexStatus.DEFAULT
        assert state.vertices[18].status is VertexStatus.DEFAULT

    def test_path_becomes_wall(self, resolver, state):
        resolver.handle_hit(0)
        resolver.handle_hit(3)
        for vertex in (0, 1, 2, 3):
            assert state.vertices[vertex].status is VertexStatus.WALL
        assert [e.index for e in state.edges if e.visible] == [0, 1, 2]

    def test_wall_target_is_not_candidate_but_reachable(self, resolver, state):
        resolver.handle_hit(0)
        resolver.handle_hit(3)
        resolver.handle_hit(18)
        assert state.vertices[3].status is VertexStatus.WALL
        result = resolver.handle_hit(3)
        assert result.outcome is HitOutcome.COMPLETED
        assert result.move.path == (18, 12, 7, 3)

    def test_wall_vertex_can_be_origin(self, resolver, state):
        resolver.handle_hit(0)
        resolver.handle_hit(3)
        result = resolver.handle_hit(0)
        assert result.outcome is HitOutcome.SELECTED
        assert state.vertices[0].status is VertexStatus.WALL
        assert state.vertices[0].is_pending_origin is True

    def test_resolver_does_not_rotate_turn(self, resolver, state):
        resolver.handle_hit(0)
        resolver.handle_hit(3)
        assert state.current_player == 0
