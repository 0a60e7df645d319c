"""Unit tests for moves and the undo/redo history."""

import dataclasses

import pytest

from greenboard.core.history import Move, MoveHistory


class TestMove:
    """Test the move value object."""

    def test_default_magnitude(self):
        assert Move(1, 2).d == 1

    def test_inverse_negates_magnitude(self):
        move = Move(2, 3, 2)
        inverse = move.inverse()
        assert inverse == Move(2, 3, -2)
        assert inverse.loc == move.loc == (2, 3)
        assert inverse.inverse() == move

    def test_frozen(self):
        move = Move(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            move.d = 3

    def test_negative_position_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            Move(-1, 0)
        with pytest.raises(ValueError, match="non-negative"):
            Move(0, -2)

    def test_hashable(self):
        assert len({Move(0, 0), Move(0, 0), Move(0, 0, -1)}) == 2


class TestMoveHistory:
    """Test linear undo/redo semantics."""

    @pytest.fixture
    def history(self):
        """History holding three moves."""
        h = MoveHistory()
        for x in range(3):
            h.push(Move(x, 0))
        return h

    def test_empty(self):
        h = MoveHistory()
        assert len(h) == 0
        assert h.cursor == 0
        assert h.undo() is None
        assert h.redo() is None
        assert not h.can_undo
        assert not h.can_redo

    def test_undo_returns_most_recent_first(self, history):
        assert history.undo() == Move(2, 0)
        assert history.undo() == Move(1, 0)
        assert history.undo() == Move(0, 0)
        assert history.undo() is None
        assert history.cursor == len(history) == 3

    def test_redo_reverses_undo(self, history):
        """redo returns exactly what the preceding undo returned."""
        first = history.undo()
        second = history.undo()
        assert history.redo() == second
        assert history.redo() == first
        assert history.redo() is None
        assert history.cursor == 0

    def test_push_truncates_redo_branch(self, history):
        history.undo()
        history.undo()
        history.push(Move(5, 5))

        assert len(history) == 2
        assert history.cursor == 0
        assert history.redo() is None
        assert history.applied == [Move(0, 0), Move(5, 5)]

    def test_push_without_undo_appends(self, history):
        history.push(Move(3, 3))
        assert len(history) == 4
        assert history.applied[-1] == Move(3, 3)

    def test_cursor_stays_in_bounds(self, history):
        for _ in range(10):
            history.undo()
            assert 0 <= history.cursor <= len(history)
        for _ in range(10):
            history.redo()
            assert 0 <= history.cursor <= len(history)

    def test_applied_excludes_undone(self, history):
        history.undo()
        assert history.applied == [Move(0, 0), Move(1, 0)]
        assert history.can_undo
        assert history.can_redo

    def test_clear(self, history):
        history.undo()
        history.clear()
        assert len(history) == 0
        assert history.cursor == 0
        assert not history.can_redo

    def test_repr(self, history):
        history.undo()
        assert repr(history) == "MoveHistory(length=3, cursor=1)"
