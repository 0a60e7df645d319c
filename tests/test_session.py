"""
Session Command Tests

Tests the command layer an interactive front end drives: status codes and
messages for every outcome, magma-mode gating of table edits, and new
games and presets.
"""

import pytest
import numpy as np

from greenboard.session import PuzzleSession, Status, STATUS_MESSAGES
from greenboard.config import PuzzleConfig
from greenboard.core import CyclicStructure, TableStructure, PuzzleBoard


SKEW = [[1, 0, 0], [0, 2, 0], [0, 0, 0]]
LEFT_PROJECTION = [[0, 0, 0], [1, 1, 1], [2, 2, 2]]


@pytest.fixture
def session():
    """Default session with a seeded generator."""
    return PuzzleSession(rng=np.random.default_rng(5))


@pytest.fixture
def magma_session(session):
    session.toggle_magma_mode()
    return session


class TestBoardCommands:
    """Test press, undo, redo and scramble outcomes."""

    def test_default_board(self, session):
        assert session.board.size == 4
        assert session.board.structure == CyclicStructure(3)
        assert session.status is Status.OK
        assert session.message == ""

    def test_press_forward_and_inverse(self, session):
        assert session.press(1, 1) is Status.OK
        assert session.board[1, 1] == 2
        assert session.press(1, 1, forward=False) is Status.OK
        assert session.board.is_solved()
        assert len(session.board.history) == 2

    def test_undo_redo_messages(self, session):
        assert session.undo() is Status.NO_UNDO
        assert session.message == "Nothing to undo"
        assert session.redo() is Status.NO_REDO
        assert session.message == "Nothing to redo"

        session.press(0, 0)
        assert session.undo() is Status.OK
        assert session.board.is_solved()
        assert session.redo() is Status.OK
        assert session.board[0, 0] == 2

    def test_failed_inverse_press(self, magma_session):
        """An inverse press on a table without roots reports no inverse."""
        assert magma_session.load_table([[1, 1], [1, 1]]) is Status.OK
        assert magma_session.press(0, 0, forward=False) is Status.NO_INVERSE
        assert magma_session.message == "No unique inverse exists"
        assert magma_session.board.is_solved()

    def test_scramble_uses_config(self):
        config = PuzzleConfig(board_size=3, order=5, scramble_moves=40)
        session = PuzzleSession(config=config, rng=np.random.default_rng(9))
        assert session.scramble() is Status.OK
        assert len(session.board.history) == 0

        other = PuzzleBoard(3, CyclicStructure(5))
        other.scramble(40, np.random.default_rng(9))
        np.testing.assert_array_equal(session.board.cells, other.cells)

    @pytest.mark.parametrize("x, y", [(4, 0), (0, 4), (-1, 0), (0, -3)])
    def test_press_off_board(self, session, x, y):
        """Off-board coordinates report a status and leave the board alone."""
        session.press(1, 1)
        before = session.board.cells
        assert session.press(x, y) is Status.OUT_OF_RANGE
        assert session.press(x, y, forward=False) is Status.OUT_OF_RANGE
        assert session.status is Status.OUT_OF_RANGE
        assert session.message == "Position is outside the board or table"
        np.testing.assert_array_equal(session.board.cells, before)
        assert len(session.board.history) == 1

    def test_reset(self, session):
        session.press(2, 2)
        assert session.reset() is Status.OK
        assert session.board.is_solved()


class TestGames:
    """Test starting new games and presets."""

    def test_new_game(self, session):
        assert session.new_game(5, 4) is Status.OK
        assert session.board.size == 5
        assert session.board.structure == CyclicStructure(5)
        assert session.config.order == 5

    def test_new_game_clamps(self, session):
        session.new_game(100, 1)
        assert session.board.size == 32
        assert session.board.structure.order() == 3

    def test_load_preset(self, session):
        assert session.load_preset("test") is Status.OK
        assert session.board.structure == TableStructure([[1, 0, 2], [0, 2, 1], [2, 1, 0]])

    def test_unknown_preset(self, session):
        board = session.board
        assert session.load_preset("9x9, 11") is Status.UNKNOWN_PRESET
        assert session.status is Status.UNKNOWN_PRESET
        assert session.message == "No such preset"
        assert session.board is board


class TestTableCommands:
    """Test table editing through the session."""

    def test_edits_locked_outside_magma_mode(self, session):
        for command in (lambda: session.edit_cell(0, 0),
                        lambda: session.move_row(0),
                        lambda: session.move_column(0),
                        session.transpose,
                        session.right_divide,
                        session.left_divide,
                        lambda: session.resize_table(1)):
            assert command() is Status.LOCKED
        assert session.message == "Enable magma mode to edit the table"
        assert session.board.structure == CyclicStructure(3)

    def test_toggle_magma_mode(self, session):
        assert session.toggle_magma_mode() is True
        assert session.toggle_magma_mode() is False

    def test_edit_cell_resets_board(self, magma_session):
        magma_session.press(1, 1)
        assert magma_session.edit_cell(0, 0) is Status.OK
        assert isinstance(magma_session.board.structure, TableStructure)
        assert magma_session.board.structure.mul(0, 0) == 1
        assert magma_session.board.is_solved()
        assert len(magma_session.board.history) == 0

    def test_edit_cell_admits_broken_diagonal(self, magma_session):
        """Magma mode keeps tables whose diagonal is not a permutation."""
        assert magma_session.edit_cell(1, 1) is Status.OK
        assert not magma_session.board.structure.has_unique_roots()

    def test_move_row_wraps(self, magma_session):
        assert magma_session.move_row(2, 1) is Status.OK
        np.testing.assert_array_equal(magma_session.board.structure.table(),
                                      [[2, 0, 1], [1, 2, 0], [0, 1, 2]])

    def test_move_column_backwards(self, magma_session):
        assert magma_session.move_column(0, -1) is Status.OK
        np.testing.assert_array_equal(magma_session.board.structure.table(),
                                      [[2, 1, 0], [0, 2, 1], [1, 0, 2]])

    @pytest.mark.parametrize("command", [
        lambda s: s.edit_cell(3, 0),
        lambda s: s.edit_cell(0, -1),
        lambda s: s.move_row(7),
        lambda s: s.move_column(-4),
    ])
    def test_table_edit_out_of_range(self, magma_session, command):
        assert command(magma_session) is Status.OUT_OF_RANGE
        assert magma_session.status is Status.OUT_OF_RANGE
        assert magma_session.board.structure == CyclicStructure(3)

    def test_transpose(self, magma_session):
        magma_session.load_table(SKEW)
        assert magma_session.transpose() is Status.OK
        assert magma_session.board.structure.mul(0, 2) == SKEW[2][0]

    def test_right_divide(self, magma_session):
        assert magma_session.right_divide() is Status.OK
        assert magma_session.board.structure.mul(0, 1) == 2

    def test_right_divide_fails(self, magma_session):
        magma_session.load_table(SKEW)
        assert magma_session.right_divide() is Status.NO_RIGHT_DIVISION
        assert magma_session.message == "Right division is not defined"
        assert magma_session.board.structure == TableStructure(SKEW)

    def test_left_divide_fails(self, magma_session):
        magma_session.load_table(LEFT_PROJECTION)
        assert magma_session.left_divide() is Status.NO_LEFT_DIVISION
        assert magma_session.message == "Left division is not defined"

    def test_resize_table(self, magma_session):
        assert magma_session.resize_table(1) is Status.OK
        assert magma_session.board.structure == TableStructure.lights_out(4)
        magma_session.resize_table(-10)
        assert magma_session.board.structure.order() == 2

    def test_load_table_strict_outside_magma_mode(self, session):
        assert session.load_table([[1, 1], [1, 1]]) is Status.INVALID
        assert session.message == "Invalid structure"
        assert session.board.structure == CyclicStructure(3)

    def test_load_malformed_table(self, magma_session):
        assert magma_session.load_table([[0, 5], [1, 0]]) is Status.INVALID


def test_every_status_has_a_message():
    assert set(STATUS_MESSAGES) == set(Status)
