"""
Command layer between an input front end and the puzzle board.

A PuzzleSession turns user commands (presses, undo/redo, table edits) into
board and transform calls, and reports every outcome as a Status with a
short message suitable for a status bar. Table editing is only available in
magma mode, where structures without unique square roots are admitted.
"""

from enum import Enum
from typing import Callable, Optional, Sequence
import logging

import numpy as np

from .config import MIN_ORDER, MAX_ORDER, PuzzleConfig
from .core import (
    AlgebraicStructure,
    InvalidStructure,
    Move,
    PuzzleBoard,
    QuotientUndefined,
    RedoUnavailable,
    TableStructure,
    UndoUnavailable,
    transforms,
)
from .presets import build_board, load_preset

logger = logging.getLogger(__name__)


class Status(Enum):
    """Outcome of a session command."""
    OK = 0
    NO_UNDO = 1
    NO_REDO = 2
    NO_INVERSE = 3
    NO_RIGHT_DIVISION = 4
    NO_LEFT_DIVISION = 5
    LOCKED = 6
    INVALID = 7
    OUT_OF_RANGE = 8
    UNKNOWN_PRESET = 9


STATUS_MESSAGES = {
    Status.OK: "",
    Status.NO_UNDO: "Nothing to undo",
    Status.NO_REDO: "Nothing to redo",
    Status.NO_INVERSE: "No unique inverse exists",
    Status.NO_RIGHT_DIVISION: "Right division is not defined",
    Status.NO_LEFT_DIVISION: "Left division is not defined",
    Status.LOCKED: "Enable magma mode to edit the table",
    Status.INVALID: "Invalid structure",
    Status.OUT_OF_RANGE: "Position is outside the board or table",
    Status.UNKNOWN_PRESET: "No such preset",
}


class PuzzleSession:
    """One puzzle board plus the state an interactive front end needs.

    Attributes:
        board: Active puzzle board
        config: Parameters used for new games and scrambles
        magma_mode: Whether table edits are allowed
        status: Outcome of the last command
    """

    def __init__(self,
                 board: Optional[PuzzleBoard] = None,
                 config: Optional[PuzzleConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        """Initialize a session.

        Args:
            board: Board to play on (built from config if None)
            config: Puzzle parameters (defaults if None)
            rng: Random generator for scrambles (fresh default_rng if None)
        """
        self.config = config or PuzzleConfig()
        self.board = board if board is not None else build_board(self.config)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.magma_mode = False
        self.status = Status.OK

    @property
    def message(self) -> str:
        return STATUS_MESSAGES[self.status]

    def _finish(self, status: Status) -> Status:
        self.status = status
        if status is not Status.OK:
            logger.info(f"{status.name}: {STATUS_MESSAGES[status]}")
        return status

    # Board commands

    def press(self, x: int, y: int, forward: bool = True) -> Status:
        """Press the cell at (x, y), forward or inverse."""
        try:
            move = Move(x, y) if forward else Move(x, y).inverse()
            self.board.apply_move(move)
        except (IndexError, ValueError):
            return self._finish(Status.OUT_OF_RANGE)
        except QuotientUndefined:
            return self._finish(Status.NO_INVERSE)
        return self._finish(Status.OK)

    def undo(self) -> Status:
        try:
            self.board.undo()
        except UndoUnavailable:
            return self._finish(Status.NO_UNDO)
        except QuotientUndefined:
            return self._finish(Status.NO_INVERSE)
        return self._finish(Status.OK)

    def redo(self) -> Status:
        try:
            self.board.redo()
        except RedoUnavailable:
            return self._finish(Status.NO_REDO)
        except QuotientUndefined:
            return self._finish(Status.NO_INVERSE)
        return self._finish(Status.OK)

    def reset(self) -> Status:
        self.board.reset()
        return self._finish(Status.OK)

    def scramble(self, moves: Optional[int] = None) -> Status:
        """Reset and apply random presses (config.scramble_moves if moves is None)."""
        if moves is None:
            moves = self.config.scramble_moves
        self.board.scramble(moves, self.rng)
        return self._finish(Status.OK)

    def new_game(self, size: int, order: int) -> Status:
        """Start a cyclic puzzle; out-of-range values are clamped by PuzzleConfig."""
        self.config = PuzzleConfig(size, order, self.config.scramble_moves, self.config.strict)
        self.board = build_board(self.config)
        logger.info(f"New game: {self.board.size}x{self.board.size}, order {self.config.order}")
        return self._finish(Status.OK)

    def load_preset(self, name: str) -> Status:
        """Replace the board with a named preset, if one has that name."""
        try:
            self.board = load_preset(name)
        except KeyError:
            return self._finish(Status.UNKNOWN_PRESET)
        logger.info(f"Loaded preset {name!r}")
        return self._finish(Status.OK)

    # Table commands

    def toggle_magma_mode(self) -> bool:
        self.magma_mode = not self.magma_mode
        logger.info(f"Magma mode {'on' if self.magma_mode else 'off'}")
        return self.magma_mode

    def load_table(self, table: Sequence[Sequence[int]]) -> Status:
        """Replace the structure with an explicit table.

        Outside magma mode the table must give every element a unique root.
        """
        try:
            structure = TableStructure(table)
            self.board.replace_structure(structure, strict=not self.magma_mode)
        except InvalidStructure:
            return self._finish(Status.INVALID)
        return self._finish(Status.OK)

    def _edit(self, build: Callable[[AlgebraicStructure], AlgebraicStructure]) -> Status:
        if not self.magma_mode:
            return self._finish(Status.LOCKED)
        try:
            structure = build(self.board.structure)
        except IndexError:
            return self._finish(Status.OUT_OF_RANGE)
        except QuotientUndefined as exc:
            if exc.side == "left":
                return self._finish(Status.NO_LEFT_DIVISION)
            return self._finish(Status.NO_RIGHT_DIVISION)
        self.board.replace_structure(structure, strict=False)
        return self._finish(Status.OK)

    def edit_cell(self, row: int, col: int) -> Status:
        return self._edit(lambda s: transforms.edit_cell(s, row, col))

    def move_row(self, i: int, step: int = 1) -> Status:
        """Swap row i with row i + step, wrapping around the table."""
        return self._edit(lambda s: transforms.swap_rows(s, i, (i + step) % s.order()))

    def move_column(self, j: int, step: int = 1) -> Status:
        """Swap column j with column j + step, wrapping around the table."""
        return self._edit(lambda s: transforms.swap_columns(s, j, (j + step) % s.order()))

    def transpose(self) -> Status:
        return self._edit(transforms.transpose)

    def right_divide(self) -> Status:
        """Replace the table with its right-quotient table."""
        return self._edit(transforms.right_quotient_table)

    def left_divide(self) -> Status:
        """Replace the table with its left-quotient table."""
        return self._edit(transforms.left_quotient_table)

    def resize_table(self, delta: int) -> Status:
        """Switch to a lights-out table with delta more (or fewer) elements."""
        def build(s: AlgebraicStructure) -> AlgebraicStructure:
            order = max(MIN_ORDER, min(MAX_ORDER, s.order() + delta))
            return TableStructure.lights_out(order)
        return self._edit(build)
