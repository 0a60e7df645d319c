"""Puzzle board state machine.

The board holds a size x size grid of carrier elements, the active algebraic
structure and the move history. Pressing a cell multiplies it and its
orthogonal neighbours by the pressed cell's value. All grid updates are
built on a scratch copy and committed only when every affected cell
succeeded, so a failed press never leaves a partially updated cross.
"""

import numpy as np
from typing import Iterator, List, Optional, Tuple
import logging

from ..config import MIN_BOARD_SIZE, MAX_BOARD_SIZE, SCRAMBLE_RETRIES
from .structure import AlgebraicStructure
from .history import Move, MoveHistory
from .errors import (
    InvalidStructure,
    PuzzleError,
    QuotientUndefined,
    RedoUnavailable,
    UndoUnavailable,
)

logger = logging.getLogger(__name__)


def check_admissible(structure: AlgebraicStructure) -> None:
    """Reject structures in which some element lacks a unique square root.

    Raises:
        InvalidStructure: If the diagonal of the table is not a permutation
    """
    if not structure.has_unique_roots():
        raise InvalidStructure(f"{structure!r} does not give every element a unique square root")


class PuzzleBoard:
    """Square board of carrier elements driven by an algebraic structure.

    Attributes:
        size: Side length of the board
        state: (size, size) int64 array, state[y, x] is the cell at column x, row y
        history: Applied moves available for undo/redo
    """

    def __init__(self, size: int, structure: AlgebraicStructure, strict: bool = True):
        """Initialize a board with every cell at the structure's init value.

        Args:
            size: Side length (cells)
            structure: Structure the board takes ownership of
            strict: Require every element to have a unique square root

        Raises:
            InvalidStructure: If size is outside the supported range, or
                strict and the structure is not admissible
        """
        if not (MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE):
            raise InvalidStructure(f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {size}")
        if strict:
            check_admissible(structure)

        self.size = size
        self._structure = structure
        self.state = np.full((size, size), structure.init_value(), dtype=np.int64)
        self.history = MoveHistory()

        logger.debug(f"Created {size}x{size} board over {structure!r}")

    @property
    def structure(self) -> AlgebraicStructure:
        return self._structure

    @property
    def cells(self) -> np.ndarray:
        """Copy of the grid, indexed [y, x]."""
        return self.state.copy()

    def get(self, x: int, y: int) -> int:
        """Get the value at column x, row y.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_position(x, y)
        return int(self.state[y, x])

    def display(self, value: int) -> str:
        return self._structure.display(value)

    def is_solved(self) -> bool:
        """True if every cell is back at the init value."""
        return bool(np.all(self.state == self._structure.init_value()))

    def _check_position(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.size}x{self.size} board")

    def _cross(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Pressed cell followed by its in-bounds orthogonal neighbours."""
        yield x, y
        for dx, dy in ((0, 1), (0, -1), (1, 0), (-1, 0)):
            nx, ny = x + dx, y + dy
            # Edges do not wrap
            if 0 <= nx < self.size and 0 <= ny < self.size:
                yield nx, ny

    def _op(self, value: int, val: int, times: int) -> int:
        """Multiply value by val times times, or right-divide -times times."""
        if times >= 0:
            for _ in range(times):
                value = self._structure.mul(value, val)
            return value

        for _ in range(-times):
            quotient = self._structure.right_quotient(value, val)
            if quotient is None:
                raise QuotientUndefined(side="right", operands=(value, val))
            value = quotient
        return value

    def press(self, move: Move) -> None:
        """Apply a press without touching the history.

        Forward presses multiply by the pressed cell's value. Inverse presses
        right-divide by its square root, which undoes a forward press.

        Args:
            move: Position and signed magnitude

        Raises:
            IndexError: If the position is off the board
            QuotientUndefined: If a required quotient or root does not exist
        """
        x, y, d = move.x, move.y, move.d
        self._check_position(x, y)

        current = int(self.state[y, x])
        try:
            val = current if d >= 0 else self._structure.root(current)
            new_state = self.state.copy()
            for cx, cy in self._cross(x, y):
                new_state[cy, cx] = self._op(int(new_state[cy, cx]), val, d)
        except QuotientUndefined as exc:
            logger.debug(f"Press {move} aborted: {exc}")
            raise

        self.state = new_state

    def apply_move(self, move: Move) -> None:
        """Press and record the move. Zero-magnitude moves are ignored.

        Raises:
            IndexError: If the position is off the board
            QuotientUndefined: If the press fails (nothing is recorded)
        """
        if move.d == 0:
            return
        self.press(move)
        self.history.push(move)

    def undo(self) -> None:
        """Reverse the most recent applied move.

        Raises:
            UndoUnavailable: If there is nothing to undo
            QuotientUndefined: If the inverse press fails (history is unchanged)
        """
        move = self.history.undo()
        if move is None:
            raise UndoUnavailable()
        try:
            self.press(move.inverse())
        except PuzzleError:
            self.history.redo()
            raise

    def redo(self) -> None:
        """Re-apply the most recently undone move.

        Raises:
            RedoUnavailable: If there is nothing to redo
            QuotientUndefined: If the press fails (history is unchanged)
        """
        move = self.history.redo()
        if move is None:
            raise RedoUnavailable()
        try:
            self.press(move)
        except PuzzleError:
            self.history.undo()
            raise

    def random_move(self, rng: np.random.Generator) -> Optional[Move]:
        """Forward-press a uniformly random cell, without recording it.

        Returns:
            The move pressed, or None if it could not be applied
        """
        move = Move(int(rng.integers(self.size)), int(rng.integers(self.size)))
        try:
            self.press(move)
        except QuotientUndefined:
            logger.debug(f"Skipped random move {move}")
            return None
        return move

    def scramble(self, moves: int, rng: Optional[np.random.Generator] = None) -> List[Move]:
        """Reset, then apply the given number of random forward presses.

        A press that fails is re-sampled, up to SCRAMBLE_RETRIES draws per
        press. If every draw for a press fails the scramble stops early.

        Returns:
            The presses that were applied, in order
        """
        if rng is None:
            rng = np.random.default_rng()
        self.reset()

        applied: List[Move] = []
        while len(applied) < moves:
            for _ in range(SCRAMBLE_RETRIES):
                move = self.random_move(rng)
                if move is not None:
                    applied.append(move)
                    break
            else:
                logger.warning(f"Scramble stopped after {len(applied)} of {moves} presses: "
                               f"no press succeeded in {SCRAMBLE_RETRIES} draws")
                break

        logger.debug(f"Scrambled {self.size}x{self.size} board with {len(applied)} presses")
        return applied

    def reset(self) -> None:
        """Refill the grid with the init value and clear the history."""
        self.state = np.full((self.size, self.size), self._structure.init_value(), dtype=np.int64)
        self.history.clear()
        logger.debug(f"Reset {self.size}x{self.size} board to {self._structure.init_value()}")

    def replace_structure(self, structure: AlgebraicStructure, strict: bool = True) -> None:
        """Swap in a new structure and reset the board.

        Raises:
            InvalidStructure: If strict and the structure is not admissible
                (the board is left unchanged)
        """
        if strict:
            check_admissible(structure)
        self._structure = structure
        self.reset()
        logger.debug(f"Board structure replaced with {structure!r}")

    def __getitem__(self, key: Tuple[int, int]) -> int:
        """Access a cell using board[x, y] syntax."""
        x, y = key
        return self.get(x, y)

    def __str__(self) -> str:
        """Grid of display labels, one row per line."""
        labels = [[self.display(int(v)) for v in row] for row in self.state]
        width = max(len(label) for row in labels for label in row)
        return '\n'.join(' '.join(label.rjust(width) for label in row) for row in labels)

    def __repr__(self) -> str:
        return (f"PuzzleBoard({self.size}x{self.size}, structure={self._structure!r}, "
                f"history={self.history!r})")
