"""Moves and the linear undo/redo history.

The history is an append-only list of applied moves plus a cursor counting
how many trailing entries are currently undone. Pushing a new move while
some moves are undone discards that undone tail.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """A press at (x, y) with signed magnitude d.

    d > 0 presses forward d times, d < 0 presses inverse |d| times and
    d == 0 does nothing.
    """

    x: int
    y: int
    d: int = 1

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Move position ({self.x}, {self.y}) must be non-negative")

    def inverse(self) -> 'Move':
        """Same position, negated magnitude."""
        return Move(self.x, self.y, -self.d)

    @property
    def loc(self) -> Tuple[int, int]:
        return (self.x, self.y)


class MoveHistory:
    """Undo/redo stack with truncation of the redo branch on push.

    Attributes:
        cursor: Number of trailing moves currently undone (0 <= cursor <= len)
    """

    def __init__(self):
        self._moves: List[Move] = []
        self.cursor = 0

    def push(self, move: Move) -> None:
        """Record an applied move, discarding any undone moves first."""
        if self.cursor:
            logger.debug(f"Discarding {self.cursor} undone move(s) from history")
            del self._moves[len(self._moves) - self.cursor:]
            self.cursor = 0
        self._moves.append(move)

    def undo(self) -> Optional[Move]:
        """Step back one move.

        Returns:
            The most recent move still in effect, or None if there is none
        """
        if self.cursor < len(self._moves):
            self.cursor += 1
            return self._moves[len(self._moves) - self.cursor]
        return None

    def redo(self) -> Optional[Move]:
        """Step forward one move.

        Returns:
            The earliest undone move, or None if nothing is undone
        """
        if self.cursor > 0:
            move = self._moves[len(self._moves) - self.cursor]
            self.cursor -= 1
            return move
        return None

    def clear(self) -> None:
        self._moves.clear()
        self.cursor = 0

    @property
    def can_undo(self) -> bool:
        return self.cursor < len(self._moves)

    @property
    def can_redo(self) -> bool:
        return self.cursor > 0

    @property
    def applied(self) -> List[Move]:
        """Moves currently in effect, oldest first."""
        return self._moves[:len(self._moves) - self.cursor]

    def __len__(self) -> int:
        return len(self._moves)

    def __repr__(self) -> str:
        return f"MoveHistory(length={len(self._moves)}, cursor={self.cursor})"
