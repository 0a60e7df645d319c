"""Puzzle limits and default parameters.

Board and structure sizes are capped to keep the interactive grid and the
multiplication table display practical.
"""

import logging

logger = logging.getLogger(__name__)


MIN_BOARD_SIZE = 1
MAX_BOARD_SIZE = 32

MIN_ORDER = 2
MAX_ORDER = 64

DEFAULT_BOARD_SIZE = 4
DEFAULT_ORDER = 3
DEFAULT_SCRAMBLE_MOVES = 100

# Random cells sampled per scramble press before giving up
SCRAMBLE_RETRIES = 10


class PuzzleConfig:
    """Parameters for a new puzzle board."""

    def __init__(self,
                 board_size: int = DEFAULT_BOARD_SIZE,
                 order: int = DEFAULT_ORDER,
                 scramble_moves: int = DEFAULT_SCRAMBLE_MOVES,
                 strict: bool = True):
        """Initialize puzzle configuration.

        Args:
            board_size: Side length of the square board
            order: Size of the cyclic structure's carrier (rounded up to odd)
            scramble_moves: Number of random presses used by a scramble (0+)
            strict: Reject structures without unique square roots
        """
        self.board_size = max(MIN_BOARD_SIZE, min(MAX_BOARD_SIZE, board_size))
        order = max(3, min(MAX_ORDER - 1, order))
        if order % 2 == 0:
            logger.debug(f"Rounding even cyclic order {order} up to {order + 1}")
            order += 1
        self.order = order
        self.scramble_moves = max(0, scramble_moves)
        self.strict = strict

    def copy(self) -> 'PuzzleConfig':
        """Create a copy of the configuration."""
        return PuzzleConfig(
            board_size=self.board_size,
            order=self.order,
            scramble_moves=self.scramble_moves,
            strict=self.strict
        )

    def __repr__(self) -> str:
        return (f"PuzzleConfig(board_size={self.board_size}, order={self.order}, "
                f"scramble_moves={self.scramble_moves}, strict={self.strict})")
