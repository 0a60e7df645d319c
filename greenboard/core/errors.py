"""Failure taxonomy for board, history and structure operations.

Every puzzle outcome a caller is expected to recover from derives from
PuzzleError. Malformed input (bad tables, bad board sizes) is reported as
InvalidStructure, which is also a ValueError.
"""

from typing import Optional, Tuple


class PuzzleError(Exception):
    """Base class for recoverable puzzle outcomes."""


class UndoUnavailable(PuzzleError):
    """Raised when undo() is called with nothing left to undo."""

    def __init__(self, message: str = "Nothing to undo"):
        super().__init__(message)


class RedoUnavailable(PuzzleError):
    """Raised when redo() is called with nothing left to redo."""

    def __init__(self, message: str = "Nothing to redo"):
        super().__init__(message)


class QuotientUndefined(PuzzleError):
    """A quotient required by a press or transform does not exist.

    Attributes:
        side: "right" for solving mul(x, b) = a, "left" for mul(a, x) = b
        operands: The (a, b) pair that had no solution, if known
    """

    def __init__(self, side: str = "right", operands: Optional[Tuple[int, int]] = None,
                 message: Optional[str] = None):
        self.side = side
        self.operands = operands
        if message is None:
            message = f"{side.capitalize()} quotient undefined"
            if operands is not None:
                message += f" for {operands}"
        super().__init__(message)


class RootUndefined(QuotientUndefined):
    """No diagonal entry of the table equals the requested element."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(side="right", operands=None,
                         message=f"No square root for element {value}")


class InvalidStructure(ValueError):
    """Raised for malformed structures or structures rejected by a board."""
