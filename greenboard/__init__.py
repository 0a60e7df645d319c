"""
greenboard: a Lights-Out puzzle over finite algebraic structures.

Each cell holds an element of a structure. Pressing a cell multiplies it and
its orthogonal neighbours by the pressed value. Every press can be undone.
"""

from .config import PuzzleConfig
from .core import (
    AlgebraicStructure,
    CyclicStructure,
    TableStructure,
    Move,
    MoveHistory,
    PuzzleBoard,
    PuzzleError,
    UndoUnavailable,
    RedoUnavailable,
    QuotientUndefined,
    RootUndefined,
    InvalidStructure,
)
from .presets import PRESETS, build_board, load_preset
from .session import PuzzleSession, Status, STATUS_MESSAGES

__version__ = "0.1.0"

__all__ = [
    'PuzzleConfig',
    'AlgebraicStructure',
    'CyclicStructure',
    'TableStructure',
    'Move',
    'MoveHistory',
    'PuzzleBoard',
    'PuzzleError',
    'UndoUnavailable',
    'RedoUnavailable',
    'QuotientUndefined',
    'RootUndefined',
    'InvalidStructure',
    'PRESETS',
    'build_board',
    'load_preset',
    'PuzzleSession',
    'Status',
    'STATUS_MESSAGES',
]
