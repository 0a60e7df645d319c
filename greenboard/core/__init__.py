"""
greenboard core: structures, transforms, history and the board.

Algebraic structures define how cells combine, transforms derive new
multiplication tables, and the board applies reversible cross-shaped presses
with linear undo/redo.
"""

from .errors import (
    PuzzleError,
    UndoUnavailable,
    RedoUnavailable,
    QuotientUndefined,
    RootUndefined,
    InvalidStructure,
)
from .structure import AlgebraicStructure, CyclicStructure, TableStructure
from .history import Move, MoveHistory
from .board import PuzzleBoard, check_admissible
from . import transforms

__all__ = [
    'PuzzleError',
    'UndoUnavailable',
    'RedoUnavailable',
    'QuotientUndefined',
    'RootUndefined',
    'InvalidStructure',
    'AlgebraicStructure',
    'CyclicStructure',
    'TableStructure',
    'Move',
    'MoveHistory',
    'PuzzleBoard',
    'check_admissible',
    'transforms',
]
