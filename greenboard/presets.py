"""
Built-in puzzles.

Cyclic puzzles cover board sizes 2 through 6 with orders 3, 5 and 7. The
"test" puzzle runs on a small non-associative table.
"""

from typing import Optional
import logging

from .config import PuzzleConfig
from .core import CyclicStructure, PuzzleBoard, TableStructure

logger = logging.getLogger(__name__)


PRESETS = {
    "test": {
        "size": 4,
        "table": [[1, 0, 2], [0, 2, 1], [2, 1, 0]],
        "description": "Order 3 idempotent-free quasigroup, not associative",
    },
}

for _size in range(2, 7):
    for _order in (3, 5, 7):
        PRESETS[f"{_size}x{_size}, {_order}"] = {
            "size": _size,
            "order": _order,
            "description": f"{_size}x{_size} board, addition modulo {_order}",
        }


def build_board(config: Optional[PuzzleConfig] = None) -> PuzzleBoard:
    """Create a board over a cyclic structure from a configuration.

    Args:
        config: Puzzle parameters (defaults if None)

    Returns:
        PuzzleBoard: Fresh board with every cell at the init value
    """
    if config is None:
        config = PuzzleConfig()
    return PuzzleBoard(config.board_size, CyclicStructure(config.order), strict=config.strict)


def load_preset(name: str) -> PuzzleBoard:
    """Create a board for a named preset.

    Raises:
        KeyError: If no preset has that name
    """
    if name not in PRESETS:
        raise KeyError(f"Unknown preset {name!r}")

    preset = PRESETS[name]
    if "table" in preset:
        structure = TableStructure(preset["table"])
    else:
        structure = CyclicStructure(preset["order"])

    logger.debug(f"Loading preset {name!r}")
    return PuzzleBoard(preset["size"], structure)
