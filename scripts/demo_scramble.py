#!/usr/bin/env python3
"""
Scramble-and-solve demonstration.

Builds a board, records a run of random presses as moves, then undoes every
move and verifies the board is back at its starting state. Redoing
everything must reproduce the scrambled board exactly.
"""

import sys
import os
import logging

import numpy as np

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from greenboard.config import PuzzleConfig
from greenboard.core import Move
from greenboard.presets import PRESETS, build_board, load_preset


def run_demo(board, moves=20, seed=None):
    """Apply random recorded moves, undo them all, redo them all.

    Returns:
        Dictionary of round-trip results
    """
    rng = np.random.default_rng(seed)
    initial = board.cells

    logger.info(f"=== {board.size}x{board.size} board over {board.structure!r} ===")
    logger.info(f"Initial board:\n{board}")

    for _ in range(moves):
        move = Move(int(rng.integers(board.size)), int(rng.integers(board.size)),
                    int(rng.choice([1, -1])))
        board.apply_move(move)
    scrambled = board.cells
    logger.info(f"After {moves} moves:\n{board}")

    undone = 0
    while board.history.can_undo:
        board.undo()
        undone += 1
    restored = bool(np.array_equal(board.cells, initial))
    logger.info(f"Undid {undone} moves, initial state restored: {'YES' if restored else 'NO'}")

    while board.history.can_redo:
        board.redo()
    replayed = bool(np.array_equal(board.cells, scrambled))
    logger.info(f"Redid {undone} moves, scrambled state restored: {'YES' if replayed else 'NO'}")

    return {
        "moves": moves,
        "undone": undone,
        "restored": restored,
        "replayed": replayed,
    }


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Scramble a board and solve it by undoing")
    parser.add_argument("--size", type=int, default=4, help="Board size (square)")
    parser.add_argument("--order", type=int, default=5, help="Cyclic order (odd)")
    parser.add_argument("--preset", choices=sorted(PRESETS), help="Use a built-in preset instead")
    parser.add_argument("--moves", type=int, default=20, help="Number of random moves")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    try:
        if args.preset:
            board = load_preset(args.preset)
        else:
            board = build_board(PuzzleConfig(board_size=args.size, order=args.order))

        results = run_demo(board, moves=args.moves, seed=args.seed)
        if not (results["restored"] and results["replayed"]):
            logger.error("Round trip failed")
            sys.exit(1)

        print(f"\nRound trip of {results['moves']} moves verified")

    except Exception as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
