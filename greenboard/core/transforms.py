"""Derived structures built from an existing multiplication table.

Every transform reads the source structure, builds a fresh table and returns
a new TableStructure. Sources are never modified, and a Cyclic source is
materialized as a table first.
"""

import numpy as np
from typing import Callable, Optional
import logging

from .structure import AlgebraicStructure, TableStructure
from .errors import QuotientUndefined

logger = logging.getLogger(__name__)


def _check_index(structure: AlgebraicStructure, index: int, axis: str) -> None:
    if not (0 <= index < structure.order()):
        raise IndexError(f"{axis.capitalize()} {index} out of range for order {structure.order()}")


def edit_cell(structure: AlgebraicStructure, row: int, col: int) -> TableStructure:
    """Increment the (row, col) entry modulo the order.

    Args:
        structure: Source structure
        row: Left operand of the entry
        col: Right operand of the entry

    Returns:
        TableStructure: Copy of the source with one entry stepped forward

    Raises:
        IndexError: If row or col is outside the carrier
    """
    _check_index(structure, row, "row")
    _check_index(structure, col, "column")
    table = structure.table()
    table[row, col] = (table[row, col] + 1) % structure.order()
    return TableStructure(table)


def swap_rows(structure: AlgebraicStructure, i: int, j: int) -> TableStructure:
    """Exchange rows i and j of the multiplication table."""
    _check_index(structure, i, "row")
    _check_index(structure, j, "row")
    table = structure.table()
    table[[i, j], :] = table[[j, i], :]
    return TableStructure(table)


def swap_columns(structure: AlgebraicStructure, i: int, j: int) -> TableStructure:
    """Exchange columns i and j of the multiplication table."""
    _check_index(structure, i, "column")
    _check_index(structure, j, "column")
    table = structure.table()
    table[:, [i, j]] = table[:, [j, i]]
    return TableStructure(table)


def transpose(structure: AlgebraicStructure) -> TableStructure:
    """Structure with the opposite multiplication, mul'(a, b) = mul(b, a)."""
    return TableStructure(structure.table().T)


def _quotient_table(structure: AlgebraicStructure,
                    quotient: Callable[[int, int], Optional[int]],
                    side: str) -> TableStructure:
    n = structure.order()
    table = np.zeros((n, n), dtype=np.int64)
    for a in range(n):
        for b in range(n):
            c = quotient(a, b)
            if c is None:
                logger.debug(f"No total {side} quotient: ({a}, {b}) has no solution")
                raise QuotientUndefined(side=side, operands=(a, b))
            table[a, b] = c
    return TableStructure(table)


def right_quotient_table(structure: AlgebraicStructure) -> TableStructure:
    """Structure whose (a, b) entry is right_quotient(a, b) of the source.

    Raises:
        QuotientUndefined: If any pair has no right quotient
    """
    return _quotient_table(structure, structure.right_quotient, "right")


def left_quotient_table(structure: AlgebraicStructure) -> TableStructure:
    """Structure whose (a, b) entry is left_quotient(a, b) of the source.

    Raises:
        QuotientUndefined: If any pair has no left quotient
    """
    return _quotient_table(structure, structure.left_quotient, "left")
