"""Finite algebraic structures that drive the puzzle.

A structure is a binary operation over the carrier [0, order) together with
one-sided quotients and a square root. The board only ever talks to this
capability set, so a closed-form structure (CyclicStructure) and an explicit
multiplication table (TableStructure) are interchangeable. Structures are
immutable once constructed.
"""

import numpy as np
from typing import List, Optional, Sequence
import logging

from ..config import MIN_ORDER, MAX_ORDER
from .errors import InvalidStructure, RootUndefined

logger = logging.getLogger(__name__)


class AlgebraicStructure:
    """Multiplication with right/left quotients and square roots over [0, order).

    Subclasses implement order, mul, right_quotient, left_quotient and root.
    The remaining helpers are derived from those.
    """

    def order(self) -> int:
        """Number of elements in the carrier."""
        raise NotImplementedError

    def mul(self, a: int, b: int) -> int:
        """Return a * b."""
        raise NotImplementedError

    def right_quotient(self, a: int, b: int) -> Optional[int]:
        """Solve mul(x, b) == a for x, or return None if no x exists."""
        raise NotImplementedError

    def left_quotient(self, a: int, b: int) -> Optional[int]:
        """Solve mul(a, x) == b for x, or return None if no x exists."""
        raise NotImplementedError

    def root(self, a: int) -> int:
        """Return c such that mul(c, c) == a."""
        raise NotImplementedError

    def identity(self) -> Optional[int]:
        """Identity element, if the structure has one."""
        return None

    def init_value(self) -> int:
        """Value that fresh board cells start at."""
        return 0

    def display(self, a: int) -> str:
        """Human-readable label for a carrier element."""
        return str(a)

    def elements(self) -> range:
        return range(self.order())

    def table(self) -> np.ndarray:
        """Full multiplication table as a fresh (order, order) int64 array."""
        n = self.order()
        return np.array([[self.mul(a, b) for b in range(n)] for a in range(n)],
                        dtype=np.int64)

    def right_division_table(self) -> List[List[Optional[int]]]:
        """Entry (a, b) is right_quotient(a, b), None where undefined."""
        return [[self.right_quotient(a, b) for b in self.elements()]
                for a in self.elements()]

    def left_division_table(self) -> List[List[Optional[int]]]:
        """Entry (a, b) is left_quotient(a, b), None where undefined."""
        return [[self.left_quotient(a, b) for b in self.elements()]
                for a in self.elements()]

    def is_quasigroup(self) -> bool:
        """True if every row and every column of the table is a permutation."""
        table = self.table()
        n = self.order()
        for i in range(n):
            if np.unique(table[i, :]).size < n or np.unique(table[:, i]).size < n:
                return False
        return True

    def has_unique_roots(self) -> bool:
        """True if the diagonal is a permutation, i.e. every element has exactly one root."""
        return np.unique(np.diagonal(self.table())).size == self.order()

    def _check_element(self, a: int) -> None:
        if not (0 <= a < self.order()):
            raise ValueError(f"Element {a} outside carrier [0, {self.order()})")

    def __eq__(self, other: object) -> bool:
        """Structures are equal when their multiplication tables are equal."""
        if not isinstance(other, AlgebraicStructure):
            return False
        return (self.order() == other.order() and
                np.array_equal(self.table(), other.table()))

    def __hash__(self) -> int:
        return hash((self.order(), self.table().tobytes()))

    def __str__(self) -> str:
        """Multiplication table using display labels."""
        labels = [self.display(a) for a in self.elements()]
        width = max(len(label) for label in labels)
        table = self.table()

        lines = ['* | ' + ' '.join(label.rjust(width) for label in labels)]
        lines.append('-' * len(lines[0]))
        for a in self.elements():
            row = ' '.join(self.display(int(c)).rjust(width) for c in table[a])
            lines.append(f"{labels[a].rjust(width)} | {row}")
        return '\n'.join(lines)


class CyclicStructure(AlgebraicStructure):
    """Addition modulo an odd order.

    Odd order makes 2 invertible, so every element has the unique root
    a * (order + 1) / 2.
    """

    def __init__(self, order: int):
        """Initialize the cyclic structure.

        Args:
            order: Carrier size, odd and at least 3

        Raises:
            InvalidStructure: If order is even, too small or too large
        """
        if order < 3 or order > MAX_ORDER:
            raise InvalidStructure(f"Cyclic order must be between 3 and {MAX_ORDER}, got {order}")
        if order % 2 == 0:
            raise InvalidStructure(f"Cyclic order must be odd to have square roots, got {order}")
        self._order = order

    def order(self) -> int:
        return self._order

    def mul(self, a: int, b: int) -> int:
        self._check_element(a)
        self._check_element(b)
        return (a + b) % self._order

    def right_quotient(self, a: int, b: int) -> Optional[int]:
        self._check_element(a)
        self._check_element(b)
        return (a - b) % self._order

    def left_quotient(self, a: int, b: int) -> Optional[int]:
        return self.right_quotient(b, a)

    def root(self, a: int) -> int:
        self._check_element(a)
        return (a * (self._order + 1) // 2) % self._order

    def identity(self) -> Optional[int]:
        return 0

    def init_value(self) -> int:
        # Deliberately not the identity so a fresh board is not trivially solved
        return 1

    def table(self) -> np.ndarray:
        carrier = np.arange(self._order, dtype=np.int64)
        return np.add.outer(carrier, carrier) % self._order

    def __repr__(self) -> str:
        return f"CyclicStructure(order={self._order})"


class TableStructure(AlgebraicStructure):
    """Structure given by an explicit multiplication table.

    The table must be square with entries in [0, order), but it does not have
    to be a quasigroup. Quotients scan the table and return the first match,
    so they may be None (no solution) or pick one of several solutions.
    """

    def __init__(self, table: Sequence[Sequence[int]]):
        """Initialize from a square table.

        Args:
            table: Nested sequence or 2D integer array, table[a][b] == mul(a, b)

        Raises:
            InvalidStructure: If the table is not a square integer matrix over [0, order)
        """
        try:
            raw = np.asarray(table)
        except ValueError as exc:
            raise InvalidStructure(f"Table is not a rectangular matrix: {exc}") from exc

        if raw.ndim != 2 or raw.shape[0] != raw.shape[1]:
            raise InvalidStructure(f"Table must be square, got shape {raw.shape}")
        if raw.size and raw.dtype.kind not in 'iu':
            raise InvalidStructure(f"Table entries must be integers, got dtype {raw.dtype}")

        order = raw.shape[0]
        if order < MIN_ORDER or order > MAX_ORDER:
            raise InvalidStructure(f"Table order must be between {MIN_ORDER} and {MAX_ORDER}, got {order}")
        if raw.min() < 0 or raw.max() >= order:
            raise InvalidStructure(f"Table entries must lie in [0, {order})")

        self._table = raw.astype(np.int64)  # always a copy
        self._table.setflags(write=False)

    @classmethod
    def lights_out(cls, order: int) -> 'TableStructure':
        """Table with mul(a, b) = (a + 1) mod order for every b.

        Args:
            order: Carrier size (2+)

        Returns:
            TableStructure: Row a is constant a + 1, so presses step values forward

        Raises:
            InvalidStructure: If order is outside the supported range
        """
        if order < MIN_ORDER:
            raise InvalidStructure(f"Table order must be between {MIN_ORDER} and {MAX_ORDER}, got {order}")
        successor = (np.arange(order, dtype=np.int64) + 1) % order
        return cls(np.repeat(successor[:, np.newaxis], order, axis=1))

    @classmethod
    def from_structure(cls, structure: AlgebraicStructure) -> 'TableStructure':
        """Materialize any structure as an explicit table."""
        return cls(structure.table())

    def order(self) -> int:
        return self._table.shape[0]

    def mul(self, a: int, b: int) -> int:
        self._check_element(a)
        self._check_element(b)
        return int(self._table[a, b])

    def right_quotient(self, a: int, b: int) -> Optional[int]:
        self._check_element(a)
        self._check_element(b)
        hits = np.flatnonzero(self._table[:, b] == a)
        return int(hits[0]) if hits.size else None

    def left_quotient(self, a: int, b: int) -> Optional[int]:
        self._check_element(a)
        self._check_element(b)
        hits = np.flatnonzero(self._table[a, :] == b)
        return int(hits[0]) if hits.size else None

    def root(self, a: int) -> int:
        """Return the first c on the diagonal with mul(c, c) == a.

        Raises:
            RootUndefined: If no diagonal entry equals a
        """
        self._check_element(a)
        hits = np.flatnonzero(np.diagonal(self._table) == a)
        if not hits.size:
            raise RootUndefined(a)
        return int(hits[0])

    def identity(self) -> Optional[int]:
        carrier = np.arange(self.order())
        for e in range(self.order()):
            if np.array_equal(self._table[e, :], carrier) and np.array_equal(self._table[:, e], carrier):
                return e
        return None

    def display(self, a: int) -> str:
        return str(a + 1)

    def table(self) -> np.ndarray:
        return self._table.copy()

    def __repr__(self) -> str:
        return f"TableStructure(order={self.order()}, table={self._table.tolist()})"
