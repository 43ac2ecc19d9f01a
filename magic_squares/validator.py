"""Magic-square checks.

``validate`` is the pure yes/no predicate used by the dispatcher's
self-check; ``line_sums`` reports every row, column and diagonal total so a
failing square can be diagnosed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np

from .square import magic_constant


def _as_board(n: int, cells) -> np.ndarray | None:
    """Return ``cells`` as an int64 n×n board, or None when it cannot be one."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        return None
    try:
        flat = np.asarray(cells)
    except (TypeError, ValueError):
        # ragged nesting
        return None
    if flat.size != n * n:
        return None
    if flat.dtype.kind not in "iu":
        return None
    return flat.reshape(n, n)


def validate(n: int, cells: Sequence[int]) -> bool:
    """
    Return ``True`` when ``cells`` (row-major, length n²) is a magic square.

    Checks, stopping at the first failure:
    length, permutation of 1..n², row sums, column sums, both diagonals.
    The input is never modified.
    """
    board = _as_board(n, cells)
    if board is None:
        return False

    size = n * n
    if board.min() < 1 or board.max() > size:
        return False
    board = board.astype(np.int64)

    # presence count, O(n²)
    counts = np.bincount(board.ravel(), minlength=size + 1)
    if np.any(counts[1:] != 1):
        return False

    tgt = magic_constant(n)
    if np.any(board.sum(axis=1) != tgt):
        return False
    if np.any(board.sum(axis=0) != tgt):
        return False
    if board.trace() != tgt or np.fliplr(board).trace() != tgt:
        return False
    return True


@dataclass
class LineSums:
    """Totals of every line of a square."""

    order: int
    magic_constant: int
    row_sums: List[int]
    column_sums: List[int]
    diagonal_sums: List[int]

    @property
    def is_magic(self) -> bool:
        """Line totals only; the permutation property is ``validate``'s job."""
        return not self.deviations

    @property
    def deviations(self) -> Dict[str, int]:
        """Offset from the magic constant of every line that misses it."""
        tgt = self.magic_constant
        off: Dict[str, int] = {}
        for i, total in enumerate(self.row_sums):
            if total != tgt:
                off[f"row {i}"] = total - tgt
        for j, total in enumerate(self.column_sums):
            if total != tgt:
                off[f"column {j}"] = total - tgt
        for name, total in zip(("main diagonal", "anti-diagonal"), self.diagonal_sums):
            if total != tgt:
                off[name] = total - tgt
        return off


def line_sums(n: int, cells: Sequence[int]) -> LineSums:
    board = _as_board(n, cells)
    if board is None:
        raise ValueError(f"cells cannot be read as an integer {n}x{n} grid")
    board = board.astype(np.int64)
    return LineSums(
        order=n,
        magic_constant=magic_constant(n),
        row_sums=board.sum(axis=1).tolist(),
        column_sums=board.sum(axis=0).tolist(),
        diagonal_sums=[int(board.trace()), int(np.fliplr(board).trace())],
    )
