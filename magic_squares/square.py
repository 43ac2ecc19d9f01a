"""The value object handed back by :func:`magic_squares.generate`."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


def magic_constant(n: int) -> int:
    """Return the row/col/diag sum of an n×n magic square."""
    return n * (n ** 2 + 1) // 2


@dataclass(frozen=True)
class Square:
    """An n×n grid stored row-major as an immutable tuple."""

    order: int
    cells: Tuple[int, ...]

    def __post_init__(self) -> None:
        cells = tuple(int(v) for v in self.cells)
        if len(cells) != self.order * self.order:
            raise ValueError(
                f"cells must hold {self.order * self.order} values, got {len(cells)}"
            )
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_array(cls, grid: np.ndarray) -> "Square":
        n = grid.shape[0]
        return cls(order=n, cells=tuple(grid.ravel().tolist()))

    @property
    def magic_constant(self) -> int:
        return magic_constant(self.order)

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        n = self.order
        return tuple(self.cells[i * n:(i + 1) * n] for i in range(n))

    def as_array(self) -> np.ndarray:
        """Return a fresh ``int64`` copy shaped (order, order)."""
        return np.array(self.cells, dtype=np.int64).reshape(self.order, self.order)

    def __str__(self) -> str:
        width = len(str(self.order * self.order)) + 1
        return "\n".join("".join(f"{v:>{width}}" for v in row) for row in self.rows())
