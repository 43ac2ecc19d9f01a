"""
Builders for the three order classes.

Every builder returns an ``int64`` numpy array of shape (n, n) holding
1..n² exactly once. Only the doubly-even builder takes a random source,
and only to choose between fill patterns that are all magic.
"""
from __future__ import annotations

import numpy as np

from .config import SINGLY_EVEN_METHODS
from .rng import Lcg


# --------------------------------------------------------------------------- #
#  Odd orders: Siamese (De La Loubère) method
# --------------------------------------------------------------------------- #
def odd_square(n: int) -> np.ndarray:
    """Start mid top row, step up-right with wrap-around, drop down on collision."""
    cells = np.zeros(n * n, dtype=np.int64)     # row-major
    row, col = 0, n // 2
    for value in range(1, n * n + 1):
        cells[row * n + col] = value
        up, right = (row - 1) % n, (col + 1) % n
        if cells[up * n + right]:
            row = (row + 1) % n
        else:
            row, col = up, right
    return cells.reshape(n, n)


# --------------------------------------------------------------------------- #
#  Singly-even orders (n = 4k + 2)
# --------------------------------------------------------------------------- #
# 2×2 fill orders for Conway's LUX construction, offsets 0..3 within a block.
_LUX_BLOCKS = {
    "L": np.array([[3, 0], [1, 2]]),
    "U": np.array([[0, 3], [1, 2]]),
    "X": np.array([[0, 3], [2, 1]]),
}


def singly_even_square(n: int, method: str = "strachey") -> np.ndarray:
    if method not in SINGLY_EVEN_METHODS:
        raise ValueError(f"Unknown singly-even method {method!r}")
    half = n // 2
    sub = odd_square(half)
    if method == "conway":
        return _conway_lux(sub)
    return _strachey(sub)


def _strachey(sub: np.ndarray) -> np.ndarray:
    """
    Quadrant exchange on four shifted copies of an odd square of order m.

        A      A+2m²
        A+3m²  A+m²

    Columns only ever trade cells between the top and bottom halves, so each
    column pair (0/3m² on the left, 2m²/m² on the right) keeps its sum.
    The exchanged set is the leftmost k columns, with the middle row taking
    columns 1..k instead of 0..k-1, plus the rightmost k-1 columns.
    """
    half = sub.shape[0]
    n = 2 * half
    size = half * half
    k = (half - 1) // 2

    m = np.block([[sub, sub + 2 * size],
                  [sub + 3 * size, sub + size]])

    cols = list(range(k)) + list(range(n - k + 1, n))
    m[:, cols] = np.roll(m[:, cols], half, axis=0)    # swap halves

    # middle row: undo column 0, exchange the centre column
    rows = [k, k + half]
    m[np.ix_(rows, [0, k])] = m[np.ix_(rows[::-1], [0, k])]
    return m


def lux_letters(half: int) -> np.ndarray:
    """k+1 rows of L, one row of U, k-1 rows of X; centre U trades with the L above."""
    k = (half - 1) // 2
    letters = np.full((half, half), "X")
    letters[:k + 1] = "L"
    letters[k + 1] = "U"
    letters[k, k], letters[k + 1, k] = "U", "L"
    return letters


def _conway_lux(sub: np.ndarray) -> np.ndarray:
    """Blow every cell v of the odd square into a 2×2 block of 4(v-1)+1 .. 4v."""
    half = sub.shape[0]
    letters = lux_letters(half)
    blocks = np.empty((half, half, 2, 2), dtype=np.int64)
    for letter, pattern in _LUX_BLOCKS.items():
        blocks[letters == letter] = pattern
    blocks += (4 * (sub - 1) + 1)[:, :, None, None]
    return blocks.transpose(0, 2, 1, 3).reshape(2 * half, 2 * half)


# --------------------------------------------------------------------------- #
#  Doubly-even orders (n = 4k): truth grid
# --------------------------------------------------------------------------- #
def truth_grid(n: int, keep_diagonals=False) -> np.ndarray:
    """
    Boolean n×n mask, True → keep the natural value k, False → n²+1-k.

    Inside every 4×4 block the two block diagonals form one class of cells
    and the remaining eight the other; either class may be the kept one.
    ``keep_diagonals`` is one flag for the whole grid or an (n/4, n/4)
    array choosing per block.
    """
    r4, c4 = np.indices((n, n)) % 4
    on_diag = (r4 == c4) | (r4 + c4 == 3)
    choice = np.asarray(keep_diagonals, dtype=bool)
    if choice.ndim == 2:
        choice = np.repeat(np.repeat(choice, 4, axis=0), 4, axis=1)
    return on_diag == choice


def block_choice(n: int, rng: Lcg) -> np.ndarray:
    """
    Draw one template flag per 4×4 block, symmetric through the centre.

    Every block balances its own rows and columns whatever its flag. The
    natural values at cell p and at its half-turn partner n²-1-p complement
    each other, so the two cells must share a flag or a value appears twice.
    Block (R, C) therefore copies block (q-1-R, q-1-C); the same symmetry
    keeps both long diagonals balanced.
    Only the first half of the blocks, in row-major order, draws a coin.
    """
    q = n // 4
    total = q * q
    drawn = (total + 1) // 2
    flat = np.empty(total, dtype=bool)
    flat[:drawn] = [rng.coin() for _ in range(drawn)]
    flat[drawn:] = flat[:total - drawn][::-1]
    return flat.reshape(q, q)


def apply_truth_grid(keep: np.ndarray) -> np.ndarray:
    n = keep.shape[0]
    natural = np.arange(1, n * n + 1, dtype=np.int64).reshape(n, n)
    return np.where(keep, natural, n * n + 1 - natural)


def dihedral(grid: np.ndarray, transpose: bool = False,
             flip_rows: bool = False, flip_cols: bool = False) -> np.ndarray:
    """Apply one of the eight symmetries of the square."""
    out = grid
    if flip_rows:
        out = out[::-1, :]
    if flip_cols:
        out = out[:, ::-1]
    if transpose:
        out = out.T
    return np.ascontiguousarray(out)


def doubly_even_square(n: int, rng: Lcg, mosaic: bool = True) -> np.ndarray:
    """
    Truth-grid square with its pattern and orientation drawn from ``rng``.

    With ``mosaic`` the 4×4 blocks draw their templates in half-turn pairs,
    otherwise one flag covers the grid. A symmetry of the square is drawn
    last. Every draw is magic by construction.
    """
    keep_diagonals = block_choice(n, rng) if mosaic else rng.coin()
    m = apply_truth_grid(truth_grid(n, keep_diagonals))
    return dihedral(m, transpose=rng.coin(), flip_rows=rng.coin(), flip_cols=rng.coin())
