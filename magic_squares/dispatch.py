"""Public entry point: classify the order, run one builder, self-check."""
from __future__ import annotations

import numbers
from enum import Enum

from .config import GeneratorConfig
from .errors import InternalInconsistency, InvalidOrder, OrderTooLarge
from .generators import doubly_even_square, odd_square, singly_even_square
from .rng import Lcg
from .square import Square
from .validator import validate


class OrderKind(Enum):
    TRIVIAL = "trivial"
    ODD = "odd"
    SINGLY_EVEN = "singly-even"
    DOUBLY_EVEN = "doubly-even"


def classify(n) -> OrderKind:
    """Return which construction handles order ``n``; raise InvalidOrder if none."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidOrder(n, f"order must be an integer, got {n!r}")
    if n < 1:
        raise InvalidOrder(n, f"order must be at least 1, got {n}")
    if n == 2:
        raise InvalidOrder(n, "no magic square of order 2 exists")
    if n == 1:
        return OrderKind.TRIVIAL
    if n % 2 == 1:
        return OrderKind.ODD
    if n % 4 == 0:
        return OrderKind.DOUBLY_EVEN
    return OrderKind.SINGLY_EVEN


def generate(n: int, seed: int | None = None,
             config: GeneratorConfig | None = None,
             rng: Lcg | None = None) -> Square:
    """
    Build a magic square of order ``n``.

    ``seed`` seeds a fresh :class:`Lcg` for this call (wall clock when None);
    passing ``rng`` instead shares one generator across calls and wins over
    ``seed``. Only doubly-even orders draw from it.

    Raises InvalidOrder or OrderTooLarge for bad input and
    InternalInconsistency when the self-check rejects the result.
    """
    cfg = config or GeneratorConfig()
    kind = classify(n)
    n = int(n)
    if cfg.max_order is not None and n > cfg.max_order:
        raise OrderTooLarge(n, cfg.max_order)

    if kind is OrderKind.TRIVIAL:
        return Square(order=1, cells=(1,))

    if kind is OrderKind.DOUBLY_EVEN:
        if rng is None:
            rng = Lcg(seed) if seed is not None else Lcg.from_time()
        attempts = cfg.max_attempts if cfg.self_check else 1
        for _ in range(attempts):
            square = Square.from_array(doubly_even_square(n, rng, cfg.block_mosaic))
            if not cfg.self_check or validate(n, square.cells):
                return square
        raise InternalInconsistency(n, attempts)

    # deterministic paths: a failed check would fail again, never retry
    if kind is OrderKind.ODD:
        grid = odd_square(n)
    else:
        grid = singly_even_square(n, cfg.singly_even_method)
    square = Square.from_array(grid)
    if cfg.self_check and not validate(n, square.cells):
        raise InternalInconsistency(n)
    return square
