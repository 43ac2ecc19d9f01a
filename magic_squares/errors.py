"""Exceptions raised by the magic-square engine."""
from __future__ import annotations


class GenerationError(ValueError):
    """Base class for every failure of :func:`magic_squares.generate`."""

    def __init__(self, order, message: str) -> None:
        super().__init__(message)
        self.order = order


class InvalidOrder(GenerationError):
    """The requested order has no magic square (n < 1, n == 2, non-integer)."""


class OrderTooLarge(GenerationError):
    """The requested order exceeds the caller-configured ceiling."""

    def __init__(self, order: int, limit: int) -> None:
        super().__init__(order, f"order {order} exceeds the configured maximum of {limit}")
        self.limit = limit


class InternalInconsistency(GenerationError):
    """A generated square failed its own validation (engine defect)."""

    def __init__(self, order: int, attempts: int = 1) -> None:
        noun = "attempt" if attempts == 1 else "attempts"
        super().__init__(
            order,
            f"generated square of order {order} failed self-check after {attempts} {noun}",
        )
        self.attempts = attempts
