"""Magic square generation and validation for any order n ≠ 2."""
from .config import GeneratorConfig
from .dispatch import OrderKind, classify, generate
from .errors import GenerationError, InternalInconsistency, InvalidOrder, OrderTooLarge
from .rng import Lcg
from .square import Square, magic_constant
from .validator import LineSums, line_sums, validate

__all__ = [
    "GeneratorConfig",
    "OrderKind",
    "classify",
    "generate",
    "GenerationError",
    "InternalInconsistency",
    "InvalidOrder",
    "OrderTooLarge",
    "Lcg",
    "Square",
    "magic_constant",
    "LineSums",
    "line_sums",
    "validate",
]

__version__ = "0.1.0"
