"""Generation settings."""
from __future__ import annotations

from dataclasses import dataclass

SINGLY_EVEN_METHODS = ("strachey", "conway")


# --------------------------------------------------------------------------- #
#  Settings bundle
# --------------------------------------------------------------------------- #
@dataclass
class GeneratorConfig:
    max_order: int | None = None        # ceiling on n, None → unlimited
    self_check: bool = True             # validate every square before returning it
    max_attempts: int = 3               # doubly-even redraws before giving up
    singly_even_method: str = "strachey"  # strachey | conway
    block_mosaic: bool = True           # doubly-even: template per 4×4 block

    def __post_init__(self) -> None:
        if self.max_order is not None and self.max_order < 1:
            raise ValueError("max_order must be positive")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.singly_even_method not in SINGLY_EVEN_METHODS:
            raise ValueError(
                f"Unknown singly-even method {self.singly_even_method!r}; "
                f"expected one of {', '.join(SINGLY_EVEN_METHODS)}"
            )
