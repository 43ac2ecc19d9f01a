"""Verification sweep and tabular export."""
from __future__ import annotations

import dataclasses
import logging
import time

import numpy as np
import pandas as pd

from .config import GeneratorConfig
from .dispatch import classify, generate
from .rng import Lcg
from .square import Square
from .validator import validate

logger = logging.getLogger(__name__)

SWEEP_COLUMNS = ["N", "Kind", "Samples", "Valid", "UniqueVariants", "AvgTimeMs"]


def verification_sweep(max_order: int = 100, samples: int = 100,
                       seed: int | None = None,
                       config: GeneratorConfig | None = None) -> pd.DataFrame:
    """
    Generate every order 1..max_order (2 skipped) ``samples`` times.

    The engine's own self-check is switched off here so that a defective
    square is counted in ``Valid`` instead of aborting the sweep.
    """
    cfg = dataclasses.replace(config or GeneratorConfig(), self_check=False)
    rng = Lcg(seed) if seed is not None else Lcg.from_time()
    rows = []
    for n in range(1, max_order + 1):
        if n == 2:
            logger.info("Order 2: impossible (skipping)")
            continue
        seen = set()
        valid = 0
        times = []
        for _ in range(samples):
            t0 = time.perf_counter()
            square = generate(n, config=cfg, rng=rng)
            times.append(time.perf_counter() - t0)
            if validate(n, square.cells):
                valid += 1
            seen.add(square.cells)
        if valid == samples:
            logger.info("Order %d: %d/%d valid, %d unique variants",
                        n, valid, samples, len(seen))
        else:
            logger.error("Order %d: %d/%d valid, FAILED VALIDATION", n, valid, samples)
        rows.append(dict(N=n,
                         Kind=classify(n).value,
                         Samples=samples,
                         Valid=valid,
                         UniqueVariants=len(seen),
                         AvgTimeMs=1000 * float(np.mean(times)) if times else 0.0))
    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)


def square_frame(square: Square) -> pd.DataFrame:
    """One DataFrame row per grid row, for CSV export."""
    return pd.DataFrame(square.as_array())
