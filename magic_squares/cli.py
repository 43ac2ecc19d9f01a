"""
Command-line front end.

    magic-squares -n 7            print one square and its verdict
    magic-squares                 verify orders 1..100, 100 samples each
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import SINGLY_EVEN_METHODS, GeneratorConfig
from .dispatch import generate
from .errors import GenerationError, InternalInconsistency
from .logging_config import setup_logging
from .report import square_frame, verification_sweep
from .validator import line_sums, validate

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT = 2
EXIT_INTERNAL = 3


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="magic-squares", description="Magic square generator")
    p.add_argument("-n", "--order", type=int, default=None,
                   help="order of the square; omit to run the verification sweep")
    p.add_argument("--seed", type=int, default=None,
                   help="seed for doubly-even pattern selection (default: clock)")
    p.add_argument("--max-order", type=int, default=None, help="reject larger orders")
    p.add_argument("--method", choices=SINGLY_EVEN_METHODS, default="strachey",
                   help="construction for orders n = 4k + 2")
    p.add_argument("--uniform", action="store_true",
                   help="one truth-grid template for the whole doubly-even square")
    p.add_argument("--no-check", action="store_true",
                   help="skip the engine's self-check")
    p.add_argument("--outcsv", type=Path, default=None,
                   help="write the generated square as CSV")
    p.add_argument("--plot", type=Path, default=None,
                   help="save a rendering of the square (PNG, SVG, ...)")
    p.add_argument("--sweep-max", type=int, default=100, help="largest order in the sweep")
    p.add_argument("--samples", type=int, default=100, help="squares per order in the sweep")
    p.add_argument("--report", type=Path, default=None, help="write the sweep table as CSV")
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="-v for progress, -vv for debug output")
    p.add_argument("--log-file", default=None, help="also log to this file")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    return GeneratorConfig(max_order=args.max_order,
                           self_check=not args.no_check,
                           singly_even_method=args.method,
                           block_mosaic=not args.uniform)


def _run_single(args: argparse.Namespace, cfg: GeneratorConfig) -> int:
    square = generate(args.order, seed=args.seed, config=cfg)
    print(square)

    if validate(square.order, square.cells):
        print("\nVerified: this is a valid magic square.")
        status = EXIT_OK
    else:
        print("\nError: the generated square is invalid!")
        for line, off in line_sums(square.order, square.cells).deviations.items():
            print(f"  {line}: {off:+d}")
        status = EXIT_INTERNAL

    if args.outcsv:
        args.outcsv.parent.mkdir(parents=True, exist_ok=True)
        square_frame(square).to_csv(args.outcsv, header=False, index=False)
        logger.info("Square written to %s", args.outcsv)
    if args.plot:
        import matplotlib.pyplot as plt
        from .render import plot_square

        args.plot.parent.mkdir(parents=True, exist_ok=True)
        fig = plot_square(square)
        fig.savefig(args.plot, bbox_inches="tight")
        plt.close(fig)
        logger.info("Rendering saved to %s", args.plot)
    return status


def _run_sweep(args: argparse.Namespace, cfg: GeneratorConfig) -> int:
    print(f"Running verification for orders 1 to {args.sweep_max} "
          f"({args.samples} samples each)...")
    df = verification_sweep(args.sweep_max, args.samples, seed=args.seed, config=cfg)
    print(df.to_string(index=False, formatters={"AvgTimeMs": lambda x: f"{x:.3f}"}))
    if args.report:
        args.report.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.report, index=False)
        logger.info("Sweep report written to %s", args.report)
    return EXIT_OK if (df.Valid == df.Samples).all() else EXIT_INTERNAL


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logging(level, args.log_file)

    try:
        cfg = build_config(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_INPUT

    try:
        if args.order is None:
            return _run_sweep(args, cfg)
        return _run_single(args, cfg)
    except InternalInconsistency as exc:
        logger.error("Engine defect: %s", exc)
        return EXIT_INTERNAL
    except GenerationError as exc:
        logger.error("%s", exc)
        return EXIT_INPUT


if __name__ == "__main__":
    raise SystemExit(main())
