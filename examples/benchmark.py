#!/usr/bin/env python3
"""
Micro-benchmarks for iteration and retain.

Usage:
    python examples/benchmark.py --repeat 200
"""

import argparse
import logging
import time

from id_set import IdSet, get_config

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description="Benchmark IdSet hot paths.")
    parser.add_argument(
        "--size",
        type=int,
        default=10_000,
        help="Upper bound of ids in the benchmark sets (default: 10000).",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=100,
        help="Iterations per benchmark (default: 100).",
    )
    return parser.parse_args()


def bench(name: str, repeat: int, func) -> None:
    """Run ``func`` ``repeat`` times and log the mean duration."""
    start = time.perf_counter()
    for _ in range(repeat):
        func()
    elapsed = time.perf_counter() - start
    logger.info(f"{name}: {elapsed / repeat * 1e6:,.1f} us/iter over {repeat} runs")


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=get_config().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    evens = IdSet(n for n in range(args.size) if n % 2 == 0)
    thirds = IdSet(n for n in range(args.size) if n % 3 == 0)

    def iterate():
        for _ in evens:
            pass

    def retain():
        # Copying is cheap compared to retain
        thirds.copy().retain(lambda n: n % 2 == 0)

    def union():
        evens.union(thirds).count()

    bench("iter", args.repeat, iterate)
    bench("retain", args.repeat, retain)
    bench("union count", args.repeat, union)


if __name__ == "__main__":
    main()
