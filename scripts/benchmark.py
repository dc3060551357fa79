#!/usr/bin/env python3
"""Time repeated draws from each sampler over the same weights.

Values are 1..size and each value's weight equals the value itself.

Usage: python scripts/benchmark.py [--draws N] [--size K] [--seed S]
"""

import argparse
import logging
import sys
import time
from collections.abc import Callable

from weighted_samplers import (
    AliasSampler,
    BinarySampler,
    ExpansionSampler,
    RandomSource,
    WeightedSampler,
)

logger = logging.getLogger("benchmark")

SAMPLERS: list[tuple[str, Callable[..., WeightedSampler[int]]]] = [
    ("Alias", AliasSampler),
    ("Expansion", ExpansionSampler),
    ("Binary", BinarySampler),
]


def time_draws(sampler: WeightedSampler[int], draws: int) -> float:
    """Return the wall time in milliseconds for ``draws`` calls."""
    sink = 0
    start = time.perf_counter()
    for _ in range(draws):
        sink += sampler()
    elapsed = (time.perf_counter() - start) * 1000.0
    logger.debug("checksum %d", sink)
    return elapsed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--draws", type=int, default=1_000_000)
    parser.add_argument("--size", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.draws <= 0 or args.size <= 0:
        parser.error("--draws and --size must be positive")

    values = list(range(1, args.size + 1))
    weights = list(values)

    for name, factory in SAMPLERS:
        source = RandomSource(args.seed)
        sampler = factory(values, weights, source)
        print(f"{name}: {time_draws(sampler, args.draws):.3f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
