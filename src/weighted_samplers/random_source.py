"""Uniform random number substrate shared by all samplers.

Usage:
    rng = RandomSource(seed=123)  # deterministic
    i = rng.draw_uniform_int(0, 9)
    x = rng.draw_uniform_real(0.0, 1.0)

Samplers take a source explicitly. When none is given they fall back to
the calling thread's ambient source from ``random_source()``.

A ``RandomSource`` is not safe to share between threads without external
locking: every draw mutates the engine state.
"""

import logging
import numbers
import random
import threading
import time
from typing import Any

from weighted_samplers import config

logger = logging.getLogger(__name__)

_SEED_MASK = (1 << 64) - 1

_ambient = threading.local()


class RandomSource:
    """A seeded pseudo-random engine with ranged uniform draws."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed) if seed is not None else random.Random()

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None) -> None:
        """Replace the engine state (None -> fresh non-deterministic)."""
        self._seed = seed
        if seed is None:
            self._rng = random.Random()
        else:
            self._rng = random.Random(seed)

    def draw_uniform_int(self, min_value: int, max_value: int) -> int:
        """Uniform integer in the inclusive range ``[min_value, max_value]``."""
        if min_value > max_value:
            min_value, max_value = max_value, min_value
        return self._rng.randint(min_value, max_value)

    def draw_uniform_real(self, min_value: float, max_value: float) -> float:
        """Uniform real in ``[min_value, max_value)``."""
        if min_value > max_value:
            min_value, max_value = max_value, min_value
        return min_value + (max_value - min_value) * self._rng.random()

    def random(self) -> float:
        """Uniform real in ``[0, 1)``."""
        return self._rng.random()

    def getstate(self) -> Any:
        return self._rng.getstate()

    def setstate(self, state: Any) -> None:
        self._rng.setstate(state)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed!r})"


def _auto_seed() -> int:
    configured = config.default_seed()
    if configured is not None:
        return configured
    tid = hash(threading.get_ident())
    return (time.time_ns() ^ tid) & _SEED_MASK


def random_source(seed: int | None = None) -> RandomSource:
    """Return the calling thread's ambient source.

    The source is created on first use. Passing ``seed`` replaces it with a
    freshly seeded one, so acquiring with the same seed again replays the
    same sequence of draws.
    """
    if seed is not None:
        source = RandomSource(seed)
        _ambient.source = source
        logger.debug("Reseeded ambient random source with seed %d", seed)
        return source

    source = getattr(_ambient, "source", None)
    if source is None:
        auto = _auto_seed()
        source = RandomSource(auto)
        _ambient.source = source
        logger.debug(
            "Created ambient random source for thread %d (seed %d)",
            threading.get_ident(),
            auto,
        )
    return source


def uniform_range(min_value: Any, max_value: Any, source: RandomSource | None = None) -> Any:
    """Single uniform draw between two bounds.

    Integer bounds give an integer in the inclusive range; any other numeric
    bounds give a real in the half-open range.
    """
    if source is None:
        source = random_source()
    if isinstance(min_value, numbers.Integral) and isinstance(max_value, numbers.Integral):
        return source.draw_uniform_int(int(min_value), int(max_value))
    return source.draw_uniform_real(float(min_value), float(max_value))
