"""Walker's alias method using Vose's small/large worklists.

See https://www.keithschwarz.com/darts-dice-coins/ for details.

Construction is O(N), each draw is O(1) and the table takes O(N) memory,
which makes this the sampler of choice for many draws over real-valued
weights.
"""

import logging
import math
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any, NamedTuple, TypeVar

from weighted_samplers import config
from weighted_samplers.base import WeightedSampler, check_lengths, check_real_weights
from weighted_samplers.errors import NumericConsistencyError, PreconditionError
from weighted_samplers.random_source import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AliasEntry(NamedTuple):
    """One table column: keep the drawn index with probability ``cutoff``,
    otherwise redirect to ``alias``. ``alias`` is None for columns that
    always keep their own index."""

    cutoff: float
    alias: int | None


def _normalize(weights: Sequence[float], tolerance: float) -> list[float]:
    try:
        total = math.fsum(weights)
    except OverflowError:
        # Finite weights whose sum leaves the float range.
        peak = max(weights)
        weights = [w / peak for w in weights]
        total = math.fsum(weights)
    if not math.isfinite(total):
        raise PreconditionError(f"weights must have a finite total, got {total}")
    if abs(1.0 - total) > tolerance:
        return [w / total for w in weights]
    return list(weights)


def build_alias_table(probabilities: Sequence[float]) -> list[AliasEntry]:
    """Build the alias table for probabilities that sum to 1."""
    n = len(probabilities)
    cutoffs = [p * n for p in probabilities]
    aliases: list[int | None] = [None] * n

    small: deque[int] = deque()
    large: deque[int] = deque()
    for i, scaled in enumerate(cutoffs):
        if scaled < 1.0:
            small.append(i)
        else:
            large.append(i)

    while small and large:
        s = small.popleft()
        g = large.popleft()
        aliases[s] = g
        cutoffs[g] = max(cutoffs[g] - (1.0 - cutoffs[s]), 0.0)
        if cutoffs[g] < 1.0:
            small.append(g)
        else:
            large.append(g)

    # Whatever is left over is 1.0 up to rounding.
    for q in (small, large):
        for i in q:
            cutoffs[i] = 1.0

    return [AliasEntry(c, a) for c, a in zip(cutoffs, aliases)]


class AliasSampler(WeightedSampler[T]):
    """Samples values using an alias table.

    Weights are normalized unless they already sum to 1 within
    ``tolerance``. If the normalized probabilities still miss 1.0 by more
    than ``tolerance`` the build fails with ``NumericConsistencyError``.
    """

    def __init__(
        self,
        values: Iterable[T],
        weights: Iterable[Any],
        source: RandomSource | None = None,
        tolerance: float | None = None,
    ) -> None:
        values = tuple(values)
        weights = list(weights)
        check_lengths(values, weights)
        if tolerance is None:
            tolerance = config.default_tolerance()
        elif not math.isfinite(tolerance) or tolerance < 0:
            raise PreconditionError(f"tolerance must be finite and >= 0, got {tolerance}")

        probabilities = _normalize(check_real_weights(weights), tolerance)
        resum = math.fsum(probabilities)
        if abs(1.0 - resum) > tolerance:
            raise NumericConsistencyError(
                f"Sum of normalized weights is not 1.0 (got {resum!r}, "
                f"tolerance {tolerance!r})"
            )

        super().__init__(values, source)
        self._tolerance = tolerance
        self._probabilities = tuple(probabilities)
        self._table = tuple(build_alias_table(probabilities))
        logger.debug("Built alias table with %d entries", len(self._table))

    @property
    def table(self) -> tuple[AliasEntry, ...]:
        return self._table

    @property
    def probabilities(self) -> tuple[float, ...]:
        return self._probabilities

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def _draw_index(self) -> int:
        i = self._source.draw_uniform_int(0, len(self._table) - 1)
        cutoff, alias = self._table[i]
        if self._source.random() >= cutoff and alias is not None:
            return alias
        return i
