"""Prefix sums with a binary search per draw.

O(N) construction and memory, O(log N) per draw. Works with integer or
real weights; integer weights are recommended since they are searched
exactly.
"""

import bisect
import logging
import math
import numbers
from collections.abc import Iterable
from itertools import accumulate
from typing import Any, TypeVar

from weighted_samplers.base import (
    WeightedSampler,
    check_count_weights,
    check_lengths,
    check_real_weights,
)
from weighted_samplers.errors import PreconditionError
from weighted_samplers.random_source import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BinarySampler(WeightedSampler[T]):
    """Samples values by searching a running sum of the weights.

    With integer weights a draw ``r`` is taken from ``[1, total]`` and the
    first prefix sum ``>= r`` is selected. With real weights ``r`` comes
    from ``[0, total)`` and the first prefix sum ``> r`` is selected. Either
    way an entry of weight zero is never returned.
    """

    def __init__(
        self,
        values: Iterable[T],
        weights: Iterable[Any],
        source: RandomSource | None = None,
    ) -> None:
        values = tuple(values)
        weights = list(weights)
        check_lengths(values, weights)
        self._integral = all(isinstance(w, numbers.Integral) for w in weights)
        checked: list[Any]
        if self._integral:
            checked = check_count_weights(weights)
        else:
            checked = check_real_weights(weights)
        super().__init__(values, source)

        self._prefix_sums = tuple(accumulate(checked))
        if not self._integral and not math.isfinite(self.total_weight):
            raise PreconditionError(
                f"weights must have a finite total, got {self.total_weight}"
            )
        self._last_positive = max(i for i, w in enumerate(checked) if w > 0)
        logger.debug(
            "Built prefix sums over %d weights (total %r)",
            len(self._prefix_sums),
            self.total_weight,
        )

    @property
    def prefix_sums(self) -> tuple[Any, ...]:
        return self._prefix_sums

    @property
    def total_weight(self) -> Any:
        return self._prefix_sums[-1]

    @property
    def probabilities(self) -> tuple[float, ...]:
        total = self.total_weight
        previous = 0
        out = []
        for running in self._prefix_sums:
            out.append((running - previous) / total)
            previous = running
        return tuple(out)

    def _draw_index(self) -> int:
        if self._integral:
            r = self._source.draw_uniform_int(1, self.total_weight)
            return bisect.bisect_left(self._prefix_sums, r)
        r = self._source.draw_uniform_real(0.0, self.total_weight)
        # r can round up to the total.
        return min(bisect.bisect_right(self._prefix_sums, r), self._last_positive)
