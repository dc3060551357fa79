"""Weight expansion: every value is repeated once per unit of weight.

Draws are a single uniform index, the fastest of the samplers, but memory
grows with the sum of the weights. Only use this with small integer
weights; the total is not capped.
"""

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from weighted_samplers.base import WeightedSampler, check_count_weights, check_lengths
from weighted_samplers.random_source import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExpansionSampler(WeightedSampler[T]):
    def __init__(
        self,
        values: Iterable[T],
        weights: Iterable[Any],
        source: RandomSource | None = None,
    ) -> None:
        values = tuple(values)
        weights = list(weights)
        check_lengths(values, weights)
        counts = check_count_weights(weights)
        super().__init__(values, source)

        self._counts = tuple(counts)
        self._slots: list[int] = []
        for i, count in enumerate(counts):
            self._slots.extend([i] * count)
        logger.debug(
            "Expanded %d values into %d slots", len(values), len(self._slots)
        )

    @property
    def expanded(self) -> tuple[T, ...]:
        """The flattened value array, one slot per unit of weight."""
        return tuple(self._values[i] for i in self._slots)

    @property
    def probabilities(self) -> tuple[float, ...]:
        total = len(self._slots)
        return tuple(c / total for c in self._counts)

    def _draw_index(self) -> int:
        return self._slots[self._source.draw_uniform_int(0, len(self._slots) - 1)]
