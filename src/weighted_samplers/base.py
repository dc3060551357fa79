"""Shared construction checks and the common sampler surface."""

import math
import operator
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

import numpy as np

from weighted_samplers.errors import InvalidArgumentError, PreconditionError
from weighted_samplers.random_source import RandomSource, random_source
from weighted_samplers.stats import ChiSquaredResult, chi_squared_test

T = TypeVar("T")


def check_lengths(values: Sequence[Any], weights: Sequence[Any]) -> None:
    """Reject empty or mismatched value/weight sequences."""
    if len(values) == 0 or len(values) != len(weights):
        raise InvalidArgumentError(
            "value range and weight range must be non-empty and equal size "
            f"(got {len(values)} values and {len(weights)} weights)"
        )


def check_real_weights(weights: Sequence[Any]) -> list[float]:
    """Return the weights as floats, rejecting negative or non-finite ones."""
    out: list[float] = []
    for i, w in enumerate(weights):
        try:
            w = float(w)
        except OverflowError as e:
            raise PreconditionError(f"weight at index {i} is too large for a float") from e
        if not math.isfinite(w) or w < 0:
            raise PreconditionError(
                f"weight at index {i} must be finite and >= 0, got {w}"
            )
        out.append(w)
    if not any(out):
        raise PreconditionError("weights must have a positive total")
    return out


def check_count_weights(weights: Sequence[Any]) -> list[int]:
    """Return the weights as ints, rejecting anything that is not a count."""
    out: list[int] = []
    for i, w in enumerate(weights):
        try:
            count = operator.index(w)
        except TypeError as e:
            raise PreconditionError(
                f"weight at index {i} must be an integer count, got {w!r}"
            ) from e
        if count < 0:
            raise PreconditionError(f"weight at index {i} must be >= 0, got {count}")
        out.append(count)
    if sum(out) == 0:
        raise PreconditionError("weights must have a positive total")
    return out


class WeightedSampler(ABC, Generic[T]):
    """A callable drawing values with probability proportional to weight.

    The distribution is fixed at construction. Calling the sampler draws one
    value and advances its random source; instances are not thread-safe.
    """

    def __init__(self, values: tuple[T, ...], source: RandomSource | None = None) -> None:
        """Bind already validated ``values`` and the source to draw from."""
        self._values = values
        self._source = source if source is not None else random_source()

    @abstractmethod
    def _draw_index(self) -> int:
        """Draw the index of the next value."""

    @property
    @abstractmethod
    def probabilities(self) -> tuple[float, ...]:
        """Normalized probability of each index."""

    @property
    def values(self) -> tuple[T, ...]:
        return self._values

    @property
    def source(self) -> RandomSource:
        return self._source

    def __len__(self) -> int:
        return len(self._values)

    def __call__(self) -> T:
        return self._values[self._draw_index()]

    def sample(self) -> T:
        """Draw one value. Same as calling the sampler."""
        return self()

    def test_distribution(self, num_samples: int = 10000) -> ChiSquaredResult:
        """Draw ``num_samples`` times and test the counts against the weights."""
        if num_samples <= 0:
            raise PreconditionError(f"num_samples must be positive, got {num_samples}")
        indices = [self._draw_index() for _ in range(num_samples)]
        counts = np.bincount(indices, minlength=len(self._values))
        return chi_squared_test(counts.tolist(), self.probabilities)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values)!r}, {list(self.probabilities)!r})"
