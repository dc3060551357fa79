"""Package initialization for weighted-samplers.

Discrete weighted random samplers built once from an immutable weight
vector: an alias table with O(1) draws, a weight expansion with O(1) draws
and O(sum of weights) memory, and a prefix-sum sampler with O(log N) draws.
"""

from weighted_samplers.alias import AliasEntry, AliasSampler
from weighted_samplers.base import WeightedSampler
from weighted_samplers.binary import BinarySampler
from weighted_samplers.errors import (
    InvalidArgumentError,
    NumericConsistencyError,
    PreconditionError,
    SamplerError,
)
from weighted_samplers.expansion import ExpansionSampler
from weighted_samplers.random_source import RandomSource, random_source, uniform_range
from weighted_samplers.stats import ChiSquaredResult, chi_squared_test

__version__ = "0.1.0"
__all__ = [
    "AliasEntry",
    "AliasSampler",
    "BinarySampler",
    "ChiSquaredResult",
    "ExpansionSampler",
    "InvalidArgumentError",
    "NumericConsistencyError",
    "PreconditionError",
    "RandomSource",
    "SamplerError",
    "WeightedSampler",
    "chi_squared_test",
    "random_source",
    "uniform_range",
]
