"""Chi-squared goodness-of-fit checks for sampler output."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from scipy import stats

from weighted_samplers.errors import PreconditionError


@dataclass(frozen=True)
class ChiSquaredResult:
    """Outcome of comparing observed draw counts with expected probabilities."""

    chi_squared: float
    p_value: float
    degrees_of_freedom: int
    num_samples: int

    def passes(self, alpha: float = 0.05) -> bool:
        """True when the sample is consistent with the distribution at ``alpha``."""
        return self.p_value >= alpha


def chi_squared_test(
    counts: Sequence[int], probabilities: Sequence[float]
) -> ChiSquaredResult:
    """Pearson's chi-squared test of ``counts`` against ``probabilities``.

    Categories with zero probability are left out of the statistic. Any
    observation landing in one of them is an outright failure.
    """
    observed = np.asarray(counts, dtype=np.float64)
    expected_p = np.asarray(probabilities, dtype=np.float64)
    if observed.shape != expected_p.shape:
        raise PreconditionError(
            f"counts and probabilities differ in length: "
            f"{observed.shape[0]} != {expected_p.shape[0]}"
        )
    total = int(observed.sum())

    support = expected_p > 0
    if observed[~support].sum() > 0:
        return ChiSquaredResult(math.inf, 0.0, int(support.sum()) - 1, total)

    observed = observed[support]
    expected_p = expected_p[support]
    dof = observed.shape[0] - 1
    if dof == 0 or total == 0:
        return ChiSquaredResult(0.0, 1.0, dof, total)

    expected = expected_p / expected_p.sum() * total
    chi2, p_value = stats.chisquare(observed, expected)
    return ChiSquaredResult(float(chi2), float(p_value), dof, total)
