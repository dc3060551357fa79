"""Exceptions raised while building samplers.

Every error is raised at construction time. Drawing from a sampler that
was built successfully never fails.
"""


class SamplerError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(SamplerError, ValueError):
    """Value and weight sequences are empty or differ in length."""


class PreconditionError(SamplerError, ValueError):
    """A checked contract violation.

    Raised for weights that leave no valid sampling range (zero total),
    negative or non-finite weights, non-integer weights where counts are
    required, and malformed configuration values.
    """


class NumericConsistencyError(SamplerError, ArithmeticError):
    """Normalized probabilities do not sum to 1.0 within tolerance.

    This points at a broken normalization step rather than bad input.
    """
