"""Environment-derived settings.

Variables are read at call time so tests and long-running processes can
change them without reloading the package.
"""

import math
import os

from weighted_samplers.errors import PreconditionError

SEED_ENV = "WEIGHTED_SAMPLERS_SEED"
TOLERANCE_ENV = "WEIGHTED_SAMPLERS_TOLERANCE"

# Normalized alias probabilities may drift this far from 1.0 before the
# table build is rejected.
DEFAULT_TOLERANCE = 1e-9


def _int_env(key: str) -> int | None:
    raw = os.environ.get(key, "").strip()
    if raw == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise PreconditionError(f"{key} must be an integer, got: {raw!r}") from e


def _float_env(key: str, default: float) -> float:
    raw = os.environ.get(key, "").strip()
    if raw == "":
        return float(default)
    try:
        out = float(raw)
    except ValueError as e:
        raise PreconditionError(f"{key} must be a number, got: {raw!r}") from e
    if not math.isfinite(out) or out < 0:
        raise PreconditionError(f"{key} must be a finite number >= 0, got: {out}")
    return out


def default_seed() -> int | None:
    """Seed for ambient sources created without one, if configured."""
    return _int_env(SEED_ENV)


def default_tolerance() -> float:
    """Tolerance used by alias samplers built without an explicit one."""
    return _float_env(TOLERANCE_ENV, DEFAULT_TOLERANCE)
