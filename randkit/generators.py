"""
Scalar and array generators.

Bounds go through ``resolve_bounds`` first, so every function here
accepts the same loose bound conventions (none, one, both, reversed).
Integers round half away from zero and can land on either endpoint.
"""

from __future__ import annotations

import math
import random
from typing import List, Optional

from .bounds import resolve_bounds, is_number
from .config import get_config
from .constants import MIN_PRECISE
from .logging_config import get_logger
from .rng import resolve_rng

logger = get_logger("generators")


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return int(magnitude) if value >= 0 else -int(magnitude)


def normalize_precise(precise) -> int:
    """Clamp ``precise`` to [0, max_precise]; non-numbers mean 0."""
    if not is_number(precise) or not math.isfinite(precise):
        return 0
    upper = get_config().max_precise
    digits = int(precise)
    clamped = max(MIN_PRECISE, min(upper, digits))
    if clamped != digits:
        logger.debug("precise %s clamped to %d", precise, clamped)
    return clamped


def normalize_size(size) -> int:
    """Array length; absent, non-numeric or negative sizes become 0."""
    if not is_number(size) or not math.isfinite(size):
        return 0
    return max(0, int(size))


def _uniform(a, b, rng: random.Random) -> float:
    bounds = resolve_bounds(a, b)
    return bounds.span * rng.random() + bounds.min


def rand_int(a=None, b=None, *, rng: Optional[random.Random] = None) -> int:
    """Random integer in the resolved bounds (both ends reachable)."""
    return _round_half_away(_uniform(a, b, resolve_rng(rng)))


def rand_float(
    a=None,
    b=None,
    precise=None,
    *,
    rng: Optional[random.Random] = None,
) -> float:
    """Random float in the resolved bounds.

    Args:
        a: lower bound (or the only bound)
        b: upper bound
        precise: decimal digits to round to (0-20); 0/None keeps the raw value

    Returns:
        float, rounded with round() when precise > 0
    """
    value = _uniform(a, b, resolve_rng(rng))
    digits = normalize_precise(precise)
    return round(value, digits) if digits else value


def int_array(
    a=None,
    b=None,
    size=None,
    *,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """``size`` independent rand_int() draws, in generation order."""
    rng = resolve_rng(rng)
    return [rand_int(a, b, rng=rng) for _ in range(normalize_size(size))]


def float_array(
    a=None,
    b=None,
    size=None,
    precise=None,
    *,
    rng: Optional[random.Random] = None,
) -> List[float]:
    """``size`` independent rand_float() draws, in generation order."""
    rng = resolve_rng(rng)
    return [rand_float(a, b, precise, rng=rng) for _ in range(normalize_size(size))]
