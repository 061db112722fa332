"""
Bound resolution.

Turns zero, one or two loosely-typed bounds into an ordered
``BoundPair``. Anything that is not an int or float (``None``, strings,
lists, booleans) counts as "absent".

    resolve_bounds()          -> BoundPair(0, MAX_NUM)
    resolve_bounds(12)        -> BoundPair(0, 12)
    resolve_bounds(-100)      -> BoundPair(-100, 0)
    resolve_bounds(100, -100) -> BoundPair(-100, 100)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .constants import MAX_NUM
from .errors import InvalidArgumentError

Number = Union[int, float]


@dataclass(frozen=True)
class BoundPair:
    """Closed interval with ``min <= max``"""

    min: Number
    max: Number

    @property
    def span(self) -> Number:
        return self.max - self.min


def is_number(value) -> bool:
    """True for int/float values; bool is excluded."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_finite(value, name: str) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value!r}")


def resolve_bounds(a=None, b=None) -> BoundPair:
    """Normalize optional bounds into a BoundPair.

    Args:
        a: lower bound, or the only bound when ``b`` is absent
        b: upper bound

    Returns:
        BoundPair with min <= max

    Raises:
        InvalidArgumentError: a bound is NaN or infinite
    """
    a_is_num = is_number(a)
    b_is_num = is_number(b)

    if b_is_num:
        high = b
    elif a_is_num:
        high = 0
    else:
        high = MAX_NUM
    low = a if a_is_num else 0

    _check_finite(low, "min")
    _check_finite(high, "max")

    if high < low:
        low, high = high, low
    return BoundPair(low, high)
