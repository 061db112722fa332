"""
Public numeric entry points.

``random_integer`` and ``random_float`` take up to two bounds plus an
explicit ``option`` (GenerationOption or a plain dict) that switches to
array output (``size``) and/or rounded floats (``precise``).

Usage:
    from randkit import random_integer, GenerationOption
    random_integer(12, 15)                            # 12..15
    random_integer(option=GenerationOption(size=3))   # [..., ..., ...]
    random_integer(15, 99, {"size": 5, "precise": 2}) # five 2-digit floats
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from collections.abc import Mapping
from typing import List, Optional, Union

from .bounds import is_number
from .constants import ONE_DAY_MS
from .errors import InvalidArgumentError
from .generators import float_array, int_array, rand_float, rand_int
from .logging_config import get_logger
from .rng import resolve_rng

logger = get_logger("api")


@dataclass(frozen=True)
class GenerationOption:
    """Array length and rounding for the numeric entry points.

    size: array length when > 0, otherwise a single value
    precise: decimal digits (0-20) when > 0, otherwise integer/raw float
    """

    size: Optional[int] = None
    precise: Optional[int] = None

    @property
    def wants_array(self) -> bool:
        return is_number(self.size) and self.size > 0

    @property
    def wants_precise(self) -> bool:
        return is_number(self.precise) and self.precise > 0

    @classmethod
    def from_value(cls, value) -> "GenerationOption":
        """Accept None, a GenerationOption, a mapping with size/precise, or
        a bare number, which is taken as ``precise`` (``random_float(12, 15, 2)``).
        """
        if value is None:
            return cls()
        if is_number(value):
            return cls(precise=value)
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(size=value.get("size"), precise=value.get("precise"))
        raise InvalidArgumentError(
            f"option must be a GenerationOption or mapping, got {type(value).__name__}"
        )


OptionLike = Union[GenerationOption, Mapping, int, None]


def _reject_option_bounds(*bounds) -> None:
    """An option in a bound position would silently mean "no bound"."""
    for bound in bounds:
        if isinstance(bound, (GenerationOption, Mapping)):
            raise InvalidArgumentError(
                "size/precise options go in option=, not in the bound arguments"
            )


def random_integer(
    min_value=None,
    max_value=None,
    option: OptionLike = None,
    *,
    rng: Optional[random.Random] = None,
) -> Union[int, float, List[int], List[float]]:
    """Random integer, integer list, or (with ``precise``) float(s).

    Args:
        min_value: lower bound, or the only bound
        max_value: upper bound
        option: GenerationOption / {"size": n, "precise": p}, or a number
            meaning precise

    Returns:
        int; list[int] when size > 0; whatever random_float returns
        when precise > 0
    """
    _reject_option_bounds(min_value, max_value)
    opt = GenerationOption.from_value(option)

    if opt.wants_precise:
        return random_float(min_value, max_value, opt, rng=rng)

    if opt.wants_array:
        return int_array(min_value, max_value, opt.size, rng=rng)

    return rand_int(min_value, max_value, rng=rng)


def random_float(
    min_value=None,
    max_value=None,
    option: OptionLike = None,
    *,
    rng: Optional[random.Random] = None,
) -> Union[float, List[float]]:
    """Random float, or a list of floats when ``option.size`` > 0.

    A numeric ``option`` is the precise digit count:
    ``random_float(12, 15, 2)`` is a 2-decimal float in [12, 15].
    """
    _reject_option_bounds(min_value, max_value)
    opt = GenerationOption.from_value(option)

    if opt.wants_array:
        return float_array(min_value, max_value, opt.size, opt.precise, rng=rng)

    return rand_float(min_value, max_value, opt.precise, rng=rng)


def random_bool(*, rng: Optional[random.Random] = None) -> bool:
    """Fair coin flip."""
    return resolve_rng(rng).random() < 0.5


def _now_ms() -> int:
    return int(time.time() * 1000)


def random_timestamp(
    days_before=None,
    days_after=None,
    *,
    now_ms: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Epoch milliseconds shifted by a random whole number of days.

    The day offset is drawn from [-days_before, days_after] (absent = 0)
    and added to ``now_ms`` (default: current wall clock).

    Returns:
        the timestamp as a decimal string
    """
    before = days_before if is_number(days_before) else 0
    after = days_after if is_number(days_after) else 0
    days = rand_int(-before, after, rng=rng)
    base = _now_ms() if now_ms is None else int(now_ms)
    logger.debug("timestamp offset: %d days", days)
    return str(base + days * ONE_DAY_MS)
