"""
Uniform selection from a source sequence (with replacement).

Usage:
    from randkit.selector import select_from
    select_from(["a", "b", "c"], 5)   # e.g. ['b', 'b', 'a', 'c', 'a']
"""

from __future__ import annotations

import random
from typing import Any, List, Optional, Sequence

from .constants import DEFAULT_WORDS
from .errors import InvalidArgumentError
from .generators import normalize_size, rand_int
from .rng import resolve_rng


def require_source(source: Sequence) -> Sequence:
    """Reject empty sources: there is no index to draw."""
    if len(source) == 0:
        raise InvalidArgumentError("source sequence must not be empty")
    return source


def pick_index(source: Sequence, rng: random.Random) -> int:
    """Uniform index into a non-empty ``source``."""
    return rand_int(0, len(source) - 1, rng=rng)


def select_from(
    source: Optional[Sequence[Any]] = None,
    count=None,
    *,
    rng: Optional[random.Random] = None,
) -> List[Any]:
    """Pick ``count`` elements from ``source`` uniformly, duplicates allowed.

    Args:
        source: candidates (default: built-in word list)
        count: number of picks (default 1, negative means none)

    Returns:
        list of exactly max(count, 0) elements, in pick order

    Raises:
        InvalidArgumentError: source is empty
    """
    if source is None:
        source = DEFAULT_WORDS
    require_source(source)
    rng = resolve_rng(rng)
    picks = 1 if count is None else normalize_size(count)
    return [source[pick_index(source, rng)] for _ in range(picks)]
