"""
Token packer: random strings of an exact length budget.

Tokens are drawn from a source sequence (a word list, or a string whose
characters are the tokens) and concatenated until the budget is met.
The last token is cut down to fit, except when the caller asked for one
whole token by passing the source list as the first argument.

    random_words(12, 15)             # 12..15 units from the built-in words
    random_words(["推广", "搜索"])    # exactly one word, untouched
    random_words(15, ["推广", "搜索"])# exactly 15 units from that list
    random_chars(8)                  # 8 characters from the alphabet

Length is counted in len() units of the tokens (characters for str).
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from .bounds import is_number
from .constants import DEFAULT_CHARS, DEFAULT_WORDS
from .generators import rand_int
from .logging_config import get_logger
from .rng import resolve_rng
from .selector import pick_index, require_source

logger = get_logger("packer")


def _is_source_list(value) -> bool:
    # str is a valid source but never counts as the "source argument" shape
    return isinstance(value, (list, tuple))


def pack_tokens(
    source: Sequence[str],
    length: int,
    *,
    whole_token: bool = False,
    rng: Optional[random.Random] = None,
) -> str:
    """Concatenate random tokens from ``source`` up to ``length`` units.

    At most ``length`` tokens are drawn. A token that would overshoot is
    truncated to fill the remainder exactly, or kept whole when
    ``whole_token`` is set; either way packing stops there.

    Raises:
        InvalidArgumentError: source is empty
    """
    require_source(source)
    rng = resolve_rng(rng)
    target = max(0, int(length))

    pieces = []
    count = 0
    for _ in range(target):
        if count >= target:
            break
        token = source[pick_index(source, rng)]
        count += len(token)

        if count <= target:
            pieces.append(token)
        elif whole_token:
            pieces.append(token)
            break
        else:
            pieces.append(token[: target - count + len(token)])
            break

    result = "".join(pieces)
    logger.debug("packed %d pieces into %d units (target %d)", len(pieces), len(result), target)
    return result


def random_words(
    min_len=None,
    max_len=None,
    source: Optional[Sequence[str]] = None,
    *,
    rng: Optional[random.Random] = None,
) -> str:
    """Random string packed from a word source.

    Call shapes:
        random_words(words)            one whole word from ``words``
        random_words(n, words)         exactly ``n`` units from ``words``
        random_words(lo, hi[, source]) between ``lo`` and ``hi`` units

    A missing ``min_len`` means exactly one unit (``max_len`` is then
    ignored); a missing (or zero) ``max_len`` means ``min_len``.
    """
    whole_token = False

    if _is_source_list(min_len):
        source = min_len
        low = high = 1
        whole_token = True
    elif _is_source_list(max_len):
        source = max_len
        low = high = min_len if is_number(min_len) else 1
    elif not is_number(min_len):
        low = high = 1
    else:
        low = min_len
        high = max_len if is_number(max_len) and max_len else low

    if source is None:
        source = DEFAULT_WORDS

    rng = resolve_rng(rng)
    target = rand_int(low, high, rng=rng)
    return pack_tokens(source, target, whole_token=whole_token, rng=rng)


def random_chars(
    min_len=None,
    max_len=None,
    *,
    rng: Optional[random.Random] = None,
) -> str:
    """Random string from the biased ``[A-Za-z0-9-]`` alphabet."""
    return random_words(min_len, max_len, DEFAULT_CHARS, rng=rng)
