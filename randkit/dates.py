"""
Random formatted dates.

Formats a ``random_timestamp`` in UTC with arrow, which understands the
moment-style tokens (``YYYY-MM-DD``, ``MMM Do``, ``[literal]`` ...). A
pattern containing ``%`` is handed to ``strftime`` instead.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from typing import Optional

import arrow

from .api import random_timestamp
from .config import get_config

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_timestamp(timestamp_ms, fmt: str) -> str:
    """Format epoch milliseconds (int or decimal string) in UTC."""
    moment = arrow.get(_EPOCH + timedelta(milliseconds=int(timestamp_ms)))
    if "%" in fmt:
        return moment.strftime(fmt)
    return moment.format(fmt)


def random_date(
    days_before=None,
    days_after=None,
    fmt: Optional[str] = None,
    *,
    now_ms: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Random date within [-days_before, days_after] days of now.

    Args:
        days_before: days back from now (default 0)
        days_after: days ahead of now (default 0)
        fmt: arrow/moment pattern, default ``Config.date_format`` ("YYYY-MM-DD")
    """
    fmt = fmt or get_config().date_format
    timestamp = random_timestamp(days_before, days_after, now_ms=now_ms, rng=rng)
    return format_timestamp(timestamp, fmt)
