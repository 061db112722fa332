"""
Shared random source.

Every generator accepts an explicit ``rng``; when omitted they fall back
to one process-wide ``random.Random`` created on first use and seeded
from ``Config.random_seed`` (OS entropy when unset).

Usage:
    from randkit import rng
    rng.seed(42)              # reproducible from here on
    source = rng.get_rng()
"""

from __future__ import annotations

import random
import threading
from typing import Optional

from .config import get_config
from .logging_config import get_logger

logger = get_logger("rng")

_lock = threading.Lock()
_shared: Optional[random.Random] = None


def get_rng() -> random.Random:
    """Return the shared random source, creating it on first call."""
    global _shared
    with _lock:
        if _shared is None:
            seed_value = get_config().random_seed
            _shared = random.Random(seed_value)
            if seed_value is not None:
                logger.debug("shared rng seeded from config: %s", seed_value)
        return _shared


def seed(value=None) -> None:
    """Reseed the shared source (None = OS entropy)."""
    source = get_rng()
    source.seed(value)
    logger.debug("shared rng reseeded: %s", value)


def reset_rng() -> None:
    """Forget the shared source (for tests)"""
    global _shared
    with _lock:
        _shared = None


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else get_rng()
