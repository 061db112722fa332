"""
randkit: quick pseudo-random values for fixtures and test data.

Not suitable for anything security related.

Usage:
    import randkit
    randkit.random_integer(12, 15)
    randkit.random_float(0, 1, {"precise": 2})
    randkit.random_words(12, 15)
    randkit.random_chars(8)
    randkit.random_date(30, 0, "YYYY-MM-DD")
"""

from .api import (
    GenerationOption,
    random_bool,
    random_float,
    random_integer,
    random_timestamp,
)
from .bounds import BoundPair, resolve_bounds
from .dates import format_timestamp, random_date
from .errors import InvalidArgumentError, RandkitError
from .packer import pack_tokens, random_chars, random_words
from .rng import get_rng, seed
from .selector import select_from

__version__ = "0.1.0"

__all__ = [
    "BoundPair",
    "GenerationOption",
    "InvalidArgumentError",
    "RandkitError",
    "format_timestamp",
    "get_rng",
    "pack_tokens",
    "random_bool",
    "random_chars",
    "random_date",
    "random_float",
    "random_integer",
    "random_timestamp",
    "random_words",
    "resolve_bounds",
    "seed",
    "select_from",
]
