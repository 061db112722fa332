"""
Process-wide read-only tables.

Tuples and strings only, so nothing here can be mutated by callers.
"""

# milliseconds in one day
ONE_DAY_MS = 86_400_000

# upper bound when no bound implies one
MAX_NUM = 2 ** 32 - 1

# decimal digits accepted by `precise`
MIN_PRECISE = 0
MAX_PRECISE = 20

# Default word source. Users are expected to pass their own list.
DEFAULT_WORDS = (
    "第一", "权威", "儿童", "成人", "职场",
    "英语", "健康", "幼儿", "中学", "小学",
)

# Biased alphanumeric alphabet: dashes and the duplicated "G" are
# intentional and skew the distribution.
DEFAULT_CHARS = (
    "abcdefg-hijklmnopqrstu-vwxyz-"
    "ABCDEFGHIG-KLMNOPQRSTU-VWXYZ-0123456789"
)
