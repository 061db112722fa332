"""
randkit central configuration module

All tunables live in one frozen object.
Precedence: environment variable > config.json > default

Usage:
    from randkit.config import get_config
    cfg = get_config()
    print(cfg.date_format)  # YYYY-MM-DD
"""

import os
import json
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Config:
    """Central configuration (immutable)"""

    # Random source
    random_seed: Optional[int] = None   # None = seeded from OS entropy
    max_precise: int = 20               # upper bound for decimal digits

    # Dates
    date_format: str = "YYYY-MM-DD"


def _str_to_optional_int(s) -> Optional[int]:
    """Empty string / "none" disables the seed"""
    if s is None:
        return None
    text = str(s).strip()
    if not text or text.lower() == "none":
        return None
    return int(text)


# ENV_NAME -> (field_name, type_converter)
_ENV_MAP = {
    "RANDKIT_SEED": ("random_seed", _str_to_optional_int),
    "RANDKIT_MAX_PRECISE": ("max_precise", int),
    "RANDKIT_DATE_FORMAT": ("date_format", str),
}


_FIELD_BOUNDS = {
    "max_precise": (0, 20),
}


def _clamp(field_name, value):
    """Clamp a value into its allowed range"""
    if field_name in _FIELD_BOUNDS and value is not None:
        lo, hi = _FIELD_BOUNDS[field_name]
        return type(value)(max(lo, min(hi, value)))
    return value


def _load_config_file(path: str = "config.json") -> dict:
    """Load config.json (empty dict when missing or invalid)"""
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except (json.JSONDecodeError, OSError):
        return {}


def load_config(config_path: str = "config.json") -> Config:
    """Load configuration (env > config.json > defaults)"""
    file_config = _load_config_file(config_path)
    overrides = {}

    for env_name, (field_name, converter) in _ENV_MAP.items():
        env_val = os.environ.get(env_name)
        if env_val is not None:
            try:
                overrides[field_name] = _clamp(field_name, converter(env_val))
            except (ValueError, TypeError):
                pass  # unconvertible values are ignored
            continue

        if field_name in file_config:
            try:
                overrides[field_name] = _clamp(field_name, converter(file_config[field_name]))
            except (ValueError, TypeError):
                pass

    return Config(**overrides)


_cached_config: Optional[Config] = None


def get_config(config_path: str = "config.json") -> Config:
    """Return the config singleton (loads .env and config on first call)"""
    global _cached_config
    if _cached_config is None:
        load_dotenv()
        _cached_config = load_config(config_path)
    return _cached_config


def reset_config() -> None:
    """Drop the cached config (for tests)"""
    global _cached_config
    _cached_config = None
