import os
import sys
import random
import pytest

# put the project root on sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from randkit.config import reset_config
from randkit.rng import reset_rng


@pytest.fixture(autouse=True)
def fresh_state():
    """Each test starts with no cached config and no shared rng"""
    reset_config()
    reset_rng()
    yield
    reset_config()
    reset_rng()


@pytest.fixture
def rng():
    """Seeded random source for deterministic draws"""
    return random.Random(1234)


@pytest.fixture
def word_source():
    """Three two-character words"""
    return ["推广", "搜索", "营销"]
