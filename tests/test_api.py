"""api module tests: numeric entry points, bool and timestamp"""
import random
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from randkit.api import (
    GenerationOption,
    random_integer,
    random_float,
    random_bool,
    random_timestamp,
)
from randkit.constants import MAX_NUM, ONE_DAY_MS
from randkit.errors import InvalidArgumentError


def _is_between(num, region):
    return region[0] <= num <= region[1]


class TestGenerationOption:
    """GenerationOption conversion and flags"""

    def test_defaults(self):
        opt = GenerationOption()
        assert opt.size is None
        assert opt.precise is None
        assert not opt.wants_array
        assert not opt.wants_precise

    def test_from_mapping(self):
        opt = GenerationOption.from_value({"size": 3, "precise": 2, "other": 1})
        assert opt == GenerationOption(size=3, precise=2)
        assert opt.wants_array and opt.wants_precise

    def test_from_instance_and_none(self):
        opt = GenerationOption(size=1)
        assert GenerationOption.from_value(opt) is opt
        assert GenerationOption.from_value(None) == GenerationOption()

    def test_invalid_type(self):
        with pytest.raises(InvalidArgumentError):
            GenerationOption.from_value("size=3")

    def test_number_means_precise(self):
        """A bare number is the precise digit count"""
        assert GenerationOption.from_value(2) == GenerationOption(precise=2)

    def test_non_positive_values_are_off(self):
        opt = GenerationOption(size=0, precise=-1)
        assert not opt.wants_array
        assert not opt.wants_precise

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            GenerationOption().size = 3


class TestRandomInteger:
    """random_integer dispatch"""

    def test_ranges(self, rng):
        assert _is_between(random_integer(12, 15, rng=rng), [12, 15])
        assert _is_between(random_integer(-100, 500, rng=rng), [-100, 500])
        assert _is_between(random_integer(100, -100, rng=rng), [-100, 100])
        assert _is_between(random_integer(12, rng=rng), [0, 12])
        assert _is_between(random_integer(-100, rng=rng), [-100, 0])

    def test_zero(self, rng):
        assert random_integer(0, rng=rng) == 0

    def test_no_arguments_positive(self, rng):
        value = random_integer(rng=rng)
        assert isinstance(value, int)
        assert 0 < value <= MAX_NUM

    def test_size_gives_int_list(self, rng):
        values = random_integer(option={"size": 15}, rng=rng)
        assert len(values) == 15
        assert all(isinstance(v, int) for v in values)

    def test_size_with_bounds(self, rng):
        values = random_integer(1, 6, GenerationOption(size=10), rng=rng)
        assert len(values) == 10
        assert all(1 <= v <= 6 for v in values)

    def test_precise_delegates_to_float_list(self, rng):
        """size + precise: list of rounded floats"""
        values = random_integer(15, 99, {"size": 15, "precise": 2}, rng=rng)
        assert len(values) == 15
        for v in values:
            assert _is_between(v, [15, 99])
            assert round(v, 2) == v
        assert len(",".join(str(v) for v in values)) < 90

    def test_precise_delegates_to_float(self, rng):
        value = random_integer(12, 15, {"precise": 3}, rng=rng)
        assert isinstance(value, float)
        assert _is_between(value, [12, 15])
        assert round(value, 3) == value

    def test_zero_size_is_scalar(self, rng):
        assert isinstance(random_integer(1, 5, {"size": 0}, rng=rng), int)

    def test_option_as_bound_rejected(self, rng):
        """Options in a bound position point the caller to option="""
        with pytest.raises(InvalidArgumentError, match="option="):
            random_integer({"size": 15}, rng=rng)
        with pytest.raises(InvalidArgumentError):
            random_integer(1, GenerationOption(size=2), rng=rng)


class TestRandomFloat:
    """random_float dispatch"""

    def test_scalar_precise(self, rng):
        value = random_float(12, 15, {"precise": 2}, rng=rng)
        assert _is_between(value, [12, 15])
        assert round(value, 2) == value

    def test_negative_range(self, rng):
        assert _is_between(random_float(-12, 15, {"precise": 2}, rng=rng), [-12, 15])

    def test_numeric_third_argument_is_precise(self, rng):
        """random_float(12, 15, 2): 2-decimal float in range"""
        for _ in range(200):
            value = random_float(12, 15, 2, rng=rng)
            assert isinstance(value, float)
            assert _is_between(value, [12, 15])
            assert round(value, 2) == value

    def test_option_as_bound_rejected(self, rng):
        with pytest.raises(InvalidArgumentError):
            random_float({"size": 3}, rng=rng)

    def test_array(self, rng):
        values = random_float(20, 99, {"size": 15, "precise": 2}, rng=rng)
        assert len(values) == 15
        assert all(_is_between(v, [20, 99]) for v in values)
        assert len(",".join(str(v) for v in values)) < 90

    def test_unbounded(self, rng):
        value = random_float(rng=rng)
        assert isinstance(value, float)
        assert _is_between(value, [0, MAX_NUM])


class TestRandomBool:
    """random_bool"""

    def test_returns_bool(self, rng):
        assert random_bool(rng=rng) in (True, False)
        assert isinstance(random_bool(rng=rng), bool)

    def test_both_outcomes(self, rng):
        assert {random_bool(rng=rng) for _ in range(200)} == {True, False}

    def test_roughly_fair(self, rng):
        hits = sum(random_bool(rng=rng) for _ in range(10_000))
        assert 4500 < hits < 5500


class TestRandomTimestamp:
    """random_timestamp offsets"""

    NOW = 1_700_000_000_000

    def test_no_offset(self, rng):
        assert random_timestamp(now_ms=self.NOW, rng=rng) == str(self.NOW)

    def test_returns_decimal_string(self, rng):
        result = random_timestamp(3, 5, now_ms=self.NOW, rng=rng)
        assert isinstance(result, str)
        assert result.isdigit()

    def test_offset_in_whole_days(self, rng):
        """Offset stays in [-before, after] whole days"""
        offsets = set()
        for _ in range(500):
            delta = int(random_timestamp(3, 5, now_ms=self.NOW, rng=rng)) - self.NOW
            assert delta % ONE_DAY_MS == 0
            days = delta // ONE_DAY_MS
            assert -3 <= days <= 5
            offsets.add(days)
        assert min(offsets) == -3
        assert max(offsets) == 5

    def test_only_before(self, rng):
        for _ in range(100):
            delta = int(random_timestamp(7, now_ms=self.NOW, rng=rng)) - self.NOW
            assert -7 * ONE_DAY_MS <= delta <= 0

    def test_uses_wall_clock(self):
        with patch("randkit.api.time.time", return_value=1_700_000_000.5):
            assert random_timestamp(rng=random.Random(0)) == "1700000000500"
