"""Tests for rounding, conversion and date helpers."""

from datetime import date

import pytest

from targetkernel.engine.units import (
    age_from_dob,
    clamp,
    days_between,
    floor_to_10,
    kg_to_lb,
    lb_to_kg,
    normalize_sex,
    parse_dob,
    round_down_to_25,
    round_to_1dp,
    round_to_10,
    round_to_nearest_25,
    round_up_to_25,
)


class TestRounding:
    def test_floor_to_10(self):
        assert floor_to_10(1339.9) == 1330

    def test_round_to_10_half_up(self):
        assert round_to_10(1235) == 1240
        assert round_to_10(1234) == 1230

    def test_round_down_to_25(self):
        assert round_down_to_25(2026) == 2025
        assert round_down_to_25(2049.99) == 2025

    def test_round_up_to_25(self):
        assert round_up_to_25(2026) == 2050
        assert round_up_to_25(2025) == 2025

    def test_nearest_25_is_half_up_not_bankers(self):
        assert round_to_nearest_25(2062.5) == 2075
        assert round_to_nearest_25(2037.5) == 2050
        assert round_to_nearest_25(2055) == 2050

    def test_round_to_1dp(self):
        assert round_to_1dp(0.25) == 0.3
        assert round_to_1dp(0.98194) == 1.0

    def test_rounders_return_ints(self):
        assert isinstance(round_down_to_25(1000.0), int)
        assert isinstance(floor_to_10(1000.0), int)


class TestClamp:
    def test_inside(self):
        assert clamp(5, 0, 10) == 5

    def test_below(self):
        assert clamp(-1, 0, 10) == 0

    def test_above(self):
        assert clamp(11, 0, 10) == 10


class TestConversions:
    def test_kg_to_lb(self):
        assert kg_to_lb(1) == pytest.approx(2.2046226218)

    def test_lb_to_kg_inverse(self):
        assert lb_to_kg(kg_to_lb(68)) == pytest.approx(68)


class TestDates:
    def test_days_between_is_absolute(self):
        assert days_between(date(2026, 1, 1), date(2026, 1, 31)) == 30
        assert days_between(date(2026, 1, 31), date(2026, 1, 1)) == 30

    def test_age_before_birthday(self):
        assert age_from_dob(date(1990, 6, 15), date(2026, 6, 14)) == 35

    def test_age_on_birthday(self):
        assert age_from_dob(date(1990, 6, 15), date(2026, 6, 15)) == 36

    def test_parse_dob(self):
        assert parse_dob("1990-06-15") == date(1990, 6, 15)

    def test_parse_dob_impossible_date(self):
        with pytest.raises(ValueError):
            parse_dob("2001-02-30")

    def test_parse_dob_malformed(self):
        with pytest.raises(ValueError):
            parse_dob("15/06/1990")


class TestNormalizeSex:
    def test_case_and_whitespace(self):
        assert normalize_sex(" Female ") == "female"
        assert normalize_sex("MALE") == "male"

    def test_anything_else_is_unknown(self):
        assert normalize_sex("other") == "unknown"
        assert normalize_sex("") == "unknown"
        assert normalize_sex(None) == "unknown"
