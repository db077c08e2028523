"""Tests for pace / ETA projection."""

from datetime import date

import pytest

from targetkernel.engine.models import PaceDirection
from targetkernel.engine.pace import (
    compute_pace_and_eta,
    eta_weeks_for,
    pace_from_daily_delta,
    required_daily_deficit,
)
from tests.conftest import TODAY


class TestPaceFromDelta:
    def test_basic(self):
        assert pace_from_daily_delta(3600 / 7) == pytest.approx(1.0)

    def test_zero(self):
        assert pace_from_daily_delta(0) == 0


class TestEtaWeeks:
    def test_exact(self):
        assert eta_weeks_for(10, 1.0) == 10

    def test_float_noise_does_not_add_a_week(self):
        assert eta_weeks_for(7, 0.7) == 10

    def test_rounds_up(self):
        assert eta_weeks_for(10, 0.9) == 12


class TestComputePaceAndEta:
    def test_loss(self):
        result = compute_pace_and_eta(1940, 2170, 1550, 150, 140, today=TODAY)
        assert result.pace_lbs_per_week == 1.0
        assert result.eta_weeks == 11
        assert result.eta_date == date(2026, 3, 19)

    def test_round_trip(self):
        for calories in (1300, 1550, 1750):
            result = compute_pace_and_eta(1940, 2170, calories, 180, 150, today=TODAY)
            assert (result.eta_date - TODAY).days / 7 == result.eta_weeks

    def test_at_maintenance_no_pace(self):
        result = compute_pace_and_eta(1940, 2170, 2055, 150, 140, today=TODAY)
        assert result.pace_lbs_per_week is None
        assert result.eta_weeks is None
        assert result.eta_date is None

    def test_missing_target(self):
        result = compute_pace_and_eta(1940, 2170, 1550, 150, None, today=TODAY)
        assert result.eta_weeks is None

    def test_target_above_current_for_loss(self):
        result = compute_pace_and_eta(1940, 2170, 1550, 150, 160, today=TODAY)
        assert result.eta_weeks is None

    def test_gain_direction(self):
        result = compute_pace_and_eta(
            1940, 2170, 2275, 150, 160, direction=PaceDirection.gain, today=TODAY
        )
        assert result.pace_lbs_per_week == 0.4
        assert result.eta_weeks == 24

    def test_gain_direction_below_maintenance(self):
        result = compute_pace_and_eta(
            1940, 2170, 1900, 150, 160, direction=PaceDirection.gain, today=TODAY
        )
        assert result.eta_weeks is None

    def test_defaults_to_today(self):
        result = compute_pace_and_eta(1940, 2170, 1550, 150, 140)
        assert result.eta_date is not None


class TestRequiredDailyDeficit:
    def test_with_date(self):
        result = required_daily_deficit(200, 190, date(2026, 1, 31), today=TODAY)
        assert result.days_to_target == 30
        assert result.lbs_to_lose == 10.0
        assert result.required_daily_deficit == 1200

    def test_without_date(self):
        result = required_daily_deficit(200, 190, None, today=TODAY)
        assert result.required_daily_deficit == 0
        assert result.lbs_to_lose == 10.0

    def test_same_day_counts_as_one(self):
        result = required_daily_deficit(200, 199, TODAY, today=TODAY)
        assert result.days_to_target == 1
        assert result.required_daily_deficit == 3600

    def test_target_above_current(self):
        result = required_daily_deficit(180, 190, date(2026, 2, 1), today=TODAY)
        assert result.lbs_to_lose == 0
        assert result.required_daily_deficit == 0
