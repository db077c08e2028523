"""Tests for the weight-loss plan generator."""

from targetkernel.engine.models import PlanKey, PlanStatus, SexAtBirth, WarningLevel
from targetkernel.engine.weight_loss import (
    EXTREME_EDGE_CASE_MESSAGE,
    get_baseline_deficit_plans,
    loss_custom_bounds,
)
from tests.conftest import TODAY


def _plans(low, high, sex=SexAtBirth.female, **kwargs):
    return get_baseline_deficit_plans(low, high, sex, today=TODAY, **kwargs)


def _recommended(result):
    return [p for p in result.plans if p.is_recommended]


class TestReferenceRange:
    """Maintenance 1940-2170 (mid 2055), female."""

    def test_calories(self):
        result = _plans(1940, 2170)
        assert result.status == PlanStatus.ok
        assert result.plan(PlanKey.more_sustainable).calories_per_day == 1750
        assert result.plan(PlanKey.standard).calories_per_day == 1550
        assert result.plan(PlanKey.aggressive).calories_per_day == 1300

    def test_standard_recommended_and_default(self):
        result = _plans(1940, 2170)
        assert [p.key for p in _recommended(result)] == [PlanKey.standard]
        assert result.default_plan == PlanKey.standard

    def test_cautious_minimum_hidden(self):
        cautious = _plans(1940, 2170).plan(PlanKey.cautious_minimum)
        assert cautious.is_visible is False
        assert cautious.calories_per_day is None

    def test_no_escape_hatch(self):
        assert _plans(1940, 2170).plan(PlanKey.sustainable_floor_1200) is None

    def test_custom_bounds(self):
        custom = _plans(1940, 2170).custom
        assert (custom.min, custom.max, custom.step) == (700, 2140, 25)

    def test_idempotent(self):
        assert _plans(1940, 2170) == _plans(1940, 2170)


class TestExtremeEdgeCase:
    def test_all_named_plans_hidden(self):
        result = _plans(1000, 1200)
        assert result.status == PlanStatus.extreme_edge_case
        assert result.message == EXTREME_EDGE_CASE_MESSAGE
        assert len(result.plans) == 4
        for plan in result.plans:
            assert plan.is_visible is False
            assert plan.is_selectable is False
            assert plan.is_recommended is False
            assert plan.calories_per_day is None
            assert plan.warning_level == WarningLevel.none

    def test_defaults_to_custom(self):
        result = _plans(1000, 1200)
        assert result.default_plan == PlanKey.custom
        assert (result.custom.min, result.custom.max) == (700, 1200)

    def test_threshold_is_exclusive(self):
        assert _plans(1100, 1300).status == PlanStatus.ok


class TestLowMaintenance:
    def test_male_escape_hatch_and_cautious_minimum(self):
        # mid 1500: more sustainable 1200 < 1400 soft floor, standard 1000 red
        result = _plans(1450, 1550, sex=SexAtBirth.male)
        assert result.plan(PlanKey.more_sustainable).is_visible is False

        hatch = result.plan(PlanKey.sustainable_floor_1200)
        assert hatch.calories_per_day == 1200
        assert hatch.title == "More sustainable"
        assert hatch.subtitle
        assert hatch.is_recommended is False

        cautious = result.plan(PlanKey.cautious_minimum)
        assert cautious.is_visible is True
        assert cautious.calories_per_day == 1200
        assert cautious.subtitle == "Lower safety boundary"
        assert cautious.warning_level == WarningLevel.none
        assert cautious.is_recommended is False

        assert result.plan(PlanKey.standard).warning_level == WarningLevel.red
        assert _recommended(result) == []
        assert result.default_plan == PlanKey.cautious_minimum

    def test_female_defaults_to_escape_hatch(self):
        # mid 1500: cautious minimum needs low < 1375 for women
        result = _plans(1400, 1600)
        assert result.plan(PlanKey.cautious_minimum).is_visible is False
        assert result.plan(PlanKey.sustainable_floor_1200) is not None
        assert result.default_plan == PlanKey.sustainable_floor_1200

    def test_no_escape_hatch_below_1400(self):
        result = _plans(1300, 1500, sex=SexAtBirth.male)
        assert result.plan(PlanKey.sustainable_floor_1200) is None

    def test_more_sustainable_recommended_when_standard_warned(self):
        # mid 1650: standard 1150 neutral, more sustainable 1350 >= 1300
        result = _plans(1600, 1700)
        assert result.plan(PlanKey.standard).warning_level == WarningLevel.neutral
        assert [p.key for p in _recommended(result)] == [PlanKey.more_sustainable]
        assert result.default_plan == PlanKey.more_sustainable

    def test_warned_plans_never_recommended(self):
        for low in range(1100, 2600, 50):
            result = _plans(low, low + 200)
            recommended = _recommended(result)
            assert len(recommended) <= 1
            for plan in recommended:
                assert plan.warning_level == WarningLevel.none

    def test_unselectable_below_hard_stop(self):
        for low in range(1100, 1500, 25):
            for plan in _plans(low, low + 100).plans:
                if plan.calories_per_day is not None and plan.calories_per_day < 700:
                    assert plan.is_selectable is False


class TestPaceOnPlans:
    def test_eta_from_plan_calories(self):
        result = _plans(1940, 2170, current_weight_lb=150, target_weight_lb=140)
        standard = result.plan(PlanKey.standard)
        assert standard.pace_lbs_per_week == 1.0
        assert standard.eta_weeks == 11
        assert standard.eta_date_iso == "2026-03-19"

    def test_no_weights_no_eta(self):
        standard = _plans(1940, 2170).plan(PlanKey.standard)
        assert standard.pace_lbs_per_week is None
        assert standard.eta_weeks is None
        assert standard.eta_date_iso is None


class TestLossCustomBounds:
    def test_floor_at_hard_stop(self):
        bounds = loss_custom_bounds(400)
        assert (bounds.min, bounds.max) == (700, 700)
