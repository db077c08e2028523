"""Goal dispatcher plus the helpers the presentation layer needs around it.

`suggest_calorie_plans` is the single entry point for "what should I eat per
day for this goal". Custom calorie bounds, clamping and the UI-facing
maintenance preset keys live here too so every goal shares one rule set.
"""

from __future__ import annotations

from datetime import date

from targetkernel.engine.constants import (
    CUSTOM_GAIN_HEADROOM,
    CUSTOM_MAINTAIN_HEADROOM,
    CUSTOM_STEP,
    EXTREME_EDGE_CASE_THRESHOLD,
    HARD_FLOOR,
    HARD_HARD_STOP,
)
from targetkernel.engine.energy import compute_maintenance_range
from targetkernel.engine.gain import get_gain_plans
from targetkernel.engine.maintain import get_maintenance_plans
from targetkernel.engine.models import (
    BiometricProfile,
    CustomBounds,
    GoalType,
    MaintenancePreset,
    MaintenanceSummary,
    Plan,
    PlanKey,
    SafetyClass,
    SuggestedPlans,
    WarningLevel,
)
from targetkernel.engine.pace import today_local
from targetkernel.engine.safety import classify_calories, classify_gain_calories
from targetkernel.engine.units import clamp, kg_to_lb, round_down_to_25
from targetkernel.engine.weight_loss import get_baseline_deficit_plans, loss_custom_bounds
from targetkernel.logger import get_logger

logger = get_logger("targetkernel.engine.plans")

# Order the weight-loss plans are shown in.
LOSS_DISPLAY_ORDER = (
    PlanKey.more_sustainable,
    PlanKey.sustainable_floor_1200,
    PlanKey.standard,
    PlanKey.aggressive,
    PlanKey.cautious_minimum,
)

PRESET_UI_KEYS: dict[PlanKey, str] = {
    PlanKey.maintain_leaner: "leaner_side",
    PlanKey.maintain_standard: "maintain",
    PlanKey.maintain_flexible: "flexible",
    PlanKey.recomp_leaner: "leaner_side",
    PlanKey.recomp_standard: "maintain",
    PlanKey.recomp_muscle: "flexible",
}


def custom_bounds(goal: GoalType, maintenance_low: float, maintenance_high: float) -> CustomBounds:
    """Slider range for a user-entered calorie target."""
    match goal:
        case GoalType.lose:
            return loss_custom_bounds(maintenance_low)
        case GoalType.maintain | GoalType.recomp:
            upper = int(maintenance_high + CUSTOM_MAINTAIN_HEADROOM)
        case GoalType.gain:
            upper = int(maintenance_high + CUSTOM_GAIN_HEADROOM)
        case _:
            raise ValueError(f"Unknown goal '{goal}'")
    return CustomBounds(min=HARD_HARD_STOP, max=max(HARD_HARD_STOP, upper), step=CUSTOM_STEP)


def clamp_custom_calories(value: float, bounds: CustomBounds) -> int:
    """Clamp into bounds, snap down to 25, never below the minimum."""
    return max(bounds.min, round_down_to_25(clamp(value, bounds.min, bounds.max)))


def classify_custom_calories(
    goal: GoalType,
    calories: float,
    maintenance_low: float,
    maintenance_high: float,
) -> SafetyClass:
    if goal == GoalType.gain:
        return classify_gain_calories(calories, maintenance_low, maintenance_high)
    return classify_calories(calories)


def presentation_warning(goal: GoalType, plan: Plan) -> SafetyClass:
    """Warning to show for a plan card.

    Maintain and recomp presets carry no warning of their own; below the hard
    floor they borrow the weight-loss tiers. Other goals already have their
    warning baked into the plan.
    """
    if plan.calories_per_day is None:
        return SafetyClass(selectable=False, warning_level=WarningLevel.none)

    match goal:
        case GoalType.maintain | GoalType.recomp:
            if plan.calories_per_day < HARD_FLOOR:
                return classify_calories(plan.calories_per_day)
            return SafetyClass(selectable=plan.is_selectable, warning_level=WarningLevel.none)
        case _:
            return SafetyClass(
                selectable=plan.is_selectable,
                warning_level=plan.warning_level,
                warning_text=plan.warning_text,
            )


def maintenance_presets(goal: GoalType, maintenance_low: float, maintenance_high: float) -> list[MaintenancePreset]:
    """Maintain/recomp presets keyed the way the goal screen expects them."""
    return [
        MaintenancePreset(
            key=PRESET_UI_KEYS[plan.key],
            calories_per_day=plan.calories_per_day,
            is_recommended=plan.is_recommended,
            source_key=plan.key,
        )
        for plan in get_maintenance_plans(goal, maintenance_low, maintenance_high)
    ]


def maintenance_limit_warning(goal: GoalType, maintenance_low: float) -> bool:
    """Maintain/recomp with a maintenance low under 1100 needs a caution note."""
    return goal in (GoalType.maintain, GoalType.recomp) and maintenance_low < EXTREME_EDGE_CASE_THRESHOLD


def suggest_calorie_plans(
    goal: GoalType | str,
    profile: BiometricProfile,
    current_weight_lb: float | None = None,
    target_weight_lb: float | None = None,
    today: date | None = None,
) -> SuggestedPlans:
    """Maintenance range, then the plan generator for the goal.

    `current_weight_lb` defaults to the profile weight.
    """
    goal = GoalType(goal)
    maintenance = compute_maintenance_range(profile)
    low = maintenance.lower_maintenance
    high = maintenance.upper_maintenance
    summary = MaintenanceSummary(lower=low, upper=high, mid=maintenance.mid)
    if current_weight_lb is None:
        current_weight_lb = kg_to_lb(profile.weight_kg)
    start = today or today_local()

    match goal:
        case GoalType.lose:
            baseline = get_baseline_deficit_plans(
                low,
                high,
                profile.sex_at_birth,
                current_weight_lb=current_weight_lb,
                target_weight_lb=target_weight_lb,
                today=start,
            )
            visible = {p.key: p for p in baseline.plans if p.is_visible}
            result = SuggestedPlans(
                goal=goal,
                status=baseline.status,
                message=baseline.message,
                maintenance=summary,
                plans=tuple(visible[key] for key in LOSS_DISPLAY_ORDER if key in visible),
                custom=baseline.custom,
                default_plan_key=baseline.default_plan,
            )
        case GoalType.maintain | GoalType.recomp:
            plans = get_maintenance_plans(goal, low, high)
            result = SuggestedPlans(
                goal=goal,
                maintenance=summary,
                plans=plans,
                custom=custom_bounds(goal, low, high),
                default_plan_key=next(p.key for p in plans if p.is_recommended),
                maintenance_limit_warning=maintenance_limit_warning(goal, low),
            )
        case GoalType.gain:
            plans = get_gain_plans(low, high, current_weight_lb, target_weight_lb, today=start)
            result = SuggestedPlans(
                goal=goal,
                maintenance=summary,
                plans=plans,
                custom=custom_bounds(goal, low, high),
                default_plan_key=PlanKey.gain_lean,
            )
        case _:
            raise ValueError(f"Unknown goal '{goal}'")

    logger.debug(
        "Suggested %s plans: status=%s default=%s keys=%s",
        goal.value,
        result.status.value,
        result.default_plan_key.value,
        [p.key.value for p in result.plans],
    )
    return result
