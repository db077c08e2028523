"""Goal-weight ranges and validation.

All comparisons happen in pounds; kilogram input is converted first. Rules
are checked in a fixed order so the caller always gets the most basic
violation (wrong direction) before finer ones (too small or too large a
change).
"""

from __future__ import annotations

import math

from targetkernel.engine.constants import (
    MAINTAIN_RECOMP_ABS_CAP_LB,
    MAINTAIN_RECOMP_PCT,
    MAX_DELTA_GAIN_PCT,
    MAX_DELTA_LOSE_PCT,
    MAX_WEIGHT_LB,
    MIN_DELTA_GAIN_LB,
    MIN_DELTA_LOSE_LB,
    MIN_WEIGHT_LB,
)
from targetkernel.engine.models import GoalType, GoalWeightRange, GoalWeightResult, WeightUnit
from targetkernel.engine.units import kg_to_lb, lb_to_kg, round_to_1dp


def _band_delta(current_weight_lb: float) -> float:
    return min(current_weight_lb * MAINTAIN_RECOMP_PCT, MAINTAIN_RECOMP_ABS_CAP_LB)


def goal_weight_range(current_weight_lb: float, goal: GoalType) -> GoalWeightRange:
    """Allowed target weights (lb) for a goal, plus a sensible default."""
    match goal:
        case GoalType.lose:
            return GoalWeightRange(
                min_lb=max(MIN_WEIGHT_LB, current_weight_lb * (1 - MAX_DELTA_LOSE_PCT)),
                max_lb=current_weight_lb - MIN_DELTA_LOSE_LB,
                recommended_lb=current_weight_lb - MIN_DELTA_LOSE_LB,
            )
        case GoalType.gain:
            return GoalWeightRange(
                min_lb=current_weight_lb + MIN_DELTA_GAIN_LB,
                max_lb=min(MAX_WEIGHT_LB, current_weight_lb * (1 + MAX_DELTA_GAIN_PCT)),
                recommended_lb=current_weight_lb + MIN_DELTA_GAIN_LB,
            )
        case GoalType.maintain | GoalType.recomp:
            delta = _band_delta(current_weight_lb)
            return GoalWeightRange(
                min_lb=current_weight_lb - delta,
                max_lb=current_weight_lb + delta,
                recommended_lb=current_weight_lb,
                delta_lb=delta,
            )
        case _:
            raise ValueError(f"Unknown goal '{goal}'")


def recommended_target_weight(current_weight_lb: float, goal: GoalType, unit: WeightUnit = WeightUnit.lb) -> float:
    recommended = goal_weight_range(current_weight_lb, goal).recommended_lb
    if unit == WeightUnit.kg:
        return round_to_1dp(lb_to_kg(recommended))
    return round_to_1dp(recommended)


def _fail(error_code: str, **params: float) -> GoalWeightResult:
    return GoalWeightResult(ok=False, error_code=error_code, params=params or None)


def validate_goal_weight(
    current_weight_lb: float,
    goal: GoalType | str,
    unit: WeightUnit,
    target: float,
) -> GoalWeightResult:
    """Check a user-entered goal weight.

    Returns ``ok=True`` with the target in lb (1 dp), or ``ok=False`` with an
    error code and any numbers the message needs.
    """
    goal = GoalType(goal)
    if target is None or not math.isfinite(target):
        return _fail("invalid_number")

    target_lb = kg_to_lb(target) if unit == WeightUnit.kg else target

    if not MIN_WEIGHT_LB <= target_lb <= MAX_WEIGHT_LB:
        if unit == WeightUnit.kg:
            return _fail(
                "range_kg",
                min_kg=round_to_1dp(lb_to_kg(MIN_WEIGHT_LB)),
                max_kg=round_to_1dp(lb_to_kg(MAX_WEIGHT_LB)),
            )
        return _fail("range_lb", min_lb=MIN_WEIGHT_LB, max_lb=MAX_WEIGHT_LB)

    allowed = goal_weight_range(current_weight_lb, goal)

    match goal:
        case GoalType.lose:
            if target_lb >= current_weight_lb:
                return _fail("lose_not_lower")
            if target_lb > allowed.max_lb:
                return _fail("lose_min_delta", min_delta=MIN_DELTA_LOSE_LB)
            if target_lb < allowed.min_lb:
                return _fail("lose_too_aggressive")
        case GoalType.gain:
            if target_lb <= current_weight_lb:
                return _fail("gain_not_higher")
            if target_lb < allowed.min_lb:
                return _fail("gain_min_delta", min_delta=MIN_DELTA_GAIN_LB)
            if target_lb > allowed.max_lb:
                return _fail("gain_too_aggressive")
        case GoalType.maintain | GoalType.recomp:
            if not allowed.min_lb <= target_lb <= allowed.max_lb:
                delta = allowed.delta_lb or 0.0
                if unit == WeightUnit.kg:
                    return _fail(f"{goal.value}_range_kg", delta=round_to_1dp(lb_to_kg(delta)))
                return _fail(f"{goal.value}_range_lb", delta=round_to_1dp(delta))

    return GoalWeightResult(ok=True, target_lb=round_to_1dp(target_lb))
