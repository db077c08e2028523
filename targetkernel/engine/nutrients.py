"""Suggested daily nutrient targets.

Each target is computed independently, snapped to its slider step and
clamped into its slider range. Body weight is in pounds throughout.
"""

from __future__ import annotations

from enum import Enum

from targetkernel.engine.constants import (
    ACTIVE_LEVELS,
    CARBS_BOUNDS,
    CARBS_LOSS_BOUNDS,
    CARBS_LOSS_TIERS,
    CARBS_TIERS,
    FIBER_ACTIVE_BONUS_G,
    FIBER_BASE_G,
    FIBER_BOUNDS,
    FIBER_HEAVY_BONUS_G,
    FIBER_HEAVY_WEIGHT_LB,
    PROTEIN_BOUNDS,
    PROTEIN_MULTIPLIER,
    PROTEIN_MULTIPLIER_ACTIVE,
    SODIUM_BOUNDS,
    SODIUM_MG,
    SODIUM_MG_ACTIVE,
    SUGAR_BOUNDS,
    SUGAR_G,
    WATER_BONUS_ML,
    WATER_BOUNDS,
    WATER_ML_PER_KG,
    NutrientBounds,
)
from targetkernel.engine.energy import activity_key
from targetkernel.engine.models import GoalType, NutrientTarget, NutrientTargets, SexAtBirth
from targetkernel.engine.units import clamp, lb_to_kg, normalize_sex, round_to_step
from targetkernel.logger import get_logger

logger = get_logger("targetkernel.engine.nutrients")


def _target(raw: float, bounds: NutrientBounds) -> NutrientTarget:
    value = clamp(round_to_step(raw, bounds.step), bounds.min, bounds.max)
    return NutrientTarget(
        value=int(value),
        min=int(bounds.min),
        max=int(bounds.max),
        step=int(bounds.step),
    )


def _carbs_tier(activity: str, tiers: tuple[int, int, int]) -> int:
    sedentary, moderate, active = tiers
    if activity == "sedentary":
        return sedentary
    if activity in ("light", "moderate"):
        return moderate
    # high, very_high and anything unrecognised
    return active


def protein_target(weight_lb: float, activity: str) -> NutrientTarget:
    multiplier = PROTEIN_MULTIPLIER_ACTIVE if activity in ACTIVE_LEVELS else PROTEIN_MULTIPLIER
    return _target(weight_lb * multiplier, PROTEIN_BOUNDS)


def fiber_target(weight_lb: float, sex: str, activity: str) -> NutrientTarget:
    grams = FIBER_BASE_G[sex]
    if weight_lb > FIBER_HEAVY_WEIGHT_LB:
        grams += FIBER_HEAVY_BONUS_G
    if activity in ACTIVE_LEVELS:
        grams += FIBER_ACTIVE_BONUS_G
    return _target(grams, FIBER_BOUNDS)


def carbs_target(goal: GoalType, activity: str) -> NutrientTarget:
    if goal == GoalType.lose:
        return _target(_carbs_tier(activity, CARBS_LOSS_TIERS), CARBS_LOSS_BOUNDS)
    return _target(_carbs_tier(activity, CARBS_TIERS), CARBS_BOUNDS)


def sodium_target(activity: str) -> NutrientTarget:
    return _target(SODIUM_MG_ACTIVE if activity in ACTIVE_LEVELS else SODIUM_MG, SODIUM_BOUNDS)


def water_target(current_weight_lb: float, activity: str) -> NutrientTarget:
    ml = WATER_ML_PER_KG * lb_to_kg(current_weight_lb) + WATER_BONUS_ML.get(activity, 0)
    return _target(ml, WATER_BOUNDS)


def compute_suggested_targets(
    goal: GoalType | str,
    current_weight_lb: float,
    target_weight_lb: float | None,
    sex_at_birth: SexAtBirth | str | None,
    activity_level: str | Enum | None,
) -> NutrientTargets:
    """Protein, fiber, carbs, sugar, sodium and water for a profile.

    Protein and fiber scale with the target weight when one is set, since
    that is the body the plan is working toward. Water follows the current
    weight.
    """
    goal = GoalType(goal)
    reference_lb = target_weight_lb if target_weight_lb and target_weight_lb > 0 else current_weight_lb
    sex = normalize_sex(sex_at_birth.value if isinstance(sex_at_birth, Enum) else sex_at_birth)
    activity = activity_key(activity_level)

    targets = NutrientTargets(
        protein_g_min=protein_target(reference_lb, activity),
        fiber_g_min=fiber_target(reference_lb, sex, activity),
        carbs_g_max=carbs_target(goal, activity),
        sugar_g_max=_target(SUGAR_G, SUGAR_BOUNDS),
        sodium_mg_max=sodium_target(activity),
        water_ml=water_target(current_weight_lb, activity),
    )
    logger.debug(
        "Nutrient targets for %s/%s/%s: protein=%s fiber=%s carbs=%s",
        goal.value,
        sex,
        activity,
        targets.protein_g_min.value,
        targets.fiber_g_min.value,
        targets.carbs_g_max.value,
    )
    return targets
