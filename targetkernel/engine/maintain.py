"""Maintain and recomp presets from the maintenance range bounds.

Warnings are not baked into these plans; presentation applies the safety
classifier (see plans.presentation_warning).
"""

from __future__ import annotations

from targetkernel.engine.constants import HARD_HARD_STOP
from targetkernel.engine.models import GoalType, Plan, PlanKey
from targetkernel.engine.units import clamp, round_to_nearest_25, round_up_to_25
from targetkernel.logger import get_logger

logger = get_logger("targetkernel.engine.maintain")

# (key, title, subtitle) for leaner / standard / flexible
_PRESETS: dict[GoalType, tuple[tuple[PlanKey, str, str], ...]] = {
    GoalType.maintain: (
        (PlanKey.maintain_leaner, "Leaner side", "Lower end of your maintenance range."),
        (PlanKey.maintain_standard, "Maintain", "Middle of your maintenance range."),
        (PlanKey.maintain_flexible, "Flexible", "Upper end of your maintenance range."),
    ),
    GoalType.recomp: (
        (PlanKey.recomp_leaner, "Leaner recomp", "Slightly favours fat loss."),
        (PlanKey.recomp_standard, "Recomp", "Balanced fat loss and muscle gain."),
        (PlanKey.recomp_muscle, "Muscle focus", "Slightly favours muscle gain."),
    ),
}


def maintenance_preset_calories(low: float, high: float) -> tuple[int, int, int]:
    """(lean, mid, flex) calories. `mid` is clamped into [lean, flex]."""
    lean = round_up_to_25(low)
    flex = round_up_to_25(high)
    if flex < lean:
        flex = lean
    mid = int(clamp(round_to_nearest_25((low + high) / 2), lean, flex))
    return lean, mid, flex


def get_maintenance_plans(goal: GoalType | str, maintenance_low: float, maintenance_high: float) -> tuple[Plan, ...]:
    """Leaner / standard / flexible presets, de-duplicated when values collapse.

    The standard preset is always present and always recommended.
    """
    goal = GoalType(goal)
    match goal:
        case GoalType.maintain | GoalType.recomp:
            presets = _PRESETS[goal]
        case _:
            raise ValueError(f"Maintenance presets do not apply to goal '{goal}'")

    lean, mid, flex = maintenance_preset_calories(maintenance_low, maintenance_high)

    keep_lean = lean != mid
    keep_flex = flex != mid
    slots = [
        (presets[0], lean, keep_lean),
        (presets[1], mid, True),
        (presets[2], flex, keep_flex),
    ]

    plans = tuple(
        Plan(
            key=key,
            title=title,
            subtitle=subtitle,
            calories_per_day=calories,
            is_visible=True,
            is_selectable=calories >= HARD_HARD_STOP,
            is_recommended=key == presets[1][0],
        )
        for (key, title, subtitle), calories, keep in slots
        if keep
    )
    logger.debug("%s presets: lean=%s mid=%s flex=%s kept=%s", goal.value, lean, mid, flex, len(plans))
    return plans
