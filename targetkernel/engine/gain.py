"""Weight-gain presets, derived from a weekly pace.

Weekly gain rates convert to calories and round UP to 25 so a gain target
never under-shoots. Out-of-band targets only get an orange advisory; the
700-calorie hard stop is the one thing that makes a gain plan unselectable.
"""

from __future__ import annotations

from datetime import date

from targetkernel.engine.constants import CALORIES_PER_LB, GAIN_PRESET_PACES, HARD_HARD_STOP
from targetkernel.engine.models import PaceDirection, Plan, PlanKey
from targetkernel.engine.pace import compute_pace_and_eta, today_local
from targetkernel.engine.safety import classify_gain_calories
from targetkernel.engine.units import round_up_to_25
from targetkernel.logger import get_logger

logger = get_logger("targetkernel.engine.gain")

_PRESETS: tuple[tuple[PlanKey, str, str], ...] = (
    (PlanKey.gain_lean, "Lean gain", "Slow, mostly lean weight gain."),
    (PlanKey.gain_standard, "Standard gain", "A steady, moderate surplus."),
    (PlanKey.gain_aggressive, "Aggressive gain", "Fastest pace, more fat gain likely."),
)


def gain_calories(maintenance_mid: float, pace_lbs_per_week: float) -> int:
    return round_up_to_25(maintenance_mid + pace_lbs_per_week * CALORIES_PER_LB / 7)


def get_gain_plans(
    maintenance_low: float,
    maintenance_high: float,
    current_weight_lb: float | None = None,
    target_weight_lb: float | None = None,
    today: date | None = None,
) -> tuple[Plan, ...]:
    """Lean / standard / aggressive gain plans. Lean is always recommended.

    Advisories never block a gain plan, but the 700-calorie hard stop does.
    """
    mid = (maintenance_low + maintenance_high) / 2
    start = today or today_local()

    plans: list[Plan] = []
    for key, title, subtitle in _PRESETS:
        calories = gain_calories(mid, GAIN_PRESET_PACES[key.value])
        safety = classify_gain_calories(calories, maintenance_low, maintenance_high)
        projection = compute_pace_and_eta(
            maintenance_low,
            maintenance_high,
            calories,
            current_weight_lb,
            target_weight_lb,
            direction=PaceDirection.gain,
            today=start,
        )
        plans.append(
            Plan(
                key=key,
                title=title,
                subtitle=subtitle,
                calories_per_day=calories,
                is_visible=True,
                is_selectable=safety.selectable and calories >= HARD_HARD_STOP,
                warning_level=safety.warning_level,
                warning_text=safety.warning_text,
                is_recommended=key == PlanKey.gain_lean,
                pace_lbs_per_week=projection.pace_lbs_per_week,
                eta_weeks=projection.eta_weeks,
                eta_date_iso=projection.eta_date.isoformat() if projection.eta_date else None,
            )
        )
    logger.debug("Gain plans: %s", [(p.key.value, p.calories_per_day) for p in plans])
    return tuple(plans)
