"""Weight-loss plan generator.

Fixed deficits off the maintenance midpoint, each rounded down to 25 and
run through the safety classifier. At most one plan is recommended and it
never carries a warning. When the biology leaves no safe deficit
(maintenance low < 1100) every named plan is hidden and only custom entry
remains.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from targetkernel.engine.constants import (
    AGGRESSIVE_DEFICIT,
    CAUTIOUS_MINIMUM_CALORIES,
    CAUTIOUS_MINIMUM_LOW_BOUND,
    CUSTOM_LOSS_HEADROOM,
    ESCAPE_HATCH_CALORIES,
    ESCAPE_HATCH_MIN_MAINTENANCE,
    EXTREME_EDGE_CASE_THRESHOLD,
    HARD_HARD_STOP,
    MAINTENANCE_BUFFER,
    MORE_SUSTAINABLE_DEFICIT,
    STANDARD_DEFICIT,
)
from targetkernel.engine.models import (
    BaselinePlans,
    CustomBounds,
    PaceDirection,
    Plan,
    PlanKey,
    PlanStatus,
    SafetyClass,
    SexAtBirth,
    WarningLevel,
)
from targetkernel.engine.pace import compute_pace_and_eta, today_local
from targetkernel.engine.safety import classify_calories, soft_floor
from targetkernel.engine.units import round_down_to_25
from targetkernel.logger import get_logger

logger = get_logger("targetkernel.engine.weight_loss")

EXTREME_EDGE_CASE_MESSAGE = "This goal is beyond what the app can guide safely."

TITLES: dict[PlanKey, str] = {
    PlanKey.more_sustainable: "More sustainable",
    PlanKey.standard: "Standard",
    PlanKey.aggressive: "Aggressive",
    PlanKey.cautious_minimum: "Cautious minimum",
    PlanKey.sustainable_floor_1200: "More sustainable",
}
CAUTIOUS_MINIMUM_SUBTITLE = "Lower safety boundary"
ESCAPE_HATCH_SUBTITLE = "A steadier pace at the lowest generally recommended intake."

NAMED_PLAN_KEYS = (
    PlanKey.more_sustainable,
    PlanKey.standard,
    PlanKey.aggressive,
    PlanKey.cautious_minimum,
)


@dataclass(frozen=True, slots=True)
class _Candidate:
    key: PlanKey
    calories: int
    visible: bool
    safety: SafetyClass
    subtitle: str | None = None

    @property
    def selectable(self) -> bool:
        return self.visible and self.safety.selectable

    @property
    def unwarned(self) -> bool:
        return self.safety.warning_level == WarningLevel.none


def loss_custom_bounds(maintenance_low: float) -> CustomBounds:
    """Custom slider range for weight loss: [700, low + 200]."""
    upper = int(maintenance_low + CUSTOM_LOSS_HEADROOM)
    return CustomBounds(min=HARD_HARD_STOP, max=max(HARD_HARD_STOP, upper))


def _hidden_plan(key: PlanKey) -> Plan:
    return Plan(
        key=key,
        title=TITLES[key],
        calories_per_day=None,
        is_visible=False,
        is_selectable=False,
        warning_level=WarningLevel.none,
        is_recommended=False,
    )


def _extreme_edge_case(maintenance_low: float) -> BaselinePlans:
    return BaselinePlans(
        status=PlanStatus.extreme_edge_case,
        message=EXTREME_EDGE_CASE_MESSAGE,
        plans=tuple(_hidden_plan(key) for key in NAMED_PLAN_KEYS),
        custom=loss_custom_bounds(maintenance_low),
        default_plan=PlanKey.custom,
    )


def _pick_recommended(candidates: list[_Candidate]) -> PlanKey | None:
    """First selectable, unwarned candidate in priority order."""
    for cand in candidates:
        if cand.selectable and cand.unwarned:
            return cand.key
    return None


def _pick_default(
    standard: _Candidate,
    cautious: _Candidate,
    more_sustainable: _Candidate,
    escape_hatch: _Candidate | None,
    aggressive: _Candidate,
) -> PlanKey:
    if standard.selectable and standard.unwarned:
        return PlanKey.standard
    if cautious.selectable:
        return PlanKey.cautious_minimum
    if more_sustainable.selectable:
        return PlanKey.more_sustainable
    if escape_hatch is not None:
        return PlanKey.sustainable_floor_1200
    if standard.selectable:
        return PlanKey.standard
    if aggressive.selectable:
        return PlanKey.aggressive
    return PlanKey.custom


def get_baseline_deficit_plans(
    maintenance_low: float,
    maintenance_high: float,
    sex_at_birth: SexAtBirth | str,
    current_weight_lb: float | None = None,
    target_weight_lb: float | None = None,
    today: date | None = None,
) -> BaselinePlans:
    """Build the weight-loss plan set for a maintenance range."""
    if maintenance_low < EXTREME_EDGE_CASE_THRESHOLD:
        logger.debug("Extreme edge case: maintenance low %s", maintenance_low)
        return _extreme_edge_case(maintenance_low)

    mid = (maintenance_low + maintenance_high) / 2
    floor = soft_floor(sex_at_birth)

    def candidate(key: PlanKey, calories: int, visible: bool = True, subtitle: str | None = None) -> _Candidate:
        return _Candidate(key, calories, visible, classify_calories(calories), subtitle)

    aggressive = candidate(PlanKey.aggressive, round_down_to_25(mid - AGGRESSIVE_DEFICIT))
    standard = candidate(PlanKey.standard, round_down_to_25(mid - STANDARD_DEFICIT))

    sustainable_calories = round_down_to_25(mid - MORE_SUSTAINABLE_DEFICIT)
    more_sustainable = candidate(
        PlanKey.more_sustainable,
        sustainable_calories,
        visible=sustainable_calories >= floor,
    )

    cautious = candidate(
        PlanKey.cautious_minimum,
        CAUTIOUS_MINIMUM_CALORIES,
        visible=CAUTIOUS_MINIMUM_LOW_BOUND <= maintenance_low < floor + MAINTENANCE_BUFFER,
        subtitle=CAUTIOUS_MINIMUM_SUBTITLE,
    )

    escape_hatch: _Candidate | None = None
    if not more_sustainable.selectable and maintenance_low >= ESCAPE_HATCH_MIN_MAINTENANCE:
        escape_hatch = candidate(
            PlanKey.sustainable_floor_1200,
            ESCAPE_HATCH_CALORIES,
            subtitle=ESCAPE_HATCH_SUBTITLE,
        )

    recommended = _pick_recommended([standard, more_sustainable, aggressive])
    default_plan = _pick_default(standard, cautious, more_sustainable, escape_hatch, aggressive)

    start = today or today_local()
    ordered = [more_sustainable, standard, aggressive, cautious]
    if escape_hatch is not None:
        ordered.append(escape_hatch)

    plans: list[Plan] = []
    for cand in ordered:
        if not cand.visible:
            plans.append(_hidden_plan(cand.key))
            continue
        projection = compute_pace_and_eta(
            maintenance_low,
            maintenance_high,
            cand.calories,
            current_weight_lb,
            target_weight_lb,
            direction=PaceDirection.loss,
            today=start,
        )
        plans.append(
            Plan(
                key=cand.key,
                title=TITLES[cand.key],
                subtitle=cand.subtitle,
                calories_per_day=cand.calories,
                is_visible=True,
                is_selectable=cand.selectable,
                warning_level=cand.safety.warning_level,
                warning_text=cand.safety.warning_text,
                # warned plans are never recommended, whatever the priority says
                is_recommended=cand.key == recommended and cand.unwarned,
                pace_lbs_per_week=projection.pace_lbs_per_week,
                eta_weeks=projection.eta_weeks,
                eta_date_iso=projection.eta_date.isoformat() if projection.eta_date else None,
            )
        )

    result = BaselinePlans(
        status=PlanStatus.ok,
        plans=tuple(plans),
        custom=loss_custom_bounds(maintenance_low),
        default_plan=default_plan,
    )
    logger.debug(
        "Weight-loss plans: mid=%s recommended=%s default=%s", mid, recommended, default_plan
    )
    return result
