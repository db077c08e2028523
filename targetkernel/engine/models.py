"""Planner records as Pydantic v2 models.

Every record is frozen: the engine builds them fresh on each call and
never mutates them afterwards.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, computed_field


class SexAtBirth(str, Enum):
    male = "male"
    female = "female"
    unknown = "unknown"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    high = "high"
    very_high = "very_high"


class GoalType(str, Enum):
    lose = "lose"
    maintain = "maintain"
    recomp = "recomp"
    gain = "gain"


class BmrMethod(str, Enum):
    mifflin = "mifflin"
    katch = "katch"
    blend = "blend"


class WarningLevel(str, Enum):
    none = "none"
    neutral = "neutral"  # soft caution
    red = "red"  # hard warning, still selectable
    unsafe = "unsafe"  # below the hard stop, never selectable
    orange = "orange"  # gain advisory


class PlanStatus(str, Enum):
    ok = "ok"
    extreme_edge_case = "extreme_edge_case"


class WeightUnit(str, Enum):
    lb = "lb"
    kg = "kg"


class PaceDirection(str, Enum):
    loss = "loss"
    gain = "gain"


class PlanKey(str, Enum):
    more_sustainable = "more_sustainable"
    standard = "standard"
    aggressive = "aggressive"
    cautious_minimum = "cautious_minimum"
    sustainable_floor_1200 = "sustainable_floor_1200"
    maintain_leaner = "maintain_leaner"
    maintain_standard = "maintain_standard"
    maintain_flexible = "maintain_flexible"
    recomp_leaner = "recomp_leaner"
    recomp_standard = "recomp_standard"
    recomp_muscle = "recomp_muscle"
    gain_lean = "gain_lean"
    gain_standard = "gain_standard"
    gain_aggressive = "gain_aggressive"
    custom = "custom"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class BiometricProfile(_Record):
    """Caller-supplied profile. No range validation happens here."""

    sex_at_birth: SexAtBirth = SexAtBirth.unknown
    age_years: float
    height_cm: float
    weight_kg: float
    body_fat_pct: float | None = None  # ignored outside 5-60
    activity_level: str = ActivityLevel.sedentary.value


# ---------------------------------------------------------------------------
# Energy
# ---------------------------------------------------------------------------


class BmrRange(_Record):
    raw_bmr: float
    lower_bmr: int
    upper_bmr: int
    method: BmrMethod
    used_body_fat: bool


class MaintenanceRange(_Record):
    lower_maintenance: int
    upper_maintenance: int
    lower_bmr: int
    upper_bmr: int
    lower_activity_calories: int
    upper_activity_calories: int
    activity_multiplier: float
    bmr_method: BmrMethod
    used_body_fat: bool

    @computed_field
    @property
    def mid(self) -> float:
        return (self.lower_maintenance + self.upper_maintenance) / 2


class MaintenanceSummary(_Record):
    lower: int
    upper: int
    mid: float


# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------


class SafetyClass(_Record):
    selectable: bool
    warning_level: WarningLevel
    warning_text: str | None = None


class PaceEta(_Record):
    pace_lbs_per_week: float | None = None
    eta_weeks: int | None = None
    eta_date: date | None = None


class RequiredDeficit(_Record):
    """Daily deficit needed to reach a target weight by a date."""

    required_daily_deficit: int
    lbs_to_lose: float
    days_to_target: int


class Plan(_Record):
    key: PlanKey
    title: str
    subtitle: str | None = None
    calories_per_day: int | None = None
    is_visible: bool = True
    is_selectable: bool = True
    warning_level: WarningLevel = WarningLevel.none
    warning_text: str | None = None
    is_recommended: bool = False
    pace_lbs_per_week: float | None = None
    eta_weeks: int | None = None
    eta_date_iso: str | None = None


class CustomBounds(_Record):
    min: int
    max: int
    step: int = 25


class BaselinePlans(_Record):
    """Weight-loss generator output."""

    status: PlanStatus
    message: str | None = None
    plans: tuple[Plan, ...]
    custom: CustomBounds
    default_plan: PlanKey

    def plan(self, key: PlanKey) -> Plan | None:
        return next((p for p in self.plans if p.key == key), None)


class SuggestedPlans(_Record):
    """Goal dispatcher output."""

    goal: GoalType
    status: PlanStatus = PlanStatus.ok
    message: str | None = None
    maintenance: MaintenanceSummary
    plans: tuple[Plan, ...]
    custom: CustomBounds
    default_plan_key: PlanKey
    maintenance_limit_warning: bool = False

    def plan(self, key: PlanKey) -> Plan | None:
        return next((p for p in self.plans if p.key == key), None)


class MaintenancePreset(_Record):
    key: str  # "leaner_side" | "maintain" | "flexible"
    calories_per_day: int
    is_recommended: bool
    source_key: PlanKey


# ---------------------------------------------------------------------------
# Nutrients
# ---------------------------------------------------------------------------


class NutrientTarget(_Record):
    value: int
    min: int
    max: int
    step: int


class NutrientTargets(_Record):
    protein_g_min: NutrientTarget
    fiber_g_min: NutrientTarget
    carbs_g_max: NutrientTarget
    sugar_g_max: NutrientTarget
    sodium_mg_max: NutrientTarget
    water_ml: NutrientTarget


# ---------------------------------------------------------------------------
# Goal weight
# ---------------------------------------------------------------------------


class GoalWeightRange(_Record):
    min_lb: float
    max_lb: float
    recommended_lb: float
    delta_lb: float | None = None  # maintain / recomp band half-width


class GoalWeightResult(_Record):
    ok: bool
    target_lb: float | None = None
    error_code: str | None = None
    params: dict[str, float] | None = None
