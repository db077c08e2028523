"""BMR and maintenance-calorie estimates. Pure functions that never raise.

Degenerate inputs (zero weight, negative age) flow through as extreme but
well-defined numbers; callers validate upstream.
"""

from __future__ import annotations

from enum import Enum

from targetkernel.engine.constants import (
    ACTIVITY_CONTINGENCY,
    ACTIVITY_MULTIPLIERS,
    BMR_CONTINGENCY,
    BODY_FAT_MAX_PCT,
    BODY_FAT_MIN_PCT,
    DEFAULT_ACTIVITY_MULTIPLIER,
    KATCH_WEIGHT,
    MIFFLIN_WEIGHT,
    SEX_OFFSET,
)
from targetkernel.engine.models import BiometricProfile, BmrMethod, BmrRange, MaintenanceRange
from targetkernel.engine.units import floor_to_10
from targetkernel.logger import get_logger

logger = get_logger("targetkernel.engine.energy")


def activity_key(activity_level: str | Enum | None) -> str:
    """Plain string key for an activity tier given as a str or an enum member."""
    value = activity_level.value if isinstance(activity_level, Enum) else activity_level
    return value or ""


def activity_multiplier(activity_level: str | Enum | None) -> float:
    """Map an activity tier to its TDEE multiplier. Unknown tiers → sedentary."""
    return ACTIVITY_MULTIPLIERS.get(activity_key(activity_level), DEFAULT_ACTIVITY_MULTIPLIER)


def body_fat_usable(body_fat_pct: float | None) -> bool:
    return body_fat_pct is not None and BODY_FAT_MIN_PCT <= body_fat_pct <= BODY_FAT_MAX_PCT


def mifflin_st_jeor(weight_kg: float, height_cm: float, age_years: float, sex_at_birth: str) -> float:
    """Mifflin-St Jeor BMR. Unknown sex uses the midpoint of the sex offsets."""
    base = 10.0 * weight_kg + 6.25 * height_cm - 5.0 * age_years
    return base + SEX_OFFSET.get(sex_at_birth, SEX_OFFSET["unknown"])


def katch_mcardle(weight_kg: float, body_fat_pct: float) -> float:
    lean_mass_kg = weight_kg * (1.0 - body_fat_pct / 100.0)
    return 370.0 + 21.6 * lean_mass_kg


def compute_bmr(profile: BiometricProfile) -> BmrRange:
    """Estimate BMR with a contingency-reduced lower bound.

    Mifflin-St Jeor is always computed. With a usable body-fat percentage the
    result is blended 70/30 with Katch-McArdle.
    """
    sex = profile.sex_at_birth.value
    raw = mifflin_st_jeor(profile.weight_kg, profile.height_cm, profile.age_years, sex)
    method = BmrMethod.mifflin
    used_body_fat = False

    if body_fat_usable(profile.body_fat_pct):
        katch = katch_mcardle(profile.weight_kg, profile.body_fat_pct)
        raw = MIFFLIN_WEIGHT * raw + KATCH_WEIGHT * katch
        method = BmrMethod.blend
        used_body_fat = True

    result = BmrRange(
        raw_bmr=raw,
        lower_bmr=floor_to_10(raw * (1.0 - BMR_CONTINGENCY)),
        upper_bmr=floor_to_10(raw),
        method=method,
        used_body_fat=used_body_fat,
    )
    logger.debug("BMR computed: %s", result)
    return result


def compute_maintenance_range(profile: BiometricProfile) -> MaintenanceRange:
    """Maintenance range = BMR range + activity calories range.

    Activity calories derive from the raw (unfloored) BMR; the lower bound
    takes the larger activity contingency before flooring.
    """
    bmr = compute_bmr(profile)
    multiplier = activity_multiplier(profile.activity_level)
    raw_activity = bmr.raw_bmr * (multiplier - 1.0)

    lower_activity = floor_to_10(raw_activity * (1.0 - ACTIVITY_CONTINGENCY))
    upper_activity = floor_to_10(raw_activity)

    result = MaintenanceRange(
        lower_maintenance=bmr.lower_bmr + lower_activity,
        upper_maintenance=bmr.upper_bmr + upper_activity,
        lower_bmr=bmr.lower_bmr,
        upper_bmr=bmr.upper_bmr,
        lower_activity_calories=lower_activity,
        upper_activity_calories=upper_activity,
        activity_multiplier=multiplier,
        bmr_method=bmr.method,
        used_body_fat=bmr.used_body_fat,
    )
    logger.debug("Maintenance range computed: %s", result)
    return result
