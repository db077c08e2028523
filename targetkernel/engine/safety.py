"""Safety classification for calorie targets.

The four-tier weight-loss table is the single source of truth for loss,
maintain and recomp warnings. Gain targets use a symmetric band around
maintenance and are never blocked.
"""

from __future__ import annotations

from targetkernel.engine.constants import (
    GAIN_HIGH_BAND,
    HARD_FLOOR,
    HARD_HARD_STOP,
    RED_WARNING_CEILING,
    SOFT_FLOOR_FEMALE,
    SOFT_FLOOR_MALE,
)
from targetkernel.engine.models import SafetyClass, SexAtBirth, WarningLevel

UNSAFE_TEXT = "Below 700 calories per day is not supported."
RED_TEXT = (
    "This is a very low calorie target. Only follow it with guidance "
    "from a healthcare professional."
)
NEUTRAL_TEXT = "This is below a typical minimum. Keep an eye on how you feel."
GAIN_BELOW_MAINTENANCE_TEXT = "This is below your maintenance range, so you may not gain weight."
GAIN_HIGH_TEXT = "This is a large surplus. Much of the extra weight may be fat."


def classify_calories(calories: float) -> SafetyClass:
    """Classify a daily calorie target.

    <700 unsafe (not selectable), 700-1000 red, 1001-1199 neutral,
    >=1200 no warning.
    """
    if calories < HARD_HARD_STOP:
        return SafetyClass(selectable=False, warning_level=WarningLevel.unsafe, warning_text=UNSAFE_TEXT)
    if calories <= RED_WARNING_CEILING:
        return SafetyClass(selectable=True, warning_level=WarningLevel.red, warning_text=RED_TEXT)
    if calories < HARD_FLOOR:
        return SafetyClass(selectable=True, warning_level=WarningLevel.neutral, warning_text=NEUTRAL_TEXT)
    return SafetyClass(selectable=True, warning_level=WarningLevel.none)


def classify_gain_calories(calories: float, maintenance_low: float, maintenance_high: float) -> SafetyClass:
    """Orange advisory outside [low, high + 700]; always selectable."""
    if calories < maintenance_low:
        return SafetyClass(
            selectable=True,
            warning_level=WarningLevel.orange,
            warning_text=GAIN_BELOW_MAINTENANCE_TEXT,
        )
    if calories > maintenance_high + GAIN_HIGH_BAND:
        return SafetyClass(selectable=True, warning_level=WarningLevel.orange, warning_text=GAIN_HIGH_TEXT)
    return SafetyClass(selectable=True, warning_level=WarningLevel.none)


def soft_floor(sex_at_birth: SexAtBirth | str) -> int:
    """Guidance threshold by sex. Unknown uses the male value."""
    if sex_at_birth == SexAtBirth.female:
        return SOFT_FLOOR_FEMALE
    return SOFT_FLOOR_MALE
