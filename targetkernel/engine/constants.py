"""Engine constants. Fixed rule values, never recomputed at runtime.

Safety thresholds gate selectability and warning tiers. Everything else
parameterises the BMR, maintenance, plan and nutrient rules. These values
are part of the rule set and are not exposed through Settings.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Energy
# ---------------------------------------------------------------------------

CALORIES_PER_LB = 3600
BMR_CONTINGENCY = 0.05  # lower BMR bound = raw BMR reduced by 5%
ACTIVITY_CONTINGENCY = 0.20  # lower activity bound = raw activity reduced by 20%

MIFFLIN_WEIGHT = 0.7  # blend weights when body fat is known
KATCH_WEIGHT = 0.3
BODY_FAT_MIN_PCT = 5.0
BODY_FAT_MAX_PCT = 60.0

SEX_OFFSET = {"male": 5.0, "female": -161.0, "unknown": -78.0}

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "high": 1.725,
    "very_high": 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

# ---------------------------------------------------------------------------
# Safety thresholds
# ---------------------------------------------------------------------------

HARD_HARD_STOP = 700  # nothing selectable below this
HARD_FLOOR = 1200
SOFT_FLOOR_MALE = 1400
SOFT_FLOOR_FEMALE = 1300
EXTREME_EDGE_CASE_THRESHOLD = 1100
RED_WARNING_CEILING = 1000  # 700-1000 inclusive is the red tier

# ---------------------------------------------------------------------------
# Weight loss
# ---------------------------------------------------------------------------

MORE_SUSTAINABLE_DEFICIT = 300
STANDARD_DEFICIT = 500
AGGRESSIVE_DEFICIT = 750
MAINTENANCE_BUFFER = 75
CAUTIOUS_MINIMUM_CALORIES = 1200
CAUTIOUS_MINIMUM_LOW_BOUND = 1300
ESCAPE_HATCH_CALORIES = 1200
ESCAPE_HATCH_MIN_MAINTENANCE = 1400

# ---------------------------------------------------------------------------
# Custom calorie slider
# ---------------------------------------------------------------------------

CUSTOM_STEP = 25
CUSTOM_LOSS_HEADROOM = 200  # above lower maintenance
CUSTOM_MAINTAIN_HEADROOM = 300  # above upper maintenance
CUSTOM_GAIN_HEADROOM = 1000  # above upper maintenance

# ---------------------------------------------------------------------------
# Weight gain
# ---------------------------------------------------------------------------

GAIN_HIGH_BAND = 700  # orange advisory above upper maintenance + this

GAIN_PRESET_PACES: dict[str, float] = {
    "gain_lean": 0.4,
    "gain_standard": 0.6,
    "gain_aggressive": 1.3,
}

# ---------------------------------------------------------------------------
# Body weight
# ---------------------------------------------------------------------------

LB_PER_KG = 2.2046226218
MIN_WEIGHT_LB = 45
MAX_WEIGHT_LB = 880
MIN_DELTA_LOSE_LB = 1
MIN_DELTA_GAIN_LB = 1
MAX_DELTA_LOSE_PCT = 0.35
MAX_DELTA_GAIN_PCT = 0.35
MAINTAIN_RECOMP_PCT = 0.02
MAINTAIN_RECOMP_ABS_CAP_LB = 5


# ---------------------------------------------------------------------------
# Nutrients
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NutrientBounds:
    min: float
    max: float
    step: float


PROTEIN_BOUNDS = NutrientBounds(min=80, max=250, step=5)
FIBER_BOUNDS = NutrientBounds(min=22, max=45, step=1)
CARBS_LOSS_BOUNDS = NutrientBounds(min=80, max=300, step=10)
CARBS_BOUNDS = NutrientBounds(min=120, max=400, step=10)
SUGAR_BOUNDS = NutrientBounds(min=25, max=70, step=5)
SODIUM_BOUNDS = NutrientBounds(min=1500, max=3500, step=100)
WATER_BOUNDS = NutrientBounds(min=1800, max=4500, step=100)

PROTEIN_MULTIPLIER = 0.7  # g per lb
PROTEIN_MULTIPLIER_ACTIVE = 0.85
FIBER_BASE_G = {"female": 25, "male": 30, "unknown": 28}
FIBER_HEAVY_WEIGHT_LB = 190
FIBER_HEAVY_BONUS_G = 5
FIBER_ACTIVE_BONUS_G = 3
CARBS_LOSS_TIERS = (130, 170, 220)  # sedentary, light/moderate, high/very_high
CARBS_TIERS = (220, 260, 320)
SUGAR_G = 40
SODIUM_MG = 2300
SODIUM_MG_ACTIVE = 2600
WATER_ML_PER_KG = 30
WATER_BONUS_ML = {"light": 300, "moderate": 300, "high": 700, "very_high": 700}

ACTIVE_LEVELS = frozenset({"high", "very_high"})
