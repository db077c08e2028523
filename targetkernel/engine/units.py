"""Pure unit and rounding helpers.

Rounding is half-up (`floor(x / step + 0.5) * step`) rather than Python's
banker's rounding, so 2062.5 rounds to 2075 and never to 2050.
"""

from __future__ import annotations

import math
from datetime import date

from targetkernel.engine.constants import LB_PER_KG


def round_to_step(value: float, step: float) -> float:
    """Round half-up to the nearest multiple of `step`."""
    return math.floor(value / step + 0.5) * step


def floor_to_10(value: float) -> int:
    return int(math.floor(value / 10) * 10)


def round_to_10(value: float) -> int:
    return int(round_to_step(value, 10))


def round_down_to_25(value: float) -> int:
    return int(math.floor(value / 25) * 25)


def round_up_to_25(value: float) -> int:
    return int(math.ceil(value / 25) * 25)


def round_to_nearest_25(value: float) -> int:
    return int(round_to_step(value, 25))


def round_to_1dp(value: float) -> float:
    return round_to_step(value * 10, 1) / 10


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def days_between(d1: date, d2: date) -> int:
    """Absolute number of calendar days between two dates."""
    return abs((d2 - d1).days)


def lb_to_kg(lb: float) -> float:
    return lb / LB_PER_KG


def kg_to_lb(kg: float) -> float:
    return kg * LB_PER_KG


def parse_dob(value: str) -> date:
    """Parse a YYYY-MM-DD date of birth.

    Raises ValueError for malformed strings and impossible dates
    (e.g. 2001-02-30).
    """
    parts = value.strip().split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid date format: {value}. Expected YYYY-MM-DD")
    year, month, day = (int(p) for p in parts)
    try:
        return date(year, month, day)
    except ValueError:
        raise ValueError(f"Invalid date: {value}")


def age_from_dob(dob: date, today: date) -> int:
    """Whole years between `dob` and `today`."""
    age = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        age -= 1
    return age


def normalize_sex(value: str | None) -> str:
    """Map free-form sex-at-birth values to male / female / unknown."""
    normalized = (value or "").strip().lower()
    if normalized in ("male", "female"):
        return normalized
    return "unknown"
