"""Pace and ETA projections toward a target weight.

ETAs always round up to whole weeks so the projection never under-promises.
Missing or non-positive inputs yield None fields, never NaN or infinity.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from targetkernel.config import settings
from targetkernel.engine.constants import CALORIES_PER_LB
from targetkernel.engine.models import PaceDirection, PaceEta, RequiredDeficit
from targetkernel.engine.units import days_between, round_to_1dp, round_to_10


def today_local(tz_name: str | None = None) -> date:
    """Current calendar date in the configured timezone."""
    return datetime.now(ZoneInfo(tz_name or settings.default_tz)).date()


def pace_from_daily_delta(daily_delta: float) -> float:
    """lb/week from a daily calorie deficit or surplus."""
    return daily_delta * 7 / CALORIES_PER_LB


def eta_weeks_for(weight_delta_lb: float, pace_lbs_per_week: float) -> int:
    days_needed = (weight_delta_lb / pace_lbs_per_week) * 7
    # trim float noise so an exact 10.0 weeks does not ceil to 11
    return math.ceil(round(days_needed / 7, 9))


def compute_pace_and_eta(
    maintenance_low: float,
    maintenance_high: float,
    calories: float,
    current_weight_lb: float | None,
    target_weight_lb: float | None,
    direction: PaceDirection = PaceDirection.loss,
    today: date | None = None,
) -> PaceEta:
    """Project weekly pace and arrival date for a daily calorie target.

    Loss: delta = maintenance mid - calories, weight delta = current - target.
    Gain: delta = calories - maintenance mid, weight delta = target - current.
    If either delta is non-positive (or weights are missing) everything is None.
    """
    mid = (maintenance_low + maintenance_high) / 2
    if direction == PaceDirection.loss:
        daily_delta = mid - calories
    else:
        daily_delta = calories - mid

    pace = pace_from_daily_delta(daily_delta)
    if pace <= 0 or not current_weight_lb or not target_weight_lb:
        return PaceEta()

    if direction == PaceDirection.loss:
        weight_delta = current_weight_lb - target_weight_lb
    else:
        weight_delta = target_weight_lb - current_weight_lb
    if weight_delta <= 0:
        return PaceEta()

    weeks = eta_weeks_for(weight_delta, pace)
    start = today or today_local()
    return PaceEta(
        pace_lbs_per_week=round_to_1dp(pace),
        eta_weeks=weeks,
        eta_date=start + timedelta(days=weeks * 7),
    )


def required_daily_deficit(
    current_weight_lb: float,
    target_weight_lb: float,
    target_date: date | None,
    today: date | None = None,
) -> RequiredDeficit:
    """Daily deficit needed to hit a target weight by a date (rounded to 10).

    Without a date the deficit is 0 and only the weight delta is reported.
    """
    lbs_to_lose = max(0.0, current_weight_lb - target_weight_lb)
    if target_date is None:
        return RequiredDeficit(required_daily_deficit=0, lbs_to_lose=round_to_1dp(lbs_to_lose), days_to_target=0)

    days_to_target = max(1, days_between(today or today_local(), target_date))
    deficit = round_to_10(lbs_to_lose * CALORIES_PER_LB / days_to_target)
    return RequiredDeficit(
        required_daily_deficit=deficit,
        lbs_to_lose=round_to_1dp(lbs_to_lose),
        days_to_target=days_to_target,
    )
