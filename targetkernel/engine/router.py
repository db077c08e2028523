"""Planner HTTP router: energy, plans, pace, nutrients, goal weight."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from targetkernel.auth import verify_api_key
from targetkernel.engine.energy import compute_bmr, compute_maintenance_range
from targetkernel.engine.goal_weight import validate_goal_weight
from targetkernel.engine.models import (
    BmrRange,
    GoalWeightResult,
    MaintenanceRange,
    NutrientTargets,
    PaceEta,
    SuggestedPlans,
)
from targetkernel.engine.nutrients import compute_suggested_targets
from targetkernel.engine.pace import compute_pace_and_eta, today_local
from targetkernel.engine.plans import (
    clamp_custom_calories,
    classify_custom_calories,
    custom_bounds,
    suggest_calorie_plans,
)
from targetkernel.engine.schemas import (
    ClampRequest,
    ClampResponse,
    GoalWeightRequest,
    NutrientsRequest,
    PaceRequest,
    PlansRequest,
    ProfileIn,
)
from targetkernel.logger import get_logger

logger = get_logger("targetkernel.engine.router")

router = APIRouter(prefix="/planner", tags=["planner"])


# ---------------------------------------------------------------------------
# /planner/bmr, /planner/maintenance
# ---------------------------------------------------------------------------


@router.post("/bmr", response_model=BmrRange)
async def bmr(
    body: ProfileIn,
    _: str = Depends(verify_api_key),
) -> BmrRange:
    return compute_bmr(body.to_profile())


@router.post("/maintenance", response_model=MaintenanceRange)
async def maintenance(
    body: ProfileIn,
    _: str = Depends(verify_api_key),
) -> MaintenanceRange:
    return compute_maintenance_range(body.to_profile())


# ---------------------------------------------------------------------------
# /planner/plans
# ---------------------------------------------------------------------------


@router.post("/plans", response_model=SuggestedPlans)
async def plans(
    body: PlansRequest,
    _: str = Depends(verify_api_key),
) -> SuggestedPlans:
    today = body.today or today_local()
    result = suggest_calorie_plans(
        body.goal,
        body.profile.to_profile(today),
        current_weight_lb=body.current_weight_lb,
        target_weight_lb=body.target_weight_lb,
        today=today,
    )
    logger.info(
        "Plans for goal=%s: status=%s default=%s",
        body.goal.value,
        result.status.value,
        result.default_plan_key.value,
    )
    return result


@router.post("/pace", response_model=PaceEta)
async def pace(
    body: PaceRequest,
    _: str = Depends(verify_api_key),
) -> PaceEta:
    return compute_pace_and_eta(
        body.maintenance_low,
        body.maintenance_high,
        body.calories,
        body.current_weight_lb,
        body.target_weight_lb,
        direction=body.direction,
        today=body.today,
    )


# ---------------------------------------------------------------------------
# /planner/custom/clamp
# ---------------------------------------------------------------------------


@router.post("/custom/clamp", response_model=ClampResponse)
async def custom_clamp(
    body: ClampRequest,
    _: str = Depends(verify_api_key),
) -> ClampResponse:
    bounds = custom_bounds(body.goal, body.maintenance_low, body.maintenance_high)
    calories = clamp_custom_calories(body.calories, bounds)
    return ClampResponse(
        calories=calories,
        bounds=bounds,
        safety=classify_custom_calories(body.goal, calories, body.maintenance_low, body.maintenance_high),
    )


# ---------------------------------------------------------------------------
# /planner/nutrients, /planner/goal-weight/validate
# ---------------------------------------------------------------------------


@router.post("/nutrients", response_model=NutrientTargets)
async def nutrients(
    body: NutrientsRequest,
    _: str = Depends(verify_api_key),
) -> NutrientTargets:
    return compute_suggested_targets(
        body.goal,
        body.current_weight_lb,
        body.target_weight_lb,
        body.sex_at_birth,
        body.activity_level,
    )


@router.post("/goal-weight/validate", response_model=GoalWeightResult)
async def goal_weight_validate(
    body: GoalWeightRequest,
    _: str = Depends(verify_api_key),
) -> GoalWeightResult:
    return validate_goal_weight(body.current_weight_lb, body.goal, body.unit, body.target)
