"""Request/response bodies for the planner HTTP adapter."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from targetkernel.engine.models import (
    ActivityLevel,
    BiometricProfile,
    CustomBounds,
    GoalType,
    PaceDirection,
    SafetyClass,
    SexAtBirth,
    WeightUnit,
)
from targetkernel.engine.pace import today_local
from targetkernel.engine.units import age_from_dob, parse_dob
from targetkernel.errors import MissingDataError, ValidationError


class ProfileIn(BaseModel):
    """Profile as the client sends it. Either `age_years` or `date_of_birth`."""

    sex_at_birth: SexAtBirth = SexAtBirth.unknown
    age_years: float | None = Field(default=None, ge=0, le=130)
    date_of_birth: str | None = Field(default=None, description="YYYY-MM-DD")
    height_cm: float | None = Field(default=None, gt=0)
    weight_kg: float | None = Field(default=None, gt=0)
    body_fat_pct: float | None = None
    activity_level: str = ActivityLevel.sedentary.value

    def resolve_age(self, today: date | None = None) -> float | None:
        if self.age_years is not None:
            return self.age_years
        if not self.date_of_birth:
            return None
        try:
            dob = parse_dob(self.date_of_birth)
        except ValueError as exc:
            raise ValidationError(str(exc), field="date_of_birth") from exc
        reference = today or today_local()
        if dob > reference:
            raise ValidationError("Date of birth is in the future", field="date_of_birth")
        return age_from_dob(dob, reference)

    def to_profile(self, today: date | None = None) -> BiometricProfile:
        """Build the engine profile, refusing to guess at missing fields."""
        age = self.resolve_age(today)
        missing = [
            name
            for name, value in (
                ("age_years", age),
                ("height_cm", self.height_cm),
                ("weight_kg", self.weight_kg),
            )
            if value is None
        ]
        if missing:
            raise MissingDataError(missing)
        return BiometricProfile(
            sex_at_birth=self.sex_at_birth,
            age_years=age,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            body_fat_pct=self.body_fat_pct,
            activity_level=self.activity_level,
        )


class PlansRequest(BaseModel):
    goal: GoalType
    profile: ProfileIn
    current_weight_lb: float | None = Field(default=None, gt=0)
    target_weight_lb: float | None = Field(default=None, gt=0)
    today: date | None = None


class PaceRequest(BaseModel):
    maintenance_low: float = Field(gt=0)
    maintenance_high: float = Field(gt=0)
    calories: float = Field(gt=0)
    current_weight_lb: float | None = Field(default=None, gt=0)
    target_weight_lb: float | None = Field(default=None, gt=0)
    direction: PaceDirection = PaceDirection.loss
    today: date | None = None


class NutrientsRequest(BaseModel):
    goal: GoalType
    current_weight_lb: float = Field(gt=0)
    target_weight_lb: float | None = None
    sex_at_birth: SexAtBirth = SexAtBirth.unknown
    activity_level: str = ActivityLevel.sedentary.value


class ClampRequest(BaseModel):
    goal: GoalType
    maintenance_low: float = Field(gt=0)
    maintenance_high: float = Field(gt=0)
    calories: float


class ClampResponse(BaseModel):
    calories: int
    bounds: CustomBounds
    safety: SafetyClass


class GoalWeightRequest(BaseModel):
    goal: GoalType
    current_weight_lb: float = Field(gt=0)
    unit: WeightUnit = WeightUnit.lb
    target: float
