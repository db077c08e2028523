"""Shared fixtures for the test suite."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from targetkernel.engine.models import ActivityLevel, BiometricProfile, SexAtBirth
from targetkernel.main import app

# Fixed "today" so ETA dates are deterministic.
TODAY = date(2026, 1, 1)


# ---------------------------------------------------------------------------
# Profile helpers
# ---------------------------------------------------------------------------


def make_profile(**overrides: Any) -> BiometricProfile:
    """Reference profile: female, 30 y, 165 cm, 68 kg, moderate activity.

    Maintenance range for it is 1940-2170.
    """
    defaults: dict[str, Any] = dict(
        sex_at_birth=SexAtBirth.female,
        age_years=30,
        height_cm=165,
        weight_kg=68,
        body_fat_pct=None,
        activity_level=ActivityLevel.moderate.value,
    )
    defaults.update(overrides)
    return BiometricProfile(**defaults)


def profile_payload(**overrides: Any) -> dict[str, Any]:
    """JSON body for the reference profile."""
    payload: dict[str, Any] = {
        "sex_at_birth": "female",
        "age_years": 30,
        "height_cm": 165,
        "weight_kg": 68,
        "activity_level": "moderate",
    }
    payload.update(overrides)
    return {k: v for k, v in payload.items() if v is not None}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def profile() -> BiometricProfile:
    return make_profile()


@pytest.fixture()
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
