"""API key check shared by every /planner/* route.

Only the health and index routes in main.py stay open; the engine endpoints
(bmr, maintenance, plans, pace, nutrients, custom/clamp, goal-weight) all
depend on `verify_api_key`.
"""

from fastapi import HTTPException, Header

from targetkernel.config import settings

_BEARER_PREFIX = "Bearer "


def _presented_key(x_api_key: str | None, authorization: str | None) -> str | None:
    if x_api_key is not None:
        return x_api_key
    if authorization and authorization.startswith(_BEARER_PREFIX):
        return authorization[len(_BEARER_PREFIX):].strip()
    return None


async def verify_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> str:
    """Gate planner calculations behind PLANNER_API_KEY when it is configured.

    With no key configured the planner runs open (local and test use). The
    key may arrive as `X-API-Key` or as an `Authorization: Bearer` token.
    """
    if settings.planner_api_key is None:
        return ""

    key = _presented_key(x_api_key, authorization)
    if key is None:
        raise HTTPException(status_code=401, detail="Planner API key required (X-API-Key or Bearer token)")
    if key != settings.planner_api_key:
        raise HTTPException(status_code=401, detail="Planner API key rejected")
    return key
