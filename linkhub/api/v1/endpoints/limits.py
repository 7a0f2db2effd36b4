"""Endpoints exposing the caller's current plan limits and usage."""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.api.deps import get_db_session, get_test_plan, rate_limited_auth
from linkhub.repositories.link_repo import LinkRepo
from linkhub.schemas.entitlements import CurrentLimits, FeatureStatus
from linkhub.services import quota
from linkhub.services.entitlements import EntitlementService


router = APIRouter(prefix="/limits", tags=["limits"])


@router.get("/current", response_model=CurrentLimits)
async def current_limits(
    auth: Dict[str, Any] = Depends(rate_limited_auth),
    db: AsyncSession = Depends(get_db_session),
    test_plan: Optional[str] = Depends(get_test_plan),
):
    user_id = auth["user_id"]

    # Read-only view: show free limits rather than failing when state is unknown.
    entitlements = await EntitlementService(db).resolve_or_fail_closed(
        user_id, test_plan=test_plan
    )
    capabilities = entitlements.capabilities
    if entitlements.degraded:
        links = quota.denied(capabilities)
    else:
        links = quota.evaluate(capabilities, await LinkRepo(db).count_for_user(user_id))

    return CurrentLimits(
        plan_id=capabilities.plan_id,
        stored_plan_id=entitlements.stored_plan_id,
        subscribed=entitlements.subscribed,
        period_end=entitlements.period_end,
        is_admin=entitlements.is_admin,
        override=entitlements.override,
        degraded=entitlements.degraded,
        capabilities=capabilities,
        links=links,
    )


@router.get("/features/{feature}", response_model=FeatureStatus)
async def feature_status(
    feature: str,
    auth: Dict[str, Any] = Depends(rate_limited_auth),
    db: AsyncSession = Depends(get_db_session),
    test_plan: Optional[str] = Depends(get_test_plan),
):
    entitlements = await EntitlementService(db).resolve_or_fail_closed(
        auth["user_id"], test_plan=test_plan
    )
    capabilities = entitlements.capabilities
    return FeatureStatus(
        feature=feature,
        enabled=capabilities.has(feature),
        plan_id=capabilities.plan_id,
    )
