"""Shared FastAPI dependencies."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.auth.jwt import require_auth
from linkhub.core.config import settings
from linkhub.db.session import get_db
from linkhub.services.entitlements import EntitlementService, Entitlements
from linkhub.services.limits import check_rate_limit


logger = logging.getLogger(__name__)


async def get_db_session(session: AsyncSession = Depends(get_db)) -> AsyncSession:
    return session


async def rate_limited_auth(auth: Dict[str, Any] = Depends(require_auth)) -> Dict[str, Any]:
    await check_rate_limit(str(auth["user_id"]))
    return auth


def get_test_plan(
    x_test_plan: Optional[str] = Header(default=None, alias="X-Test-Plan"),
) -> Optional[str]:
    """Forward the QA plan override only when test mode is switched on."""

    if x_test_plan is None:
        return None
    if not settings.PLAN_TEST_MODE_ENABLED:
        logger.warning("Ignoring X-Test-Plan header: plan test mode is disabled")
        return None
    return x_test_plan


async def get_entitlements(
    auth: Dict[str, Any] = Depends(rate_limited_auth),
    db: AsyncSession = Depends(get_db_session),
    test_plan: Optional[str] = Depends(get_test_plan),
) -> Entitlements:
    """Entitlements for gated actions. Lookup failures propagate as 503."""

    service = EntitlementService(db)
    return await service.resolve_for_user(auth["user_id"], test_plan=test_plan)
