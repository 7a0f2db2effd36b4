"""Per-user entitlement lookup.

Reads the caller's subscription row and admin grant, then hands the plain
values to :func:`linkhub.services.capabilities.resolve`.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.core.exceptions import EntitlementLookupError
from linkhub.repositories.admin_repo import AdminRepo
from linkhub.repositories.subscription_repo import SubscriptionRepo
from linkhub.services import plan_catalog
from linkhub.services.capabilities import resolve
from linkhub.services.plan_catalog import CapabilitySet


logger = logging.getLogger(__name__)

OverrideSource = Literal["admin", "test_plan"]


class SubscriptionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: UUID
    plan_id: Optional[str] = None
    subscribed: bool = False
    period_end: Optional[datetime] = None


class Entitlements(BaseModel):
    """Resolved capabilities for one user, with the inputs that produced them."""

    model_config = ConfigDict(frozen=True)

    user_id: UUID
    capabilities: CapabilitySet
    stored_plan_id: Optional[str] = None
    subscribed: bool = False
    period_end: Optional[datetime] = None
    is_admin: bool = False
    admin_role: Optional[str] = None
    override: Optional[OverrideSource] = None
    degraded: bool = False


class EntitlementService:
    """Loads entitlement inputs through the repositories and resolves them."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.subscriptions = SubscriptionRepo(session)
        self.admins = AdminRepo(session)

    async def get_subscription_record(self, user_id: UUID) -> SubscriptionRecord | None:
        try:
            row = await self.subscriptions.get_by_user(user_id)
        except SQLAlchemyError as exc:
            logger.error(f"Subscription lookup failed for user {user_id}: {exc}")
            raise EntitlementLookupError(
                "Unable to load subscription state. Try again later."
            ) from exc

        if row is None:
            return None
        return SubscriptionRecord(
            user_id=row.user_id,
            plan_id=row.subscription_tier,
            subscribed=bool(row.subscribed),
            period_end=row.subscription_end,
        )

    async def get_admin_role(self, user_id: UUID) -> Optional[str]:
        """Return the role of the user's active admin grant, if any."""

        try:
            grant = await self.admins.get_active_grant(user_id)
        except SQLAlchemyError as exc:
            logger.error(f"Admin lookup failed for user {user_id}: {exc}")
            raise EntitlementLookupError(
                "Unable to load admin state. Try again later."
            ) from exc
        return grant.admin_role if grant is not None else None

    async def is_active_admin(self, user_id: UUID) -> bool:
        return await self.get_admin_role(user_id) is not None

    async def resolve_for_user(
        self, user_id: UUID, *, test_plan: Optional[str] = None
    ) -> Entitlements:
        """Resolve entitlements; lookup failures raise :class:`EntitlementLookupError`."""

        record = await self.get_subscription_record(user_id)
        admin_role = await self.get_admin_role(user_id)
        is_admin = admin_role is not None

        plan_id = record.plan_id if record else None
        subscribed = record.subscribed if record else False
        capabilities = resolve(plan_id, subscribed, is_admin, test_plan=test_plan)

        override: Optional[OverrideSource] = None
        if test_plan is not None:
            override = "test_plan"
            logger.warning(
                f"Test plan override '{test_plan}' applied for user {user_id} "
                f"(resolved to {capabilities.plan_id})"
            )
        elif is_admin:
            override = "admin"
            logger.info(
                f"Admin override applied for user {user_id} (role={admin_role}, "
                f"stored_plan={plan_id}, subscribed={subscribed})"
            )

        return Entitlements(
            user_id=user_id,
            capabilities=capabilities,
            stored_plan_id=plan_id,
            subscribed=subscribed,
            period_end=record.period_end if record else None,
            is_admin=is_admin,
            admin_role=admin_role,
            override=override,
        )

    async def resolve_or_fail_closed(
        self, user_id: UUID, *, test_plan: Optional[str] = None
    ) -> Entitlements:
        """Like :meth:`resolve_for_user`, but degrade to free on lookup failure.

        For read-only views. Gated writes should let the error propagate.
        The session is rolled back so the caller can keep using it after a
        failed statement.
        """

        try:
            return await self.resolve_for_user(user_id, test_plan=test_plan)
        except EntitlementLookupError:
            await self.session.rollback()
            logger.warning(f"Serving free capabilities to user {user_id}: entitlements unavailable")
            return Entitlements(
                user_id=user_id,
                capabilities=plan_catalog.free_capabilities(),
                degraded=True,
            )
