"""Repository utilities for user subscriptions."""
from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.db.models.subscriber import Subscriber


class SubscriptionRepo:
    """Read-only access to :class:`Subscriber` rows."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_user(self, user_id: UUID) -> Subscriber | None:
        result = await self.session.execute(
            select(Subscriber).where(Subscriber.user_id == user_id)
        )
        return result.scalars().first()
