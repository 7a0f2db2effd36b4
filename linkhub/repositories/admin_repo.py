"""Repository for the admin allow-list."""
from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.db.models.admin_user import AdminUser


class AdminRepo:
    """Data-access helpers for :class:`AdminUser`."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_active_grant(self, user_id: UUID) -> AdminUser | None:
        result = await self.session.execute(
            select(AdminUser).where(
                AdminUser.user_id == user_id,
                AdminUser.is_active.is_(True),
            )
        )
        return result.scalars().first()
