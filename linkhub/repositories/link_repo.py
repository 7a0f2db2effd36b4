"""Repository utilities for working with Link records."""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.db.models.link import Link


class LinkRepo:
    """Simple data-access helper for Link entities."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, link_id: UUID) -> Optional[Link]:
        result = await self.session.execute(select(Link).where(Link.id == link_id))
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: UUID) -> List[Link]:
        result = await self.session.execute(
            select(Link)
            .where(Link.user_id == user_id)
            .order_by(Link.position.asc(), Link.created_at.asc())
        )
        return list(result.scalars().all())

    async def count_for_user(self, user_id: UUID) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Link).where(Link.user_id == user_id)
        )
        value = result.scalar_one()
        return int(value or 0)

    async def next_position(self, user_id: UUID) -> int:
        result = await self.session.execute(
            select(func.max(Link.position)).where(Link.user_id == user_id)
        )
        value = result.scalar_one()
        return 0 if value is None else int(value) + 1

    async def create(
        self,
        user_id: UUID,
        *,
        title: str,
        url: str,
        position: int,
        slug: Optional[str] = None,
        description: Optional[str] = None,
        icon_url: Optional[str] = None,
        is_active: bool = True,
        scheduled_at: Optional[datetime] = None,
    ) -> Link:
        link = Link(
            user_id=user_id,
            title=title,
            url=url,
            slug=slug,
            description=description,
            icon_url=icon_url,
            is_active=is_active,
            is_scheduled=scheduled_at is not None,
            scheduled_at=scheduled_at,
            position=position,
        )
        self.session.add(link)
        await self.session.flush()
        await self.session.refresh(link)
        return link

    async def delete(self, link: Link) -> None:
        await self.session.delete(link)
        await self.session.flush()
