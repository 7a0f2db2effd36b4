"""Endpoints for managing a user's links, gated by plan quota."""
from __future__ import annotations

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.api.deps import get_db_session, get_entitlements, rate_limited_auth
from linkhub.core.exceptions import (
    FeatureUnavailableError,
    NotFoundError,
    QuotaExceededError,
)
from linkhub.repositories.link_repo import LinkRepo
from linkhub.schemas.link import LinkCreate, LinkRead
from linkhub.services import quota
from linkhub.services.entitlements import Entitlements
from linkhub.services.limits import ensure_idempotent


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/links", tags=["links"])

LINK_LIMIT_MESSAGE = "Link limit reached for your plan. Upgrade to add more links."


@router.get("", response_model=List[LinkRead])
async def list_links(
    auth=Depends(rate_limited_auth),
    db: AsyncSession = Depends(get_db_session),
):
    return await LinkRepo(db).list_for_user(auth["user_id"])


@router.post("", response_model=LinkRead, status_code=status.HTTP_201_CREATED)
async def create_link(
    body: LinkCreate,
    entitlements: Entitlements = Depends(get_entitlements),
    idempotency_key: str | None = Header(default=None, alias="Idempotency-Key"),
    db: AsyncSession = Depends(get_db_session),
):
    user_id = entitlements.user_id
    capabilities = entitlements.capabilities

    if body.scheduled_at is not None and not capabilities.has("link_scheduling"):
        raise FeatureUnavailableError(
            "Link scheduling is not available on your plan. Upgrade to schedule links."
        )

    repo = LinkRepo(db)
    current_links = await repo.count_for_user(user_id)
    if not quota.can_create(capabilities, current_links):
        raise QuotaExceededError(LINK_LIMIT_MESSAGE)

    link = await repo.create(
        user_id,
        title=body.title,
        url=body.url,
        slug=body.slug,
        description=body.description,
        icon_url=body.icon_url,
        is_active=body.is_active,
        scheduled_at=body.scheduled_at,
        position=await repo.next_position(user_id),
    )

    # Another request may have inserted between the count and our insert.
    if not capabilities.unlimited_links:
        after = await repo.count_for_user(user_id)
        if after > capabilities.link_limit:
            logger.warning(
                f"Concurrent link creation pushed user {user_id} to {after} links "
                f"(limit {capabilities.link_limit}); rolling back"
            )
            raise QuotaExceededError(LINK_LIMIT_MESSAGE)

    # Claim the key last so a rolled-back attempt can be retried with it.
    await ensure_idempotent(str(user_id), idempotency_key)

    logger.info(
        f"User {user_id} created link {link.id} "
        f"({quota.remaining(capabilities, current_links + 1)} remaining)"
    )
    return link


@router.delete("/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_link(
    link_id: UUID,
    auth=Depends(rate_limited_auth),
    db: AsyncSession = Depends(get_db_session),
):
    repo = LinkRepo(db)
    link = await repo.get_by_id(link_id)
    if link is None or link.user_id != auth["user_id"]:
        raise NotFoundError("Link not found")
    await repo.delete(link)
