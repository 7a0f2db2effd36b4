"""Quota arithmetic for count-bound resources such as links.

These checks are advisory. Two concurrent requests can both pass against the
same stale count, so writers re-check after inserting.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from linkhub.services.plan_catalog import UNLIMITED, CapabilitySet


class QuotaDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    allowed: bool
    used: int
    limit: int
    remaining: int


def _clamp_count(current_count: Any) -> int:
    """Coerce ``current_count`` to a non-negative int; garbage becomes 0."""

    try:
        value = int(current_count)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, value)


def can_create(capabilities: CapabilitySet, current_count: Any) -> bool:
    if capabilities.link_limit == UNLIMITED:
        return True
    return _clamp_count(current_count) < capabilities.link_limit


def remaining(capabilities: CapabilitySet, current_count: Any) -> int:
    """Slots left before the limit; ``-1`` when unlimited."""

    if capabilities.link_limit == UNLIMITED:
        return UNLIMITED
    return max(0, capabilities.link_limit - _clamp_count(current_count))


def evaluate(capabilities: CapabilitySet, current_count: Any) -> QuotaDecision:
    return QuotaDecision(
        allowed=can_create(capabilities, current_count),
        used=_clamp_count(current_count),
        limit=capabilities.link_limit,
        remaining=remaining(capabilities, current_count),
    )


def denied(capabilities: CapabilitySet) -> QuotaDecision:
    """Decision used when usage cannot be read: nothing may be created."""

    return QuotaDecision(
        allowed=False,
        used=0,
        limit=capabilities.link_limit,
        remaining=0,
    )
