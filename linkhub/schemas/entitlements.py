"""Response schemas for plans and limits."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from linkhub.services.plan_catalog import CapabilitySet
from linkhub.services.quota import QuotaDecision


class PlanRead(BaseModel):
    id: str
    name: str
    monthly_price_cents: int
    description: str
    capabilities: CapabilitySet


class CurrentLimits(BaseModel):
    plan_id: str
    stored_plan_id: Optional[str] = None
    subscribed: bool
    period_end: Optional[datetime] = None
    is_admin: bool
    override: Optional[str] = None
    degraded: bool = False
    capabilities: CapabilitySet
    links: QuotaDecision


class FeatureStatus(BaseModel):
    feature: str
    enabled: bool
    plan_id: str
