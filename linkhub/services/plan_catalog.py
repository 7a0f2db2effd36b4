"""Static plan catalog.

These values are the single source of truth for every feature gate. Call
sites ask the resolved :class:`CapabilitySet` instead of comparing tiers.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from linkhub.core.exceptions import UnknownFeatureError


FREE_PLAN_ID = "free"
BASIC_PLAN_ID = "basic"
PREMIUM_PLAN_ID = "premium"
ENTERPRISE_PLAN_ID = "enterprise"

UNLIMITED = -1


class CapabilitySet(BaseModel):
    """The concrete limits and feature flags a user currently has."""

    model_config = ConfigDict(frozen=True)

    plan_id: str
    link_limit: int = Field(..., ge=UNLIMITED, description="-1 means unlimited")

    custom_domain: bool = False
    advanced_analytics: bool = False
    team_collaboration: bool = False
    api_access: bool = False
    white_label: bool = False
    link_scheduling: bool = False
    custom_themes: bool = False
    analytics_export: bool = False
    multiple_domains: bool = False
    custom_profile_url: bool = False
    email_support: bool = False
    priority_support: bool = False
    remove_branding: bool = False
    dedicated_support: bool = False
    custom_integrations: bool = False
    advanced_security: bool = False

    @classmethod
    def feature_names(cls) -> Tuple[str, ...]:
        return tuple(
            name
            for name, field in cls.model_fields.items()
            if field.annotation is bool
        )

    @property
    def unlimited_links(self) -> bool:
        return self.link_limit == UNLIMITED

    def has(self, feature: str) -> bool:
        """Return whether ``feature`` is enabled.

        Raises :class:`UnknownFeatureError` for names that are not boolean
        capabilities, so a typo never silently reads as "disabled".
        """

        if feature not in self.feature_names():
            raise UnknownFeatureError(f"Unknown feature: {feature}")
        return bool(getattr(self, feature))


class PlanDefinition(BaseModel):
    """A named pricing tier and the capabilities it grants."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    monthly_price_cents: int
    description: str
    capabilities: CapabilitySet


_PLANS: Tuple[PlanDefinition, ...] = (
    PlanDefinition(
        id=FREE_PLAN_ID,
        name="Free",
        monthly_price_cents=0,
        description="Up to 5 links with basic features",
        capabilities=CapabilitySet(plan_id=FREE_PLAN_ID, link_limit=5),
    ),
    PlanDefinition(
        id=BASIC_PLAN_ID,
        name="Basic",
        monthly_price_cents=799,
        description="Up to 25 links with a custom profile URL",
        capabilities=CapabilitySet(
            plan_id=BASIC_PLAN_ID,
            link_limit=25,
            custom_profile_url=True,
            email_support=True,
        ),
    ),
    PlanDefinition(
        id=PREMIUM_PLAN_ID,
        name="Premium",
        monthly_price_cents=1999,
        description="Up to 100 links with advanced analytics",
        capabilities=CapabilitySet(
            plan_id=PREMIUM_PLAN_ID,
            link_limit=100,
            custom_domain=True,
            advanced_analytics=True,
            white_label=True,
            link_scheduling=True,
            custom_themes=True,
            custom_profile_url=True,
            email_support=True,
            priority_support=True,
            remove_branding=True,
        ),
    ),
    PlanDefinition(
        id=ENTERPRISE_PLAN_ID,
        name="Enterprise",
        monthly_price_cents=4999,
        description="Unlimited links, team collaboration and every feature",
        capabilities=CapabilitySet(
            plan_id=ENTERPRISE_PLAN_ID,
            link_limit=UNLIMITED,
            **{name: True for name in CapabilitySet.feature_names()},
        ),
    ),
)

PLAN_CATALOG: Dict[str, PlanDefinition] = {plan.id: plan for plan in _PLANS}


def normalize_plan_id(plan_id: Optional[str]) -> Optional[str]:
    """Fold stored tier names such as ``"Premium "`` to catalog ids."""

    if plan_id is None:
        return None
    normalized = str(plan_id).strip().lower()
    return normalized or None


def get(plan_id: Optional[str]) -> Optional[PlanDefinition]:
    """Return the plan for ``plan_id`` or ``None`` when it is not in the catalog."""

    normalized = normalize_plan_id(plan_id)
    if normalized is None:
        return None
    return PLAN_CATALOG.get(normalized)


def get_or_default(plan_id: Optional[str]) -> PlanDefinition:
    return get(plan_id) or PLAN_CATALOG[FREE_PLAN_ID]


def all_plans() -> List[PlanDefinition]:
    return list(_PLANS)


def free_capabilities() -> CapabilitySet:
    return PLAN_CATALOG[FREE_PLAN_ID].capabilities


def enterprise_capabilities() -> CapabilitySet:
    return PLAN_CATALOG[ENTERPRISE_PLAN_ID].capabilities
