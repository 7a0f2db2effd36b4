"""Capability resolution: plan state to a concrete :class:`CapabilitySet`."""
from __future__ import annotations

from typing import Optional

from linkhub.services import plan_catalog
from linkhub.services.plan_catalog import CapabilitySet


def resolve(
    plan_id: Optional[str],
    subscribed: bool,
    is_active_admin: bool,
    *,
    test_plan: Optional[str] = None,
) -> CapabilitySet:
    """Map a user's stored plan state to the capabilities they hold.

    Precedence:

    1. ``test_plan``: explicit QA override, only passed in when test mode is
       enabled. Unknown names resolve to free.
    2. Active admin grant: enterprise, whatever the billing state.
    3. Not subscribed, or no plan id: free.
    4. Catalog lookup; unknown plan ids fail closed to free.
    """

    if test_plan is not None:
        return plan_catalog.get_or_default(test_plan).capabilities

    if is_active_admin:
        return plan_catalog.enterprise_capabilities()

    if not subscribed or plan_id is None:
        return plan_catalog.free_capabilities()

    return plan_catalog.get_or_default(plan_id).capabilities
