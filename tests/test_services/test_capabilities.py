import pytest

from linkhub.services import plan_catalog
from linkhub.services.capabilities import resolve


PLAN_IDS = ["free", "basic", "premium", "enterprise"]


@pytest.mark.parametrize("plan_id", PLAN_IDS)
def test_subscribed_user_gets_catalog_capabilities(plan_id):
    assert resolve(plan_id, True, False) == plan_catalog.get(plan_id).capabilities


@pytest.mark.parametrize("plan_id", PLAN_IDS + [None, "legacy_gold"])
@pytest.mark.parametrize("subscribed", [True, False])
def test_admin_override_dominates(plan_id, subscribed):
    assert resolve(plan_id, subscribed, True) == plan_catalog.enterprise_capabilities()


@pytest.mark.parametrize("plan_id", PLAN_IDS + ["legacy_gold"])
def test_unsubscribed_user_is_free_even_with_stale_plan(plan_id):
    assert resolve(plan_id, False, False) == plan_catalog.free_capabilities()


def test_missing_plan_id_is_free_even_when_subscribed():
    assert resolve(None, True, False) == plan_catalog.free_capabilities()


def test_unknown_plan_fails_closed():
    capabilities = resolve("legacy_gold", True, False)
    assert capabilities == plan_catalog.free_capabilities()
    assert capabilities.link_limit == 5


def test_stored_tier_casing_is_tolerated():
    assert resolve("Enterprise", True, False).plan_id == "enterprise"


def test_resolve_is_idempotent():
    first = resolve("premium", True, False)
    second = resolve("premium", True, False)
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_test_plan_overrides_stored_plan():
    assert resolve(None, False, False, test_plan="premium").plan_id == "premium"


def test_test_plan_can_preview_lower_tier_for_admins():
    assert resolve("enterprise", True, True, test_plan="free").plan_id == "free"


def test_unknown_test_plan_resolves_to_free():
    assert resolve("enterprise", True, False, test_plan="gold") == plan_catalog.free_capabilities()
