import pytest

from linkhub.services import plan_catalog, quota
from linkhub.services.capabilities import resolve
from linkhub.services.plan_catalog import CapabilitySet


def _limit(link_limit: int) -> CapabilitySet:
    return CapabilitySet(plan_id="test", link_limit=link_limit)


@pytest.mark.parametrize(
    "link_limit, count, expected",
    [(5, 0, 5), (5, 3, 2), (5, 5, 0), (5, 9, 0), (0, 0, 0), (25, 24, 1)],
)
def test_remaining_is_limit_minus_count_floored_at_zero(link_limit, count, expected):
    assert quota.remaining(_limit(link_limit), count) == expected


@pytest.mark.parametrize("count", [0, 1, 10_000, -3])
def test_unlimited_always_allows(count):
    capabilities = _limit(-1)
    assert quota.can_create(capabilities, count) is True
    assert quota.remaining(capabilities, count) == -1


def test_can_create_is_monotonic_in_count():
    capabilities = _limit(7)
    results = [quota.can_create(capabilities, n) for n in range(20)]
    # Once denied, never allowed again as the count grows.
    assert results == sorted(results, reverse=True)
    assert results.index(False) == 7


@pytest.mark.parametrize("bad_count", [-1, -100, None, "lots", float("nan")])
def test_bad_counts_are_clamped_to_zero(bad_count):
    capabilities = _limit(5)
    assert quota.can_create(capabilities, bad_count) is True
    assert quota.remaining(capabilities, bad_count) == 5


def test_zero_limit_never_allows():
    assert quota.can_create(_limit(0), 0) is False


def test_basic_plan_at_limit():
    capabilities = resolve("basic", True, False)
    assert quota.can_create(capabilities, 25) is False
    assert quota.remaining(capabilities, 25) == 0


def test_enterprise_plan_with_many_links():
    capabilities = resolve("enterprise", True, False)
    assert quota.can_create(capabilities, 10_000) is True
    assert quota.remaining(capabilities, 10_000) == -1


def test_unsubscribed_premium_falls_back_to_free_quota():
    capabilities = resolve("premium", False, False)
    assert capabilities.link_limit == 5
    assert quota.can_create(capabilities, 3) is True
    assert quota.remaining(capabilities, 3) == 2


def test_evaluate_bundles_the_decision():
    decision = quota.evaluate(plan_catalog.free_capabilities(), 4)
    assert decision.model_dump() == {
        "allowed": True,
        "used": 4,
        "limit": 5,
        "remaining": 1,
    }


def test_evaluate_reports_clamped_usage():
    assert quota.evaluate(plan_catalog.free_capabilities(), -2).used == 0
