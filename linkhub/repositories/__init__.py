"""Repository layer package."""

from linkhub.repositories.admin_repo import AdminRepo
from linkhub.repositories.link_repo import LinkRepo
from linkhub.repositories.subscription_repo import SubscriptionRepo

__all__ = [
    "AdminRepo",
    "LinkRepo",
    "SubscriptionRepo",
]
