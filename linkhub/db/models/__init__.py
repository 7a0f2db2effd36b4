"""Database models package exports."""

from linkhub.db.models.admin_user import AdminUser
from linkhub.db.models.link import Link
from linkhub.db.models.subscriber import Subscriber

__all__ = [
    "AdminUser",
    "Link",
    "Subscriber",
]
