"""Clerk user management integration."""

from .activity import count_active_users
from .client import ClerkClient

__all__ = ["ClerkClient", "count_active_users"]
