"""
Active-user counting over Clerk user records.

A user is active when their last sign-in falls at or after ``now - window``.
Clerk reports ``last_sign_in_at`` as epoch milliseconds; date strings are
accepted as well. Users that never signed in are not active.
"""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from typing import Any

from dateutil.parser import parse as parse_date

logger = logging.getLogger(__name__)

ACTIVE_WINDOW = timedelta(days=30)


def parse_last_sign_in(value: Any) -> datetime | None:
    """Convert a ``last_sign_in_at`` value to an aware UTC datetime."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, int | float):
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        if isinstance(value, str):
            parsed = parse_date(value)
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=UTC)
            return parsed
    except (ValueError, OverflowError, OSError):
        logger.debug(f"Ignoring unparseable last_sign_in_at: {value!r}")
    return None


def is_active(
    user: dict[str, Any], now: datetime, window: timedelta = ACTIVE_WINDOW
) -> bool:
    last_sign_in = parse_last_sign_in(user.get("last_sign_in_at"))
    if last_sign_in is None:
        return False
    return last_sign_in >= now - window


def count_active_users(
    users: Iterable[dict[str, Any]],
    now: datetime | None = None,
    window: timedelta = ACTIVE_WINDOW,
) -> int:
    """Count users whose last sign-in is within ``window`` of ``now``.

    Args:
        users: User records as returned by the Clerk list endpoint
        now: Reference time, defaults to the current UTC time
        window: Length of the activity window, inclusive at its start

    Returns:
        Number of active users
    """
    now = now or datetime.now(UTC)
    return sum(1 for user in users if isinstance(user, dict) and is_active(user, now, window))
