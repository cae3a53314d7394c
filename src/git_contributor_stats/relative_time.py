"""Coarse "N units ago" labels for commit timestamps."""

from __future__ import annotations

from datetime import datetime

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
# Approximate units: 30-day months and 365-day years.
SECONDS_PER_MONTH = 30 * SECONDS_PER_DAY
SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY

_BUCKETS: tuple[tuple[int, str], ...] = (
    (SECONDS_PER_YEAR, "years"),
    (SECONDS_PER_MONTH, "months"),
    (SECONDS_PER_DAY, "days"),
    (SECONDS_PER_HOUR, "hours"),
    (SECONDS_PER_MINUTE, "minutes"),
)


def format_relative_time(timestamp: datetime, now: datetime) -> str:
    """Describe how long before ``now`` the ``timestamp`` happened.

    The first bucket whose unit fits at least once wins. Future timestamps
    are not special-cased and end up in the seconds bucket.

    Args:
        timestamp: Moment to describe.
        now: Reference moment.

    Returns:
        A label such as ``"3 days ago"``. Units are always plural.
    """
    elapsed = int((now - timestamp).total_seconds())
    for unit_seconds, unit in _BUCKETS:
        if elapsed >= unit_seconds:
            return f"{elapsed // unit_seconds} {unit} ago"
    return f"{elapsed} seconds ago"
