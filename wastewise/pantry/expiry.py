"""Expiry date defaults and freshness status for pantry items."""

from __future__ import annotations

from datetime import date, timedelta

DEFAULT_EXPIRY_DAYS = 7

# Upper bounds (inclusive) in days left, checked in order.
_STATUS_THRESHOLDS: list[tuple[int, str]] = [
    (-1, "expired"),
    (3, "critical"),
    (7, "warning"),
]


def default_expiry(today: date | None = None, days: int = DEFAULT_EXPIRY_DAYS) -> str:
    """Return the ISO expiry date assigned to newly imported items.

    The same offset is used for every category.
    """
    base = today or date.today()
    return (base + timedelta(days=days)).isoformat()


def days_until_expiry(expiry_date: str | date | None, today: date | None = None) -> int | None:
    """Whole days from *today* to *expiry_date*; negative once expired.

    Returns None when the date is missing or not ISO formatted.
    """
    if not expiry_date:
        return None
    if isinstance(expiry_date, date):
        expiry = expiry_date
    else:
        try:
            expiry = date.fromisoformat(expiry_date[:10])
        except (ValueError, TypeError):
            return None
    return (expiry - (today or date.today())).days


def expiry_status(expiry_date: str | date | None, today: date | None = None) -> str:
    """Classify an item as expired, critical, warning, fresh or unknown."""
    days_left = days_until_expiry(expiry_date, today)
    if days_left is None:
        return "unknown"
    for limit, status in _STATUS_THRESHOLDS:
        if days_left <= limit:
            return status
    return "fresh"
