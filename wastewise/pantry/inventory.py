"""Pantry inventory views: summary counts, search/sort and CSV export.

Items are plain dicts as returned by the inventory store, with at least
``name``, ``category``, ``quantity``, ``unit``, ``expiry_date`` and an
optional ``location``.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from .expiry import days_until_expiry

ALL_CATEGORIES = "All"

SORT_KEYS: tuple[str, ...] = ("expiry_asc", "expiry_desc", "name_asc", "name_desc")

CSV_HEADERS: list[str] = ["Name", "Category", "Quantity", "Unit", "Expiry Date", "Location"]

# Items expiring within this many days (today included) count as "soon"
EXPIRING_SOON_DAYS = 7


@dataclass
class PantryStats:
    total: int = 0
    expiring_soon: int = 0
    expired: int = 0


def pantry_stats(items: Iterable[Mapping[str, Any]], today: date | None = None) -> PantryStats:
    """Count items, items expiring within a week and expired items.

    Items without a readable expiry date count towards the total only.
    """
    stats = PantryStats()
    for item in items:
        stats.total += 1
        days_left = days_until_expiry(item.get("expiry_date"), today)
        if days_left is None:
            continue
        if days_left < 0:
            stats.expired += 1
        elif days_left <= EXPIRING_SOON_DAYS:
            stats.expiring_soon += 1
    return stats


def filter_items(
    items: Iterable[Mapping[str, Any]],
    query: str = "",
    category: str = ALL_CATEGORIES,
) -> list[Mapping[str, Any]]:
    """Keep items whose name contains *query* (case-insensitive) and,
    unless *category* is "All", whose category matches exactly."""
    needle = (query or "").lower()
    result = []
    for item in items:
        if needle and needle not in str(item.get("name") or "").lower():
            continue
        if category != ALL_CATEGORIES and item.get("category") != category:
            continue
        result.append(item)
    return result


def sort_items(
    items: Iterable[Mapping[str, Any]],
    sort_by: str = "expiry_asc",
) -> list[Mapping[str, Any]]:
    """Sort by expiry or name, ascending or descending.

    Items without a readable expiry date go last in both expiry orders.
    An unknown key keeps the input order.
    """
    result = list(items)
    match sort_by:
        case "expiry_asc" | "expiry_desc":
            dated = [i for i in result if _expiry_ordinal(i) is not None]
            undated = [i for i in result if _expiry_ordinal(i) is None]
            dated.sort(key=_expiry_ordinal, reverse=sort_by == "expiry_desc")
            return dated + undated
        case "name_asc" | "name_desc":
            result.sort(
                key=lambda i: str(i.get("name") or "").casefold(),
                reverse=sort_by == "name_desc",
            )
    return result


def to_csv(items: Iterable[Mapping[str, Any]]) -> str:
    """Render items as CSV with a header row; an empty location is "N/A"."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for item in items:
        writer.writerow([
            item.get("name", ""),
            item.get("category", ""),
            item.get("quantity", ""),
            item.get("unit", ""),
            item.get("expiry_date", ""),
            item.get("location") or "N/A",
        ])
    return buf.getvalue()


def _expiry_ordinal(item: Mapping[str, Any]) -> int | None:
    # Offset from a fixed day, so only the ordering matters
    return days_until_expiry(item.get("expiry_date"), date.min)
