"""Structured receipt payloads, e.g. JSON carried in a receipt QR code.

Expected shape::

    {"items": [{"name": "Milk", "quantity": 2, "price": 1.2, "expiry": "2025-01-17"}]}
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from ..categories import guess_category
from ..expiry import DEFAULT_EXPIRY_DAYS, default_expiry
from .junk import is_placeholder_name
from .models import DEFAULT_UNIT, CandidateItem

logger = logging.getLogger(__name__)


class ReceiptFormatError(ValueError):
    """Raised when a structured receipt payload cannot be decoded."""


def parse_receipt_json(
    text: str,
    *,
    today: date | None = None,
    expiry_days: int = DEFAULT_EXPIRY_DAYS,
    unit: str = DEFAULT_UNIT,
) -> list[CandidateItem]:
    """Decode a JSON receipt payload and extract its items.

    Raises:
        ReceiptFormatError: If *text* is not a JSON object.
    """
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise ReceiptFormatError(f"Receipt payload is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise ReceiptFormatError(
            f"Receipt payload must be a JSON object, got {type(payload).__name__}"
        )
    return parse_receipt_data(payload, today=today, expiry_days=expiry_days, unit=unit)


def parse_receipt_data(
    payload: dict[str, Any],
    *,
    today: date | None = None,
    expiry_days: int = DEFAULT_EXPIRY_DAYS,
    unit: str = DEFAULT_UNIT,
) -> list[CandidateItem]:
    """Map the ``items`` of a decoded payload to candidate items.

    Entries without a usable name are skipped. A payload with no ``items``
    list yields no candidates.
    """
    entries = payload.get("items")
    if not isinstance(entries, list):
        logger.debug("Receipt payload has no items list")
        return []

    today = today or date.today()
    note = f"Imported from receipt on {today.isoformat()}"

    items: list[CandidateItem] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        if not isinstance(name, str) or is_placeholder_name(name):
            continue
        items.append(
            CandidateItem(
                name=name.strip(),
                category=guess_category(name),
                quantity=_positive_number(entry.get("quantity")),
                unit=unit,
                expiry_date=entry.get("expiry") or default_expiry(today, expiry_days),
                purchase_price=_optional_price(entry.get("price")),
                notes=note,
            )
        )
    return items


def _positive_number(value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return 1
    return value


def _optional_price(value: Any) -> float | None:
    if value in (None, ""):
        return None
    try:
        return float(value) or None
    except (TypeError, ValueError):
        return None
