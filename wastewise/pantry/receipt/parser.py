"""Heuristic extraction of pantry items from receipt text.

Receipt text usually comes from OCR and is noisy. Each line is matched
against a few loose patterns; the first one that yields a plausible item
name wins. Lines that cannot be read are dropped rather than guessed at,
since the user reviews the candidate list before anything is saved.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from ..categories import guess_category
from ..expiry import DEFAULT_EXPIRY_DAYS, default_expiry
from .junk import contains_blacklisted, is_junk
from .models import DEFAULT_UNIT, CandidateItem

logger = logging.getLogger(__name__)

# (pattern, name group, quantity group, price group), tried in order.
# The order decides lines that carry both leading and trailing numbers.
_LINE_RULES: list[tuple[re.Pattern[str], int, int | None, int | None]] = [
    # "Carrots 3 x 75.00"
    (re.compile(r"([A-Za-z\s]+)\s+(\d+)\s+.*?(\d+\.?\d*)"), 1, 2, 3),
    # "Carrots - 3kg - 75.00"
    (re.compile(r"([A-Za-z\s]+)\s+.*?(\d+\.?\d*)\s*$"), 1, None, 2),
    # "3 Carrots"
    (re.compile(r"^\s*(\d+)\s+([A-Za-z\s]+)"), 2, 1, None),
]

_MIN_LINE_LENGTH = 3
_MAX_BARE_NAME_LENGTH = 29
# The line rules backtrack polynomially; longer lines are merged OCR output
_MAX_RULE_LINE_LENGTH = 200

_DIGIT = re.compile(r"\d")
_LETTER = re.compile(r"[A-Za-z]")


def extract_items(
    raw_text: str,
    *,
    today: date | None = None,
    expiry_days: int = DEFAULT_EXPIRY_DAYS,
    unit: str = DEFAULT_UNIT,
) -> list[CandidateItem]:
    """Extract candidate pantry items from raw receipt text.

    Lines of two characters or fewer are skipped. Results keep the line
    order and are not deduplicated: a receipt may list an item twice.
    """
    if not raw_text:
        return []

    today = today or date.today()
    lines = [line for line in raw_text.splitlines() if len(line.strip()) >= _MIN_LINE_LENGTH]

    items: list[CandidateItem] = []
    for line in lines:
        item = parse_line(line, today=today, expiry_days=expiry_days, unit=unit)
        if item is not None:
            items.append(item)

    logger.debug("Receipt text: %d lines read, %d items extracted", len(lines), len(items))
    return items


def parse_line(
    line: str,
    *,
    today: date | None = None,
    expiry_days: int = DEFAULT_EXPIRY_DAYS,
    unit: str = DEFAULT_UNIT,
) -> CandidateItem | None:
    """Parse a single receipt line into a candidate item, or None."""
    text = (line or "").strip()
    if not text:
        return None

    if len(text) > _MAX_RULE_LINE_LENGTH:
        logger.debug("Skipping receipt line of %d characters", len(text))
        return None

    # Every line rule needs a digit; digit-free lines can only be bare names
    rules = _LINE_RULES if _DIGIT.search(text) else []
    for pattern, name_group, qty_group, price_group in rules:
        m = pattern.search(text)
        if not m:
            continue
        name = m.group(name_group).strip()
        if not _is_item_name(name):
            continue
        return _build_item(
            name,
            quantity=m.group(qty_group) if qty_group else None,
            price=m.group(price_group) if price_group else None,
            today=today,
            expiry_days=expiry_days,
            unit=unit,
        )

    if _is_bare_item_name(text):
        return _build_item(text, today=today, expiry_days=expiry_days, unit=unit)

    logger.debug("No item found in receipt line %r", text)
    return None


def _is_item_name(name: str) -> bool:
    return len(name) >= _MIN_LINE_LENGTH and not contains_blacklisted(name) and not is_junk(name)


def _is_bare_item_name(text: str) -> bool:
    """A short digit-free phrase such as "Spinach" or "Fresh basil"."""
    if not _MIN_LINE_LENGTH <= len(text) <= _MAX_BARE_NAME_LENGTH:
        return False
    if _DIGIT.search(text) or not _LETTER.search(text):
        return False
    return _is_item_name(text)


def _build_item(
    name: str,
    quantity: str | None = None,
    price: str | None = None,
    *,
    today: date | None,
    expiry_days: int,
    unit: str,
) -> CandidateItem:
    return CandidateItem(
        name=normalize_name(name),
        category=guess_category(name),
        quantity=_parse_quantity(quantity),
        unit=unit,
        expiry_date=default_expiry(today, expiry_days),
        purchase_price=_parse_price(price),
    )


def normalize_name(name: str) -> str:
    """Collapse whitespace and upper-case only the first letter.

    Receipt imports use sentence case ("Chicken breast"), not title case.
    """
    return " ".join(name.split()).capitalize()


def _parse_quantity(raw: str | None) -> int:
    if not raw:
        return 1
    try:
        return int(raw) or 1
    except ValueError:
        return 1


def _parse_price(raw: str | None) -> float | None:
    # A zero price is indistinguishable from a missing one on most receipts
    if not raw:
        return None
    try:
        return float(raw) or None
    except ValueError:
        return None
