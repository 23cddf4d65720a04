"""Data models for items extracted from receipts."""

from __future__ import annotations

from dataclasses import asdict, dataclass

RECEIPT_SCAN_NOTE = "Imported from receipt scan"
DEFAULT_UNIT = "pcs"


@dataclass
class CandidateItem:
    """An unconfirmed pantry item awaiting user review.

    Nothing is persisted until the user confirms the item and it is sent to
    the inventory create call.
    """

    name: str               # Trimmed, first letter upper-cased
    category: str           # One of categories.CATEGORIES
    quantity: float = 1
    unit: str = DEFAULT_UNIT
    expiry_date: str = ""   # ISO date
    purchase_price: float | None = None
    notes: str = RECEIPT_SCAN_NOTE

    def to_dict(self) -> dict:
        """Return the JSON-ready record; a missing price is sent as ""."""
        data = asdict(self)
        if data["purchase_price"] is None:
            data["purchase_price"] = ""
        return data
