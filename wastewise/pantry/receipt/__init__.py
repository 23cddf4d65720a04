"""Receipt intake: turn receipt text or payloads into candidate pantry items."""

from .junk import RECEIPT_BLACKLIST, contains_blacklisted, is_junk, is_placeholder_name
from .models import CandidateItem
from .parser import extract_items, normalize_name, parse_line
from .payload import ReceiptFormatError, parse_receipt_data, parse_receipt_json

__all__ = [
    "CandidateItem",
    "RECEIPT_BLACKLIST",
    "ReceiptFormatError",
    "contains_blacklisted",
    "extract_items",
    "is_junk",
    "is_placeholder_name",
    "normalize_name",
    "parse_line",
    "parse_receipt_data",
    "parse_receipt_json",
]
