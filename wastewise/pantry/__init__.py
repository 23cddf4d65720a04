"""Pantry intake and waste accounting for the food-waste app."""

from .categories import CATEGORIES, DEFAULT_CATEGORY, guess_category
from .config import LoggingConfig, PantryConfig, ReceiptConfig, load_config
from .expiry import DEFAULT_EXPIRY_DAYS, days_until_expiry, default_expiry, expiry_status
from .inventory import PantryStats, filter_items, pantry_stats, sort_items, to_csv
from .receipt import (
    CandidateItem,
    ReceiptFormatError,
    extract_items,
    is_junk,
    parse_line,
    parse_receipt_data,
    parse_receipt_json,
)
from .waste import WasteSummary, estimate_carbon_footprint, summarize_waste

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "guess_category",
    "is_junk",
    "parse_line",
    "extract_items",
    "CandidateItem",
    "parse_receipt_data",
    "parse_receipt_json",
    "ReceiptFormatError",
    "DEFAULT_EXPIRY_DAYS",
    "default_expiry",
    "days_until_expiry",
    "expiry_status",
    "PantryStats",
    "pantry_stats",
    "filter_items",
    "sort_items",
    "to_csv",
    "estimate_carbon_footprint",
    "summarize_waste",
    "WasteSummary",
    "PantryConfig",
    "ReceiptConfig",
    "LoggingConfig",
    "load_config",
]
