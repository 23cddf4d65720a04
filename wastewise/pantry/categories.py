"""Pantry category taxonomy and keyword-based category guessing."""

from __future__ import annotations

CATEGORIES: tuple[str, ...] = (
    "Produce",
    "Dairy",
    "Meat",
    "Grains",
    "Beverages",
    "Snacks",
    "Frozen",
    "Bakery",
    "Other",
)

DEFAULT_CATEGORY = "Other"

# Checked in insertion order; the first category with a matching keyword wins.
# Dairy runs before Frozen, so "frozen yogurt" and "ice cream" land in Dairy.
_CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "Dairy": ["milk", "cheese", "yogurt", "butter", "cream"],
    "Produce": [
        "tomato", "lettuce", "onion", "potato", "carrot", "vegetable",
        "fruit", "apple", "banana",
    ],
    "Meat": ["chicken", "beef", "pork", "fish", "meat"],
    "Grains": ["rice", "bread", "pasta", "flour", "cereal"],
    "Beverages": ["juice", "soda", "water", "coffee", "tea"],
    "Snacks": ["chips", "cookie", "candy", "snack"],
    "Frozen": ["ice cream", "frozen"],
    "Bakery": ["cake", "donut", "pastry"],
}


def guess_category(name: str) -> str:
    """Guess the pantry category of an item name.

    Matching is a case-insensitive substring test, so "Carrots" hits the
    "carrot" keyword and "Steak" (which contains "tea") is a beverage.
    """
    if not isinstance(name, str):
        return DEFAULT_CATEGORY
    lower = name.lower()
    for category, keywords in _CATEGORY_KEYWORDS.items():
        for keyword in keywords:
            if keyword in lower:
                return category
    return DEFAULT_CATEGORY


def is_known_category(category: str) -> bool:
    return category in CATEGORIES
