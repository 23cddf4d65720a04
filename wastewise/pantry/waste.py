"""Waste accounting: carbon footprint estimates and waste log summaries."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

# kg CO2e emitted per kg of wasted food. A rough per-category figure.
CARBON_FACTORS: dict[str, float] = {
    "Meat": 20.0,
    "Dairy": 8.0,
    "Frozen": 5.0,
    "Bakery": 2.0,
    "Grains": 1.5,
    "Produce": 1.0,
    "Beverages": 0.5,
    "Other": 2.0,
}

DEFAULT_CARBON_FACTOR = 2.0

# Multipliers to kilograms. Units not listed (kg, l, pcs, ...) count 1:1.
_UNIT_TO_KG: dict[str, float] = {
    "g": 0.001,
    "lbs": 0.453,
    "lb": 0.453,
    "oz": 0.02835,
    "ml": 0.001,
}


@dataclass
class WasteSummary:
    total_quantity: float = 0.0
    total_cost: float = 0.0
    carbon_footprint: float = 0.0
    most_wasted_category: str = "None"
    log_count: int = 0


def to_kilograms(quantity: Any, unit: str = "kg") -> float | None:
    """Convert a quantity to kilograms, or None if it is not numeric."""
    amount = _as_float(quantity)
    if amount is None:
        return None
    return amount * _UNIT_TO_KG.get((unit or "").lower(), 1.0)


def estimate_carbon_footprint(quantity: Any, category: str, unit: str = "kg") -> float:
    """Estimate kg CO2e for wasting *quantity* of a category of food."""
    weight = to_kilograms(quantity, unit)
    if weight is None:
        return 0.0
    factor = CARBON_FACTORS.get(category, DEFAULT_CARBON_FACTOR)
    return round(weight * factor, 2)


def summarize_waste(logs: Iterable[Mapping[str, Any]]) -> WasteSummary:
    """Total up waste logs and find the most frequently wasted category.

    Each log may carry ``quantity``, ``cost`` (or ``cost_estimate``),
    ``carbon_footprint`` and ``category``. Missing or non-numeric values
    count as zero. On a tie the category seen first wins.
    """
    quantity = cost = carbon = 0.0
    counts: dict[str, int] = {}
    n = 0

    for log in logs:
        n += 1
        quantity += _as_float(log.get("quantity")) or 0.0
        raw_cost = log.get("cost")
        if raw_cost is None:
            raw_cost = log.get("cost_estimate")
        cost += _as_float(raw_cost) or 0.0
        carbon += _as_float(log.get("carbon_footprint")) or 0.0
        category = log.get("category")
        counts[category] = counts.get(category, 0) + 1

    top_category = "None"
    max_count = 0
    for category, count in counts.items():
        if count > max_count:
            max_count = count
            top_category = category

    return WasteSummary(
        total_quantity=round(quantity, 2),
        total_cost=round(cost, 2),
        carbon_footprint=round(carbon, 2),
        most_wasted_category=str(top_category),
        log_count=n,
    )


def _as_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result
