"""Filters for receipt boilerplate and OCR placeholder text."""

from __future__ import annotations

import re

# Lorem-ipsum filler that shows up on demo receipts and template printouts
_PLACEHOLDER_WORDS: list[str] = [
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "dolore",
    "adipiscing", "elit", "sed",
]

# Receipt headers/footers plus placeholder words; never a pantry item
RECEIPT_BLACKLIST: frozenset[str] = frozenset([
    "total", "tax", "subtotal", "cash", "change", "visa", "master", "save",
    "date", "order", "receipt",
    *_PLACEHOLDER_WORDS,
    "do", "eiusmod", "tempor", "incididunt", "ut", "labore", "et", "magna",
    "aliqua", "enim", "minim", "veniam", "quis", "nostrud", "exercitation",
    "ullamco", "laboris", "nisi", "aliquip", "ex", "ea", "commodo",
    "consequat", "duis", "aute", "irure", "in", "reprehenderit", "voluptate",
    "velit", "esse", "cillum", "fugiat", "nulla", "pariatur",
])

_WORD = re.compile(r"[a-z]+")


def is_junk(name: str) -> bool:
    """Return True if *name* is too short or made only of noise tokens.

    Single-character tokens count as noise, so "x 1 tax" is junk.
    """
    lower = (name or "").lower().strip()
    if len(lower) < 3:
        return True
    words = lower.split()
    if all(w in RECEIPT_BLACKLIST or len(w) < 2 for w in words):
        return True
    return len(words) == 1 and words[0] in RECEIPT_BLACKLIST


def contains_blacklisted(name: str) -> bool:
    """Return True if any word of *name* is a blacklisted token."""
    return any(w in RECEIPT_BLACKLIST for w in _WORD.findall((name or "").lower()))


def is_placeholder_name(name: str) -> bool:
    """Looser check used for structured receipts, whose names are trusted more."""
    lower = (name or "").lower().strip()
    if len(lower) < 3:
        return True
    return any(
        lower == word or lower.startswith(word + " ")
        for word in _PLACEHOLDER_WORDS
    )
