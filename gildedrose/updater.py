"""Inventory updater: advances a caller-owned item list by one day.

Items are updated in place, in list order. Nothing is created, removed or
reordered, and no input raises.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from gildedrose.models import Item
from gildedrose.rules import rule_for


def advance_one_day(items: MutableSequence[Item]) -> None:
    """Apply each item's category rule once."""
    for item in items:
        rule_for(item.category)(item)


class GildedRose:
    """Wraps a caller-owned inventory list."""

    def __init__(self, items: MutableSequence[Item]):
        self.items = items

    def update_quality(self) -> None:
        advance_one_day(self.items)
