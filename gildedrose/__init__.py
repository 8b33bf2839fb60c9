"""gildedrose: inventory quality simulator.

Advances a list of stock items by one day at a time. Each item's category
(normal, aged, legendary, backstage pass, conjured) decides how its sell-in
countdown and quality change.

Usage:
    from gildedrose import Item, advance_one_day

    items = [Item("Aged Brie", 2, 0)]
    advance_one_day(items)

    python -m gildedrose simulate --days 5     # CLI harness
"""

from gildedrose.models import Category, Item
from gildedrose.updater import GildedRose, advance_one_day

__all__ = ["Category", "GildedRose", "Item", "advance_one_day"]
