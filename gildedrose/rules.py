"""Per-category daily update rules.

Each rule mutates one Item in place. sell_in is decremented first for every
category except LEGENDARY, and thresholds compare against the decremented
value. Quality bounds are enforced inside each branch rather than by a clamp
applied afterwards: the backstage force-to-zero has to win over the ceiling.
"""

from __future__ import annotations

from typing import Callable

from gildedrose.models import MAX_QUALITY, MIN_QUALITY, Category, Item

# Backstage passes gain an extra point below each threshold.
_BACKSTAGE_SOON = 11
_BACKSTAGE_IMMINENT = 6


def update_normal(item: Item) -> None:
    """Degrade by 1, or by 2 once past the sell date. Never below 0."""
    item.sell_in -= 1
    if item.quality <= MIN_QUALITY:
        return
    item.quality -= 1
    if item.sell_in < 0 and item.quality > MIN_QUALITY:
        item.quality -= 1


def update_aged(item: Item) -> None:
    """Improve by 1, or by 2 once past the sell date. Never above 50."""
    item.sell_in -= 1
    if item.quality < MAX_QUALITY:
        item.quality += 1
    if item.sell_in < 0 and item.quality < MAX_QUALITY:
        item.quality += 1


def update_legendary(item: Item) -> None:
    """Legendary items never change."""


def update_backstage(item: Item) -> None:
    """Improve faster as the concert nears, then drop to 0 once it has passed."""
    item.sell_in -= 1
    if item.quality < MAX_QUALITY:
        item.quality += 1
    if item.sell_in < _BACKSTAGE_SOON and item.quality < MAX_QUALITY:
        item.quality += 1
    if item.sell_in < _BACKSTAGE_IMMINENT and item.quality < MAX_QUALITY:
        item.quality += 1
    if item.sell_in < 0:
        item.quality = 0


def update_conjured(item: Item) -> None:
    """Degrade twice as fast as a normal item: 2 a day, 4 past the sell date."""
    item.sell_in -= 1
    if item.quality <= MIN_QUALITY:
        return
    step = 2 if item.sell_in >= 0 else 4
    item.quality = max(item.quality - step, MIN_QUALITY)


RULES: dict[Category, Callable[[Item], None]] = {
    Category.NORMAL: update_normal,
    Category.AGED: update_aged,
    Category.LEGENDARY: update_legendary,
    Category.BACKSTAGE: update_backstage,
    Category.CONJURED: update_conjured,
}


def rule_for(category: Category) -> Callable[[Item], None]:
    """Return the update rule for a category."""
    return RULES[category]
