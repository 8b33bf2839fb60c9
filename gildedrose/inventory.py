"""Starting inventories for the CLI harness.

Either the built-in sample stock or a JSON file holding an array of
``{"name": ..., "sell_in": ..., "quality": ...}`` objects.
"""

from __future__ import annotations

import json
from pathlib import Path

from gildedrose.models import (
    AGED_BRIE,
    BACKSTAGE_PASSES,
    LEGENDARY_QUALITY,
    SULFURAS,
    Item,
)


def sample_inventory() -> list[Item]:
    """Return a fresh copy of the sample stock."""
    return [
        Item("+5 Dexterity Vest", 10, 20),
        Item(AGED_BRIE, 2, 0),
        Item("Elixir of the Mongoose", 5, 7),
        Item(SULFURAS, 0, LEGENDARY_QUALITY),
        Item(SULFURAS, -1, LEGENDARY_QUALITY),
        Item(BACKSTAGE_PASSES, 15, 20),
        Item(BACKSTAGE_PASSES, 10, 49),
        Item(BACKSTAGE_PASSES, 5, 49),
        Item("Conjured Mana Cake", 3, 6),
    ]


def load_inventory(path: Path) -> list[Item]:
    """Load an inventory from a JSON file.

    Args:
        path: File containing a JSON array of item objects.

    Returns:
        Items in file order.

    Raises:
        FileNotFoundError: the file does not exist.
        ValueError: the file is not valid JSON or not an array of item objects.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of items")

    items = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"{path}: entry {i} is not an object")
        items.append(Item.from_dict(entry))
    return items

