"""Data models for the gildedrose inventory simulator.

Category enum and the Item record that flows through rules → updater → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MIN_QUALITY = 0
MAX_QUALITY = 50
LEGENDARY_QUALITY = 80

SULFURAS = "Sulfuras, Hand of Ragnaros"
AGED_BRIE = "Aged Brie"
BACKSTAGE_PASSES = "Backstage passes to a TAFKAL80ETC concert"
CONJURED_MARKER = "Conjured"


class Category(str, Enum):
    """Item categories, one per update rule."""

    NORMAL = "normal"
    AGED = "aged"
    LEGENDARY = "legendary"
    BACKSTAGE = "backstage"
    CONJURED = "conjured"

    @classmethod
    def from_name(cls, name: str) -> Category:
        """Classify an item name into its category.

        Exact matches are checked first; Conjured matches on substring.
        Everything else is NORMAL.

        Args:
            name: Item label (e.g., "Aged Brie", "Conjured Mana Cake").

        Returns:
            Category enum value.
        """
        if name == SULFURAS:
            return cls.LEGENDARY
        if name == AGED_BRIE:
            return cls.AGED
        if name == BACKSTAGE_PASSES:
            return cls.BACKSTAGE
        if CONJURED_MARKER in name:
            return cls.CONJURED
        return cls.NORMAL


@dataclass
class Item:
    """A single stock item.

    The category is parsed from the name once, here, and not re-matched
    on every update.
    """

    name: str
    sell_in: int
    quality: int
    category: Category = field(init=False, compare=False)

    def __post_init__(self) -> None:
        self.category = Category.from_name(self.name)

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "name": self.name,
            "sell_in": self.sell_in,
            "quality": self.quality,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Item:
        """Deserialize from a JSON dict.

        Raises:
            ValueError: a key is missing, name is not a string, or sell_in/quality
                is not an integer.
        """
        try:
            name, sell_in, quality = d["name"], d["sell_in"], d["quality"]
        except KeyError as e:
            raise ValueError(f"item is missing field {e.args[0]!r}: {d!r}") from None
        if not isinstance(name, str):
            raise ValueError(f"item field 'name' must be a string, got {name!r}")
        for key, value in (("sell_in", sell_in), ("quality", quality)):
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"item field {key!r} must be an integer, got {value!r}")
        return cls(name=name, sell_in=sell_in, quality=quality)
