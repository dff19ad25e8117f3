"""Data models for the Gilded Rose inventory.

Item, the GildedRose collection owner and the one-day advance that flows
through simulator → report → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableSequence

from gildedrose.rules import (
    AGED_BRIE_ITEM,
    BACKSTAGE_PASSES_ITEM,
    COMMON_ITEM,
    CONJURED_ITEM,
    LEGENDARY_ITEM,
    Category,
    classify_item,
    updated_quality,
)

__all__ = [
    "AGED_BRIE_ITEM",
    "BACKSTAGE_PASSES_ITEM",
    "COMMON_ITEM",
    "CONJURED_ITEM",
    "LEGENDARY_ITEM",
    "GildedRose",
    "Item",
    "advance_one_day",
]


@dataclass
class Item:
    """A single stock item.

    Quality is not validated on construction; out-of-range values persist
    until the next day advance clamps them.
    """

    name: str
    sell_in: int
    quality: int

    @property
    def category(self) -> Category:
        return classify_item(self.name)

    def copy(self) -> Item:
        return Item(self.name, self.sell_in, self.quality)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "name": self.name,
            "sell_in": self.sell_in,
            "quality": self.quality,
        }

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"


def advance_one_day(items: MutableSequence[Item]) -> None:
    """Move every item forward by one day, in place and in collection order.

    Legendary items are skipped entirely.  Every other item gets its quality
    updated from the sell_in it had before the update, then sell_in drops
    by one.
    """
    for item in items:
        category = item.category
        if category is Category.LEGENDARY:
            continue

        item.quality = updated_quality(category, item.sell_in, item.quality)
        item.sell_in -= 1


@dataclass
class GildedRose:
    """Owner of the shop's item list."""

    items: list[Item] = field(default_factory=list)

    def update_quality(self) -> None:
        """Advance all items by one day."""
        advance_one_day(self.items)

    advance_one_day = update_quality
