"""Gilded Rose simulator — runs the day advance over a copy of an inventory.

Records one snapshot per printed day, the way the classic text fixture
walks the default catalog: day 0 is the starting stock, each following day
is taken after one more update.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from gildedrose.models import (
    AGED_BRIE_ITEM,
    BACKSTAGE_PASSES_ITEM,
    COMMON_ITEM,
    CONJURED_ITEM,
    LEGENDARY_ITEM,
    GildedRose,
    Item,
)
from gildedrose.rules import LEGENDARY_QUALITY


@dataclass
class DaySnapshot:
    """Stock as it stood at the start of a given day."""

    day: int
    items: list[Item] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "items": [item.to_dict() for item in self.items],
        }


def default_inventory() -> list[Item]:
    """The standard catalog used by the text fixture."""
    return [
        Item("+5 Dexterity Vest", 10, 20),
        Item(AGED_BRIE_ITEM, 2, 0),
        Item(COMMON_ITEM, 5, 7),
        Item(LEGENDARY_ITEM, 0, LEGENDARY_QUALITY),
        Item(LEGENDARY_ITEM, -1, LEGENDARY_QUALITY),
        Item(BACKSTAGE_PASSES_ITEM, 15, 20),
        Item(BACKSTAGE_PASSES_ITEM, 10, 49),
        Item(BACKSTAGE_PASSES_ITEM, 5, 49),
        Item(CONJURED_ITEM, 3, 6),
    ]


def iter_days(items: Iterable[Item], days: int) -> Iterator[DaySnapshot]:
    """Yield one snapshot per printed day without holding earlier days.

    The caller's items are copied first and never mutated.

    Raises:
        ValueError: if days is negative (raised on the first next()).
    """
    if days < 0:
        raise ValueError(f"days must not be negative, got {days}")

    shop = GildedRose([item.copy() for item in items])
    for day in range(days):
        if day > 0:
            shop.update_quality()
        yield DaySnapshot(day=day, items=[item.copy() for item in shop.items])


def simulate(items: Iterable[Item], days: int) -> list[DaySnapshot]:
    """Run the inventory forward and snapshot each printed day.

    Args:
        items: Starting stock.
        days: Number of days to record (day 0 .. days-1).

    Returns:
        One DaySnapshot per day; empty when days is 0.

    Raises:
        ValueError: if days is negative.
    """
    return list(iter_days(items, days))
