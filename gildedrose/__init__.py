"""gildedrose — inventory quality rules for the Gilded Rose.

Every simulated day each item's quality and sell_in move according to its
category: normal stock degrades, aged brie matures, backstage passes climb
towards the concert and then become worthless, conjured stock degrades twice
as fast, and legendary items never change.

Usage:
    python -m gildedrose fixture --days 30   # Classic day-by-day printout
    python -m gildedrose table               # Same simulation as Rich tables
    python -m gildedrose json --days 5       # Snapshots as JSON
    python -m gildedrose categories          # Known categories and labels
"""

from gildedrose.models import GildedRose, Item, advance_one_day
from gildedrose.rules import Category, classify_item

__all__ = ["Category", "GildedRose", "Item", "advance_one_day", "classify_item"]
