"""Item categories and the per-day quality rules for each of them.

Provides category classification (exact match on the item name, falling back
to normal degradation) and the quality update strategy for each category.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

MINIMUM_ALLOWED_QUALITY = 0
MAXIMUM_ALLOWED_QUALITY = 50

# Conventional quality of a legendary item. Never validated or enforced.
LEGENDARY_QUALITY = 80


class Category(str, Enum):
    """Closed set of item categories."""

    NORMAL = "normal"
    AGED_BRIE = "aged-brie"
    BACKSTAGE_PASS = "backstage-pass"
    CONJURED = "conjured"
    LEGENDARY = "legendary"


AGED_BRIE_ITEM = "Aged Brie"
BACKSTAGE_PASSES_ITEM = "Backstage passes to a TAFKAL80ETC concert"
COMMON_ITEM = "Elixir of the Mongoose"
CONJURED_ITEM = "Conjured Mana Cake"
LEGENDARY_ITEM = "Sulfuras, Hand of Ragnaros"

# Exact item labels recognised by the shop. Anything else is NORMAL.
_CATEGORY_BY_NAME: dict[str, Category] = {
    AGED_BRIE_ITEM: Category.AGED_BRIE,
    BACKSTAGE_PASSES_ITEM: Category.BACKSTAGE_PASS,
    CONJURED_ITEM: Category.CONJURED,
    LEGENDARY_ITEM: Category.LEGENDARY,
}


def classify_item(name: str) -> Category:
    """Classify an item name into its category.

    Matching is exact and case-sensitive.  Unknown names degrade like a
    normal item rather than raising.

    Args:
        name: Item name (e.g., "Aged Brie", "+5 Dexterity Vest").

    Returns:
        Category enum value.
    """
    return _CATEGORY_BY_NAME.get(name, Category.NORMAL)


def known_labels(category: Category) -> list[str]:
    """Return the item names that map to a category, in table order."""
    return [name for name, c in _CATEGORY_BY_NAME.items() if c is category]


def clamp_quality(value: int) -> int:
    """Bound a quality value to [MINIMUM_ALLOWED_QUALITY, MAXIMUM_ALLOWED_QUALITY]."""
    return max(min(value, MAXIMUM_ALLOWED_QUALITY), MINIMUM_ALLOWED_QUALITY)


def _default_adjustment(sell_in: int) -> int:
    return -2 if sell_in <= 0 else -1


def _quality_increasing_adjustment(sell_in: int) -> int:
    return 2 if sell_in <= 0 else 1


def _faster_degrading_adjustment(sell_in: int) -> int:
    return -4 if sell_in <= 0 else -2


def _backstage_passes_adjustment(sell_in: int) -> int:
    # Only meaningful before the concert; afterwards quality drops to 0.
    if sell_in <= 5:
        return 3
    if sell_in <= 10:
        return 2
    return 1


_ADJUSTMENTS: dict[Category, Callable[[int], int]] = {
    Category.NORMAL: _default_adjustment,
    Category.AGED_BRIE: _quality_increasing_adjustment,
    Category.CONJURED: _faster_degrading_adjustment,
    Category.BACKSTAGE_PASS: _backstage_passes_adjustment,
}


def quality_adjustment(category: Category, sell_in: int) -> Optional[int]:
    """Quality delta for one day, given the item's sell_in before the update.

    Returns None where no delta applies: LEGENDARY items never change, and
    BACKSTAGE_PASS quality is reset to zero once sell_in <= 0.
    """
    if category is Category.BACKSTAGE_PASS and sell_in <= 0:
        return None
    adjust = _ADJUSTMENTS.get(category)
    if adjust is None:
        return None
    return adjust(sell_in)


def updated_quality(category: Category, sell_in: int, quality: int) -> int:
    """Return an item's quality after one day.

    Legendary quality is returned untouched, even when outside [0, 50].
    Every other result is clamped, so out-of-range input is corrected the
    first time an update touches it.
    """
    if category is Category.LEGENDARY:
        return quality
    adjustment = quality_adjustment(category, sell_in)
    if adjustment is None:
        return MINIMUM_ALLOWED_QUALITY
    return clamp_quality(quality + adjustment)
