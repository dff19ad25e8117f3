"""Tests for the multi-day simulator and its report output."""

import pytest
from rich.console import Console

from gildedrose.models import AGED_BRIE_ITEM, LEGENDARY_ITEM, Item
from gildedrose.report import FIXTURE_BANNER, format_day, format_fixture, render_day
from gildedrose.rules import Category
from gildedrose.simulator import DaySnapshot, default_inventory, iter_days, simulate


def test_simulate_records_start_and_following_days():
    snapshots = simulate([Item(AGED_BRIE_ITEM, 2, 0)], 3)
    assert [s.day for s in snapshots] == [0, 1, 2]
    assert [(s.items[0].sell_in, s.items[0].quality) for s in snapshots] == [
        (2, 0),
        (1, 1),
        (0, 2),
    ]


def test_simulate_leaves_caller_items_alone():
    items = [Item("Bread", 3, 10)]
    simulate(items, 5)
    assert (items[0].sell_in, items[0].quality) == (3, 10)


def test_snapshots_are_independent():
    snapshots = simulate([Item("Bread", 3, 10)], 2)
    assert snapshots[0].items[0] is not snapshots[1].items[0]
    assert snapshots[0].items[0].quality == 10


def test_simulate_zero_and_negative_days():
    assert simulate(default_inventory(), 0) == []
    with pytest.raises(ValueError):
        simulate(default_inventory(), -1)


def test_default_inventory_is_fresh_each_call():
    first = default_inventory()
    first[0].quality = 0
    assert default_inventory()[0].quality == 20
    assert len(first) == 9


def test_snapshot_to_dict():
    snap = DaySnapshot(day=4, items=[Item(LEGENDARY_ITEM, 0, 80)])
    assert snap.to_dict() == {
        "day": 4,
        "items": [{"name": LEGENDARY_ITEM, "sell_in": 0, "quality": 80}],
    }


def test_format_fixture_two_days():
    expected = "\n".join([
        "OMGHAI!",
        "-------- day 0 --------",
        "name, sellIn, quality",
        "+5 Dexterity Vest, 10, 20",
        "Aged Brie, 2, 0",
        "Elixir of the Mongoose, 5, 7",
        "Sulfuras, Hand of Ragnaros, 0, 80",
        "Sulfuras, Hand of Ragnaros, -1, 80",
        "Backstage passes to a TAFKAL80ETC concert, 15, 20",
        "Backstage passes to a TAFKAL80ETC concert, 10, 49",
        "Backstage passes to a TAFKAL80ETC concert, 5, 49",
        "Conjured Mana Cake, 3, 6",
        "",
        "-------- day 1 --------",
        "name, sellIn, quality",
        "+5 Dexterity Vest, 9, 19",
        "Aged Brie, 1, 1",
        "Elixir of the Mongoose, 4, 6",
        "Sulfuras, Hand of Ragnaros, 0, 80",
        "Sulfuras, Hand of Ragnaros, -1, 80",
        "Backstage passes to a TAFKAL80ETC concert, 14, 21",
        "Backstage passes to a TAFKAL80ETC concert, 9, 50",
        "Backstage passes to a TAFKAL80ETC concert, 4, 50",
        "Conjured Mana Cake, 2, 4",
        "",
        "",
    ])
    assert format_fixture(simulate(default_inventory(), 2)) == expected


def test_format_day_empty():
    assert format_day(DaySnapshot(day=7)) == "-------- day 7 --------\nname, sellIn, quality\n\n"
    assert format_fixture([]) == FIXTURE_BANNER + "\n"


def test_render_day_table():
    console = Console(record=True, width=120)
    render_day(simulate(default_inventory(), 1)[0], console)
    text = console.export_text()
    assert "Day 0" in text
    assert "Conjured Mana Cake" in text
    assert "backstage-pass" in text


def test_render_day_without_items():
    console = Console(record=True, width=120)
    render_day(DaySnapshot(day=3), console)
    assert "No items on day 3" in console.export_text()


@pytest.mark.parametrize("name", ["Shield [bold]of Dawn", "Cursed [/] Ring", "[red]Wine"])
def test_render_day_shows_bracketed_names_verbatim(name):
    console = Console(record=True, width=120)
    render_day(DaySnapshot(day=0, items=[Item(name, 3, 10)]), console)
    assert name in console.export_text()


class _CountingItem(Item):
    reads = 0

    @property
    def category(self) -> Category:
        type(self).reads += 1
        return super().category


def test_render_day_resolves_category_once_per_item():
    _CountingItem.reads = 0
    console = Console(record=True, width=120)
    render_day(DaySnapshot(day=0, items=[_CountingItem("Bread", 0, 0)]), console)
    assert _CountingItem.reads == 1


# --- Streaming ---

def test_iter_days_yields_lazily():
    days = iter_days([Item(AGED_BRIE_ITEM, 2, 0)], 10 ** 9)
    first = next(days)
    second = next(days)
    assert (first.day, first.items[0].quality) == (0, 0)
    assert (second.day, second.items[0].quality) == (1, 1)


def test_iter_days_matches_simulate():
    streamed = [s.to_dict() for s in iter_days(default_inventory(), 6)]
    assert streamed == [s.to_dict() for s in simulate(default_inventory(), 6)]


def test_iter_days_rejects_negative_days():
    with pytest.raises(ValueError):
        next(iter_days(default_inventory(), -2))
