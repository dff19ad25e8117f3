"""Gilded Rose report — text fixture output and Rich tables for snapshots.

The text form reproduces the classic fixture printout line for line; the
table form is for reading a simulation at a glance.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gildedrose.models import Item
from gildedrose.rules import MINIMUM_ALLOWED_QUALITY, Category
from gildedrose.simulator import DaySnapshot

FIXTURE_BANNER = "OMGHAI!"
_HEADER = "name, sellIn, quality"

_CATEGORY_STYLES = {
    Category.NORMAL: "white",
    Category.AGED_BRIE: "yellow",
    Category.BACKSTAGE_PASS: "cyan",
    Category.CONJURED: "magenta",
    Category.LEGENDARY: "dim",
}


def format_day(snapshot: DaySnapshot) -> str:
    """Render one day in fixture form, trailing blank line included."""
    lines = [f"-------- day {snapshot.day} --------", _HEADER]
    lines.extend(str(item) for item in snapshot.items)
    lines.append("")
    return "\n".join(lines) + "\n"


def format_fixture(snapshots: Iterable[DaySnapshot]) -> str:
    """Render the banner followed by every day."""
    return FIXTURE_BANNER + "\n" + "".join(format_day(s) for s in snapshots)


def _fmt_quality(item: Item, category: Category) -> str:
    """Highlight items that have lost all value."""
    if category is not Category.LEGENDARY and item.quality <= MINIMUM_ALLOWED_QUALITY:
        return f"[red]{item.quality}[/red]"
    return str(item.quality)


def _fmt_sell_in(sell_in: int) -> str:
    if sell_in < 0:
        return f"[dim]{sell_in}[/dim]"
    return str(sell_in)


def render_day(snapshot: DaySnapshot, console: Console) -> None:
    """Render a Rich table for one day of stock."""
    if not snapshot.items:
        console.print(f"[yellow]No items on day {snapshot.day}[/yellow]")
        return

    table = Table(
        title=f"Day {snapshot.day}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Name", min_width=20)
    table.add_column("Category", style="dim")
    table.add_column("Sell in", justify="right")
    table.add_column("Quality", justify="right")

    for item in snapshot.items:
        category = item.category
        style = _CATEGORY_STYLES.get(category, "white")
        table.add_row(
            Text(item.name, style=style),
            category.value,
            _fmt_sell_in(item.sell_in),
            _fmt_quality(item, category),
        )

    console.print(table)
