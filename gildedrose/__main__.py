"""CLI for the Gilded Rose inventory simulator.

Usage:
    python -m gildedrose fixture                 # Classic text fixture, default days
    python -m gildedrose fixture --days 30       # Thirty printed days
    python -m gildedrose table --days 5          # Rich tables per day
    python -m gildedrose json --days 5           # Snapshots as JSON
    python -m gildedrose categories              # Known categories and labels

The default day count comes from GILDEDROSE_DAYS (falls back to 2).
"""

from __future__ import annotations

import json
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.table import Table

from gildedrose.config import ConfigError, load_settings
from gildedrose.report import FIXTURE_BANNER, format_day, render_day
from gildedrose.rules import Category, known_labels
from gildedrose.simulator import DaySnapshot, default_inventory, iter_days

app = typer.Typer(
    name="gildedrose",
    help="Gilded Rose inventory simulator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()


def _resolve_days(days: Optional[int]) -> int:
    """Use the explicit --days value, else the configured default."""
    if days is None:
        try:
            days = load_settings().days
        except ConfigError as e:
            console.print(f"[red]Invalid configuration: {e}[/red]")
            raise typer.Exit(1)
    if days < 0:
        console.print(f"[red]Invalid day count: {days}[/red]. Use 0 or more.")
        raise typer.Exit(1)
    return days


def _run(days: Optional[int]) -> Iterator[DaySnapshot]:
    """Stream the default catalog one day at a time."""
    return iter_days(default_inventory(), _resolve_days(days))


@app.command("fixture")
def cmd_fixture(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Number of days to print"),
) -> None:
    """Print the classic day-by-day text fixture."""
    snapshots = _run(days)
    typer.echo(FIXTURE_BANNER)
    for snapshot in snapshots:
        typer.echo(format_day(snapshot), nl=False)


@app.command("table")
def cmd_table(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Number of days to show"),
) -> None:
    """Show the simulation as one Rich table per day."""
    shown = 0
    for snapshot in _run(days):
        render_day(snapshot, out)
        shown += 1
    if not shown:
        console.print("[yellow]Nothing to show for 0 days.[/yellow]")


@app.command("json")
def cmd_json(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Number of days to dump"),
) -> None:
    """Dump the simulation snapshots as JSON."""
    snapshots = _run(days)
    typer.echo("[")
    for i, snapshot in enumerate(snapshots):
        if i:
            typer.echo(",")
        typer.echo(json.dumps(snapshot.to_dict(), indent=2), nl=False)
    typer.echo("\n]")


@app.command("categories")
def cmd_categories() -> None:
    """List item categories and the names that select them."""
    table = Table(title="Item Categories", show_header=True, header_style="bold")
    table.add_column("Category", style="green", min_width=15)
    table.add_column("Item names", min_width=30)

    for category in Category:
        labels = known_labels(category)
        table.add_row(category.value, ", ".join(labels) if labels else "[dim]any other name[/dim]")

    out.print()
    out.print(table)
    out.print()


if __name__ == "__main__":
    app()
