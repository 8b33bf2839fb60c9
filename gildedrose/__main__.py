"""CLI for the gildedrose inventory simulator.

Usage:
    python -m gildedrose simulate                        # Sample stock, 2 days
    python -m gildedrose simulate --days 30 --plain      # Plain text fixture output
    python -m gildedrose simulate -i stock.json -d 5     # Custom starting inventory
    python -m gildedrose categories                      # Show category rules
    python -m gildedrose sample                          # Print sample stock as JSON
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gildedrose import config
from gildedrose.inventory import load_inventory, sample_inventory
from gildedrose.models import Category, Item
from gildedrose.report import render_day
from gildedrose.updater import advance_one_day

app = typer.Typer(
    name="gildedrose",
    help="Inventory quality simulator",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

# Name match and daily rule, for the categories listing.
_CATEGORY_DOCS: dict[Category, tuple[str, str]] = {
    Category.LEGENDARY: ('"Sulfuras, Hand of Ragnaros"', "never changes"),
    Category.AGED: ('"Aged Brie"', "+1/day, +2 past sell date, max 50"),
    Category.BACKSTAGE: (
        '"Backstage passes to a TAFKAL80ETC concert"',
        "+1, +2 at 10 days, +3 at 5 days, 0 after the concert",
    ),
    Category.CONJURED: ('contains "Conjured"', "-2/day, -4 past sell date, min 0"),
    Category.NORMAL: ("anything else", "-1/day, -2 past sell date, min 0"),
}


def _resolve_days(days: Optional[int]) -> int:
    if days is None:
        return config.default_days()
    if days < 0:
        raise ValueError(f"day count must not be negative, got {days}")
    return days


def _resolve_inventory(path: Optional[Path]) -> list[Item]:
    path = path or config.default_inventory_path()
    if path is None:
        return sample_inventory()
    return load_inventory(path)


@app.command("simulate")
def cmd_simulate(
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Days to simulate (default: $GILDEDROSE_DAYS or 2)"),
    inventory: Optional[Path] = typer.Option(None, "--inventory", "-i", help="JSON file with the starting items"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Plain text output instead of tables"),
) -> None:
    """Advance an inventory day by day, printing it after each day."""
    try:
        n_days = _resolve_days(days)
        items = _resolve_inventory(inventory)
    except FileNotFoundError as e:
        err_console.print(f"[red]Error:[/red] inventory file not found: {e.filename}")
        raise typer.Exit(1)
    except OSError as e:
        err_console.print(f"[red]Error:[/red] cannot read inventory file: {e}")
        raise typer.Exit(1)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not items:
        err_console.print("[yellow]Inventory is empty.[/yellow]")

    render_day(0, items, console, plain=plain)
    for day in range(1, n_days + 1):
        advance_one_day(items)
        render_day(day, items, console, plain=plain)


@app.command("categories")
def cmd_categories() -> None:
    """Show item categories and their daily rules."""
    table = Table(title="Item Categories", show_header=True, header_style="bold")
    table.add_column("Category", style="green", min_width=10)
    table.add_column("Name match", min_width=20)
    table.add_column("Daily rule", min_width=30)

    for category in Category:
        match, rule = _CATEGORY_DOCS[category]
        table.add_row(category.value, match, rule)

    console.print()
    console.print(table)
    console.print()


@app.command("sample")
def cmd_sample() -> None:
    """Print the sample stock as JSON, ready to edit and pass to --inventory."""
    console.print_json(json.dumps([item.to_dict() for item in sample_inventory()]))


if __name__ == "__main__":
    app()
