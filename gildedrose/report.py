"""Rendering of one simulated day as plain fixture text or as a Rich table."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from gildedrose.models import MAX_QUALITY, MIN_QUALITY, Category, Item

_CATEGORY_STYLES = {
    Category.NORMAL: "white",
    Category.AGED: "yellow",
    Category.LEGENDARY: "magenta",
    Category.BACKSTAGE: "cyan",
    Category.CONJURED: "green",
}


def format_day(day: int, items: list[Item]) -> str:
    """Format a day in the plain text layout, ending with a blank line."""
    lines = [f"-------- day {day} --------", "name, sellIn, quality"]
    lines.extend(str(item) for item in items)
    lines.append("")
    return "\n".join(lines) + "\n"


def _fmt_sell_in(sell_in: int) -> str:
    """Past-date countdowns in red."""
    if sell_in < 0:
        return f"[red]{sell_in}[/red]"
    return str(sell_in)


def _fmt_quality(item: Item) -> str:
    """Dim the floor, bold the ceiling. Legendary values are shown as-is."""
    if item.category == Category.LEGENDARY:
        return str(item.quality)
    if item.quality <= MIN_QUALITY:
        return f"[dim]{item.quality}[/dim]"
    if item.quality >= MAX_QUALITY:
        return f"[bold]{item.quality}[/bold]"
    return str(item.quality)


def build_day_table(day: int, items: list[Item]) -> Table:
    """Build a Rich table for one day's inventory."""
    table = Table(title=f"Day {day}", show_header=True, header_style="bold")
    table.add_column("Name", min_width=20)
    table.add_column("Category", min_width=10)
    table.add_column("Sell in", justify="right")
    table.add_column("Quality", justify="right")

    for item in items:
        style = _CATEGORY_STYLES[item.category]
        table.add_row(
            item.name,
            f"[{style}]{item.category.value}[/{style}]",
            _fmt_sell_in(item.sell_in),
            _fmt_quality(item),
        )
    return table


def render_day(day: int, items: list[Item], console: Console, plain: bool = False) -> None:
    """Print one day's inventory."""
    if plain:
        # Fixture output must not be wrapped or marked up
        console.print(format_day(day, items), end="", markup=False, emoji=False, highlight=False, soft_wrap=True)
        return
    console.print(build_day_table(day, items))
    console.print()
