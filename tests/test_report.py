"""Plain text and Rich table rendering of a simulated day."""

from rich.console import Console

from gildedrose.models import Item
from gildedrose.report import build_day_table, format_day, render_day


def _items():
    return [Item("foo", 0, 0), Item("Aged Brie", -1, 50)]


def test_format_day():
    assert format_day(3, _items()) == (
        "-------- day 3 --------\n"
        "name, sellIn, quality\n"
        "foo, 0, 0\n"
        "Aged Brie, -1, 50\n"
        "\n"
    )


def test_format_day_empty():
    assert format_day(0, []) == "-------- day 0 --------\nname, sellIn, quality\n\n"


def test_build_day_table():
    table = build_day_table(1, _items())
    assert table.title == "Day 1"
    assert table.row_count == 2
    assert [c.header for c in table.columns] == ["Name", "Category", "Sell in", "Quality"]


def test_render_day_plain():
    console = Console(record=True, width=200)
    render_day(2, _items(), console, plain=True)
    assert console.export_text() == format_day(2, _items())


def test_render_day_table():
    console = Console(record=True, width=200)
    render_day(2, _items(), console)
    text = console.export_text()
    assert "Day 2" in text
    assert "Aged Brie" in text
    assert "aged" in text
