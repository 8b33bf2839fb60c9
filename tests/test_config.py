"""Environment-variable defaults for the CLI."""

from pathlib import Path

import pytest

from gildedrose import config


def test_default_days_unset():
    assert config.default_days({}) == config.DEFAULT_DAYS


def test_default_days_empty():
    assert config.default_days({config.DAYS_VAR: "  "}) == config.DEFAULT_DAYS


def test_default_days_from_env():
    assert config.default_days({config.DAYS_VAR: " 30 "}) == 30


def test_default_days_reads_os_environ(monkeypatch):
    monkeypatch.setenv(config.DAYS_VAR, "7")
    assert config.default_days() == 7


@pytest.mark.parametrize("raw", ["abc", "1.5", "-1"])
def test_default_days_rejects_bad_values(raw):
    with pytest.raises(ValueError):
        config.default_days({config.DAYS_VAR: raw})


def test_parse_days_zero():
    assert config.parse_days("0") == 0


def test_default_inventory_path():
    assert config.default_inventory_path({}) is None
    assert config.default_inventory_path({config.INVENTORY_VAR: ""}) is None
    assert config.default_inventory_path({config.INVENTORY_VAR: "stock.json"}) == Path("stock.json")
