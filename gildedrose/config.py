"""Environment-variable defaults for the gildedrose CLI.

Explicit command-line options always win over these.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

DAYS_VAR = "GILDEDROSE_DAYS"
INVENTORY_VAR = "GILDEDROSE_INVENTORY"

DEFAULT_DAYS = 2


def parse_days(raw: str) -> int:
    """Parse a day count, rejecting anything that is not a non-negative integer."""
    try:
        days = int(raw.strip())
    except ValueError:
        raise ValueError(f"day count must be an integer, got {raw!r}") from None
    if days < 0:
        raise ValueError(f"day count must not be negative, got {days}")
    return days


def default_days(env: Optional[dict[str, str]] = None) -> int:
    """Day count from GILDEDROSE_DAYS, or DEFAULT_DAYS when unset or empty."""
    env = os.environ if env is None else env
    raw = env.get(DAYS_VAR, "")
    if not raw.strip():
        return DEFAULT_DAYS
    return parse_days(raw)


def default_inventory_path(env: Optional[dict[str, str]] = None) -> Optional[Path]:
    """Inventory file from GILDEDROSE_INVENTORY, or None for the sample stock."""
    env = os.environ if env is None else env
    raw = env.get(INVENTORY_VAR, "").strip()
    return Path(raw) if raw else None
