"""
Base definitions for the Bank Value panel.

Contains enums and column constants used across TUI modules.
"""

from __future__ import annotations
from enum import Enum


class SortOrder(Enum):
    """Ordering options for the bank item list."""
    NAME = "name"
    COUNT = "count"
    VALUE = "value"


# Column label, width and the ordering its header selects
COLUMNS = [
    ("Name", 24, SortOrder.NAME),
    ("#", 8, SortOrder.COUNT),
    ("$", 8, SortOrder.VALUE),
]

ARROW_ASCENDING = "▲"
ARROW_DESCENDING = "▼"

TOTAL_LABEL_PREFIX = "Bank value"
NOT_LOADED = "Not loaded"
