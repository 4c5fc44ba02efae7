"""
Formatting utilities for the Bank Value panel.

Provides the abbreviated stack-size format used by the game client for
coin amounts, plus the cell formats for the item table.
"""

from __future__ import annotations

from .base import NOT_LOADED

STACK_SIZE_SUFFIXES = ("", "K", "M", "B")

# Below this, quantities are shown in full
STACK_SIZE_THRESHOLD = 10_000


def quantity_to_stack_size(quantity: int) -> str:
    """
    Abbreviate a quantity the way the game client labels item stacks.

    Examples:
        40 -> "40", 9999 -> "9,999", 12345 -> "12.3K",
        100000 -> "100K", 1234567 -> "1.23M", 2000000000 -> "2B"
    """
    if quantity < 0:
        return "-" + quantity_to_stack_size(-quantity)
    if quantity < STACK_SIZE_THRESHOLD:
        return f"{quantity:,}"

    suffix = STACK_SIZE_SUFFIXES[0]
    divide_by = 1
    for i in range(len(STACK_SIZE_SUFFIXES) - 1, -1, -1):
        divide_by = 10 ** (i * 3)
        if quantity >= divide_by:
            suffix = STACK_SIZE_SUFFIXES[i]
            break

    # Up to 3 fraction digits, rounded down
    whole, remainder = divmod(quantity, divide_by)
    fraction = f"{remainder * 1000 // divide_by:03d}".rstrip("0")
    formatted = f"{whole}.{fraction}" if fraction else str(whole)

    # Keep the first four characters, never ending on the separator
    formatted = formatted[:4]
    if formatted.endswith("."):
        formatted = formatted[:3]
    return formatted + suffix


def format_quantity(quantity: int) -> str:
    """Format a stack count with thousands separators."""
    return f"{quantity:,}"


def format_value(value: int) -> str:
    """Format a stack value for the table."""
    return quantity_to_stack_size(value)


def format_total(total: int) -> str:
    """Format the bank total, or the not-loaded sentinel when there is nothing to sum."""
    if total <= 0:
        return NOT_LOADED
    return quantity_to_stack_size(total)
