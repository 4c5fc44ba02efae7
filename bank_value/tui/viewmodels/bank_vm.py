"""
BankValueViewModel - Framework-agnostic bank list transformation.

Extracts all derivation logic from BankValuePanel:
- Filtering by item name
- Sort ordering and the header toggle rules
- Bank total aggregation
- Row and header label formatting
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from ...models.item import CachedItem
from ..base import (
    ARROW_ASCENDING,
    ARROW_DESCENDING,
    COLUMNS,
    TOTAL_LABEL_PREFIX,
    SortOrder,
)
from ..formatters import format_quantity, format_total, format_value


@dataclass(frozen=True)
class BankDisplayState:
    """User-controlled display state. Starts sorted by value, descending."""

    sort_order: SortOrder = SortOrder.VALUE
    ascending: bool = False
    filter_text: str = ""


def _sort_key(order: SortOrder):
    if order is SortOrder.NAME:
        return lambda item: item.name
    if order is SortOrder.COUNT:
        return lambda item: item.quantity
    return lambda item: item.total_value


def _derive_indexed(
    items: Sequence[CachedItem], state: BankDisplayState
) -> List[Tuple[int, CachedItem]]:
    needle = state.filter_text.lower()
    visible = [(idx, item) for idx, item in enumerate(items) if needle in item.name.lower()]
    key = _sort_key(state.sort_order)
    # sorted() is stable and reverse=True keeps equal items in input order
    return sorted(visible, key=lambda pair: key(pair[1]), reverse=not state.ascending)


def derive_visible_items(
    items: Sequence[CachedItem], state: BankDisplayState
) -> List[CachedItem]:
    """
    Filter and order items for display.

    Filtering is a case-insensitive substring match on the name. Items with
    equal sort keys keep their input order in either direction.
    """
    return [item for _idx, item in _derive_indexed(items, state)]


def toggle_sort(state: BankDisplayState, order: SortOrder) -> BankDisplayState:
    """
    Apply a header click.

    Clicking the active column flips the direction; clicking another column
    selects it, descending.
    """
    if state.sort_order is order:
        return replace(state, ascending=not state.ascending)
    return replace(state, sort_order=order, ascending=False)


def compute_total(items: Sequence[CachedItem]) -> int:
    """Sum of stack values over all items, regardless of filter."""
    return sum(item.value * item.quantity for item in items)


class BankValueViewModel:
    """
    ViewModel for the bank value panel.

    Responsibilities:
    - Hold the current item list and display state
    - Derive visible rows on demand (never cached)
    - Format the total label and header labels
    """

    def __init__(self) -> None:
        self._items: Tuple[CachedItem, ...] = ()
        self._state = BankDisplayState()
        self._total = 0

    @property
    def items(self) -> Tuple[CachedItem, ...]:
        """Current item list, in host order."""
        return self._items

    @property
    def state(self) -> BankDisplayState:
        """Current sort and filter state."""
        return self._state

    @property
    def total(self) -> int:
        """Sum of stack values over all items."""
        return self._total

    def set_items(self, items: Sequence[CachedItem]) -> None:
        """Replace the item list wholesale and recompute the total."""
        self._items = tuple(items)
        self._total = compute_total(self._items)

    def set_state(self, state: BankDisplayState) -> None:
        """Replace the whole display state."""
        self._state = state

    def set_filter(self, text: str) -> None:
        """Set the name filter; sort state is kept."""
        self._state = replace(self._state, filter_text=text)

    def toggle_sort(self, order: SortOrder) -> BankDisplayState:
        """Apply a header click and return the new state."""
        self._state = toggle_sort(self._state, order)
        return self._state

    def visible_items(self) -> List[CachedItem]:
        """Filtered and ordered items for the current state."""
        return derive_visible_items(self._items, self._state)

    def compute_display_rows(self) -> List[Tuple[str, List[str]]]:
        """
        Build table rows for the visible items.

        Returns:
            List of (row_key, [name, count, value]) in display order. Keys are
            the item's position in the source list, so duplicate names are fine.
        """
        rows = []
        for idx, item in _derive_indexed(self._items, self._state):
            rows.append((
                f"item-{idx}",
                [item.name, format_quantity(item.quantity), format_value(item.total_value)],
            ))
        return rows

    def column_labels(self) -> List[str]:
        """Header labels; the active column is highlighted with a direction arrow."""
        labels = []
        for label, _width, order in COLUMNS:
            if order is self._state.sort_order:
                arrow = ARROW_ASCENDING if self._state.ascending else ARROW_DESCENDING
                labels.append(f"[bold yellow]{label} {arrow}[/]")
            else:
                labels.append(label)
        return labels

    def total_label(self) -> str:
        """Text for the total box, e.g. "Bank value: 6.03M"."""
        return f"{TOTAL_LABEL_PREFIX}: {format_total(self._total)}"
