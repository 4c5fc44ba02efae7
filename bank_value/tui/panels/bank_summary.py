"""
Bank summary rendering for headless (no-dashboard) mode.

Produces a static Rich panel with the same rows, ordering and total as the
interactive panel.
"""

from __future__ import annotations
from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...models.item import CachedItem
from ..base import COLUMNS, SortOrder
from ..viewmodels.bank_vm import BankDisplayState, BankValueViewModel


def render_bank_summary(
    items: Sequence[CachedItem],
    state: Optional[BankDisplayState] = None,
    limit: Optional[int] = None,
) -> Panel:
    """
    Render the bank item table as a Rich panel.

    Args:
        items: Cached bank items.
        state: Sort/filter state (defaults to value, descending).
        limit: Show at most this many rows.

    Returns:
        Panel titled with the bank total.
    """
    vm = BankValueViewModel()
    vm.set_items(items)
    if state is not None:
        vm.set_state(state)

    table = Table(show_header=True, box=None, padding=(0, 1))
    for label, (_name, width, order) in zip(vm.column_labels(), COLUMNS):
        justify = "left" if order is SortOrder.NAME else "right"
        table.add_column(Text.from_markup(label), width=width, justify=justify, no_wrap=True)

    rows = vm.compute_display_rows()
    shown = rows if limit is None else rows[:limit]
    for _key, (name, *rest) in shown:
        table.add_row(Text(name), *rest)

    if not rows:
        return Panel(Text("No items", style="dim"), title=vm.total_label(), border_style="dim")

    subtitle = f"{len(shown)} of {len(rows)} items" if len(shown) < len(rows) else None
    return Panel(table, title=vm.total_label(), subtitle=subtitle, border_style="blue")
