"""
Bank value panel.

Layout, top to bottom:
- Total bank value
- Search box
- Item table (Name / # / $), header clicks toggle sorting

All derivation lives in BankValueViewModel; this view wires user events to
it and re-renders synchronously after every change.
"""

from __future__ import annotations

from typing import Any, Sequence

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import DataTable, Input

from ...models.item import CachedItem
from ...utils.logging_setup import get_logger
from ..base import SortOrder
from ..viewmodels.bank_vm import BankDisplayState, BankValueViewModel
from ..widgets.bank_table import BankItemTable
from ..widgets.filter_box import FilterBox
from ..widgets.total_panel import BankTotalPanel

logger = get_logger(__name__)


class BankValuePanel(Vertical):
    """Side panel showing bank items and their total value."""

    class SortChanged(Message):
        """Posted after a header click changed the sort state."""

        def __init__(self, state: BankDisplayState) -> None:
            self.state = state
            super().__init__()

    DEFAULT_CSS = """
    BankValuePanel {
        height: 1fr;
    }

    BankValuePanel BankItemTable {
        height: 1fr;
    }
    """

    def __init__(self, zebra_stripes: bool = True, **kwargs: Any) -> None:
        """
        Initialize bank value panel.

        Args:
            zebra_stripes: Alternate row backgrounds in the item table.
        """
        super().__init__(**kwargs)
        self.zebra_stripes = zebra_stripes
        self._vm = BankValueViewModel()

    @property
    def view_model(self) -> BankValueViewModel:
        return self._vm

    def compose(self) -> ComposeResult:
        yield BankTotalPanel(id="bank-total")
        yield FilterBox(id="bank-filter")
        yield BankItemTable(zebra_stripes=self.zebra_stripes, id="bank-items")

    def on_mount(self) -> None:
        self._update_total()
        self.populate()

    # ─────────────────────────────────────────────────────────────────────────
    # Host API
    # ─────────────────────────────────────────────────────────────────────────

    def set_items(self, items: Sequence[CachedItem]) -> None:
        """
        Replace the cached items.

        Recomputes the total and the visible rows.
        """
        self._vm.set_items(items)
        logger.debug(f"Bank items replaced: {len(self._vm.items)} items, total={self._vm.total}")
        self._update_total()
        self.populate()

    def populate(self) -> None:
        """Re-derive and render the visible rows."""
        if not self.is_mounted:
            return
        try:
            table = self.query_one("#bank-items", BankItemTable)
        except Exception as e:
            self.log.error(f"Failed to find item table: {e}")
            return
        table.render_rows(self._vm.column_labels(), self._vm.compute_display_rows())

    # ─────────────────────────────────────────────────────────────────────────
    # User events
    # ─────────────────────────────────────────────────────────────────────────

    def set_filter(self, text: str) -> None:
        """Filter rows by item name."""
        self._vm.set_filter(text)
        self.populate()

    def order_by(self, order: SortOrder) -> BankDisplayState:
        """Apply a header click for the given column."""
        state = self._vm.toggle_sort(order)
        logger.debug(
            f"Sort changed: {state.sort_order.value} "
            f"{'ascending' if state.ascending else 'descending'}"
        )
        self.populate()
        self.post_message(self.SortChanged(state))
        return state

    def focus_filter(self) -> None:
        self.query_one("#bank-filter", FilterBox).focus_input()

    def focus_table(self) -> None:
        self.query_one("#bank-items", BankItemTable).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-filter on every edit of the search box."""
        if event.input.id != "filter-input":
            return
        event.stop()
        self.set_filter(event.value)

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Toggle sorting on header click."""
        event.stop()
        order = BankItemTable.sort_order_for(event.column_key.value)
        if order is not None:
            self.order_by(order)

    def _update_total(self) -> None:
        if not self.is_mounted:
            return
        try:
            self.query_one("#bank-total", BankTotalPanel).label = self._vm.total_label()
        except Exception as e:
            self.log.error(f"Failed to update bank total: {e}")
