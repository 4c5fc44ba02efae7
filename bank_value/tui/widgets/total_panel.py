"""
Bank total widget.

Displays the running bank value, or the not-loaded sentinel before any
items arrive.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static

from ..base import NOT_LOADED, TOTAL_LABEL_PREFIX


class BankTotalPanel(Widget):
    """Total bank value label."""

    DEFAULT_CSS = """
    BankTotalPanel {
        height: 1;
        padding: 0 1;
    }
    """

    label: reactive[str] = reactive(f"{TOTAL_LABEL_PREFIX}: {NOT_LOADED}", init=False)

    def compose(self) -> ComposeResult:
        yield Static(self.label, id="bank-total-label")

    def watch_label(self, label: str) -> None:
        """Update display when the label changes."""
        try:
            self.query_one("#bank-total-label", Static).update(label)
        except Exception as e:
            self.log.error(f"Failed to update bank total: {e}")
