"""
Bank Value App - Textual host for the bank value panel.

Feeds the panel from two sources, both polled on the UI timer:
- Item lists queued by host callbacks (any thread, latest wins)
- An optional YAML bank snapshot, hot-reloaded when it changes
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..domain.exceptions import RecoverableError
from ..infrastructure.snapshot_loader import SnapshotLoader
from ..models.item import CachedItem
from ..utils.logging_setup import get_logger
from ..utils.trace_context import new_refresh
from .base import SortOrder
from .event_bus import ItemUpdateQueue
from .views.bank_value import BankValuePanel

logger = get_logger(__name__)


class BankValueApp(App):
    """
    Bank Value - terminal panel.

    Provides:
    - Total bank value
    - Searchable, sortable item table
    """

    AUTO_FOCUS = "#bank-items"

    BINDINGS = [
        Binding("/", "focus_filter", "Search", show=True),
        Binding("escape", "focus_table", "Items", show=False),
        Binding("n", "order_by('name')", "Name", show=True),
        Binding("c", "order_by('count')", "Count", show=True),
        Binding("v", "order_by('value')", "Value", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        title: str = "Bank Value",
        poll_interval_sec: float = 0.25,
        zebra_stripes: bool = True,
        loader: Optional[SnapshotLoader] = None,
        **kwargs: Any,
    ):
        """
        Initialize the app.

        Args:
            title: Header title.
            poll_interval_sec: Update queue / snapshot poll interval.
            zebra_stripes: Alternate row backgrounds in the item table.
            loader: Optional bank snapshot source.
        """
        super().__init__(**kwargs)
        self.title = title
        self.poll_interval_sec = poll_interval_sec
        self.zebra_stripes = zebra_stripes
        self.loader = loader
        self._updates = ItemUpdateQueue()
        self._poll_timer = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield BankValuePanel(zebra_stripes=self.zebra_stripes, id="bank-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Load the first snapshot and start polling."""
        self._poll_timer = self.set_interval(self.poll_interval_sec, self._poll_updates)
        self._poll_updates()

    def on_unmount(self) -> None:
        if self._poll_timer:
            self._poll_timer.stop()

    def queue_items(self, items: Sequence[CachedItem]) -> None:
        """Queue a new item list (thread-safe)."""
        self._updates.push(items)

    def _poll_updates(self) -> None:
        """Apply the latest queued list, then any snapshot change."""
        latest = self._updates.drain()
        if latest is not None:
            self._apply_items(latest, source="queue")

        if self.loader is None:
            return
        try:
            items = self.loader.poll()
        except RecoverableError as e:
            logger.warning(f"Keeping previous bank items: {e}")
            return
        if items is not None:
            self._apply_items(items, source=str(self.loader.file_path))

    def _apply_items(self, items: Sequence[CachedItem], source: str) -> None:
        with new_refresh():
            logger.info(f"Refreshing bank items from {source}: {len(items)} items")
            try:
                panel = self.query_one("#bank-panel", BankValuePanel)
            except Exception as e:
                logger.error(f"Failed to find bank panel: {e}")
                return
            panel.set_items(items)

    def action_focus_filter(self) -> None:
        self.query_one("#bank-panel", BankValuePanel).focus_filter()

    def action_focus_table(self) -> None:
        self.query_one("#bank-panel", BankValuePanel).focus_table()

    def action_order_by(self, order: str) -> None:
        self.query_one("#bank-panel", BankValuePanel).order_by(SortOrder(order))
