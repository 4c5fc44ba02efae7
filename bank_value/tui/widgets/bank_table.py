"""
Bank item table widget.

Striped DataTable whose header labels double as sort toggles. Row order and
contents come from BankValueViewModel; the table only renders them.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.widgets import DataTable

from ..base import COLUMNS, SortOrder

# Textual mouse button index for the secondary button
RIGHT_MOUSE_BUTTON = 3


class BankItemTable(DataTable):
    """DataTable listing cached bank items."""

    def __init__(self, zebra_stripes: bool = True, **kwargs) -> None:
        """
        Initialize bank item table.

        Args:
            zebra_stripes: Alternate row backgrounds.
        """
        super().__init__(cursor_type="row", zebra_stripes=zebra_stripes, **kwargs)

    def render_rows(
        self,
        labels: Sequence[str],
        rows: Sequence[Tuple[str, List[str]]],
    ) -> None:
        """
        Rebuild headers and rows from scratch.

        Args:
            labels: Header labels in column order (markup allowed).
            rows: (row_key, cells) pairs in display order. Cells are plain
                text; item names are never parsed as markup.
        """
        self.clear(columns=True)
        for label, (_name, width, order) in zip(labels, COLUMNS):
            self.add_column(label, width=width, key=order.value)
        for row_key, (name, *rest) in rows:
            self.add_row(Text(name), *rest, key=row_key)

    def on_click(self, event: events.Click) -> None:
        """Right-clicks never reach the header sort handling."""
        if event.button == RIGHT_MOUSE_BUTTON:
            event.prevent_default()

    @staticmethod
    def sort_order_for(column_key_value: Optional[str]) -> Optional[SortOrder]:
        """Map a column key back to the ordering its header selects."""
        for _name, _width, order in COLUMNS:
            if order.value == column_key_value:
                return order
        return None
