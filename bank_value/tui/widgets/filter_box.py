"""
Search box widget.

A "Search: " label beside a text input. Edits bubble up as
``Input.Changed`` messages for the owning panel to handle.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Input, Static


class FilterBox(Widget):
    """Item name search box."""

    DEFAULT_CSS = """
    FilterBox {
        height: 3;
        padding: 0 1;
    }

    FilterBox #filter-label {
        width: auto;
        height: 3;
        content-align: left middle;
    }

    FilterBox #filter-input {
        width: 1fr;
    }
    """

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Static("Search: ", id="filter-label")
            yield Input(placeholder="Item name", id="filter-input")

    @property
    def text(self) -> str:
        return self.query_one("#filter-input", Input).value

    def focus_input(self) -> None:
        self.query_one("#filter-input", Input).focus()
