"""
TUI ViewModels - Framework-agnostic data transformation layer.

ViewModels handle:
- Business logic (filtering, sorting, aggregation)
- Display formatting of rows and labels

ViewModels MUST NOT:
- Import Textual modules
- Hold widget references
"""

from .bank_vm import (
    BankDisplayState,
    BankValueViewModel,
    compute_total,
    derive_visible_items,
    toggle_sort,
)

__all__ = [
    "BankDisplayState",
    "BankValueViewModel",
    "compute_total",
    "derive_visible_items",
    "toggle_sort",
]
