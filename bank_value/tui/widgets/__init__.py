"""
Textual widgets for the Bank Value panel.
"""

from .bank_table import BankItemTable
from .filter_box import FilterBox
from .total_panel import BankTotalPanel

__all__ = [
    "BankItemTable",
    "FilterBox",
    "BankTotalPanel",
]
