"""Composite views built from TUI widgets."""

from .bank_value import BankValuePanel

__all__ = ["BankValuePanel"]
