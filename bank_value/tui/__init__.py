"""Presentation layer - Terminal UI using Textual."""

from .app import BankValueApp
from .views.bank_value import BankValuePanel

__all__ = ["BankValueApp", "BankValuePanel"]
