"""Rich renderables for non-interactive output."""

from .bank_summary import render_bank_summary

__all__ = ["render_bank_summary"]
