"""Data models for the bank value panel."""

from .item import CachedItem

__all__ = [
    "CachedItem",
]
