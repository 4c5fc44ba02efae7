"""
Trace context for correlating logs across a single item refresh.

Provides:
- Unique refresh IDs (6-char hex), one per item-list replacement
- Context propagation via contextvars
- Easy access to the current refresh ID from any module

Usage:
    with new_refresh():
        items = loader.load()
        panel.set_items(items)

    # In any module
    from bank_value.utils.trace_context import get_refresh_id
"""

from __future__ import annotations

import secrets
from contextvars import ContextVar
from contextlib import contextmanager
from typing import Optional, Generator

_refresh_id: ContextVar[Optional[str]] = ContextVar("refresh_id", default=None)


def generate_refresh_id() -> str:
    """
    Generate a new unique refresh ID.

    Returns:
        6-character hex string (e.g., "a7f3b2").
    """
    return secrets.token_hex(3)


def get_refresh_id() -> str:
    """
    Get the current refresh ID.

    Returns:
        Current refresh ID, or "------" outside of a refresh.
    """
    refresh_id = _refresh_id.get()
    return refresh_id if refresh_id else "------"


@contextmanager
def new_refresh() -> Generator[str, None, None]:
    """
    Context manager scoping a new refresh ID.

    Yields:
        The new refresh ID.
    """
    refresh_id = generate_refresh_id()
    token = _refresh_id.set(refresh_id)

    try:
        yield refresh_id
    finally:
        _refresh_id.reset(token)
