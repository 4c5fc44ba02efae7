"""
TUI update queue - thread-safe hand-off of item lists to the panel.

Host callbacks may fire on any thread; the panel only mutates its state on
the Textual event loop. Producers push whole item lists and the UI poll timer
drains them, conflating to the latest list since each refresh replaces the
previous one wholesale.
"""

from __future__ import annotations

import queue
from typing import Optional, Sequence

from ..models.item import CachedItem


class ItemUpdateQueue:
    """
    Conflating queue of bank item lists.

    Usage:
        updates = ItemUpdateQueue()

        # From the host thread:
        updates.push(items)

        # From the TUI poll timer:
        latest = updates.drain()
        if latest is not None:
            panel.set_items(latest)
    """

    __slots__ = ("_queue",)

    def __init__(self, maxsize: int = 10) -> None:
        """
        Args:
            maxsize: Max queued lists before the oldest is dropped.
        """
        self._queue: queue.Queue = queue.Queue(maxsize=maxsize)

    def push(self, items: Sequence[CachedItem]) -> None:
        """Push an item list (thread-safe); drops the oldest entry when full."""
        snapshot = tuple(items)
        while True:
            try:
                self._queue.put_nowait(snapshot)
                return
            except queue.Full:
                try:
                    self._queue.get_nowait()
                except queue.Empty:
                    pass

    def drain(self) -> Optional[tuple[CachedItem, ...]]:
        """Return the most recently pushed list, discarding older ones."""
        latest = None
        try:
            while True:
                latest = self._queue.get_nowait()
        except queue.Empty:
            pass
        return latest

    def pending(self) -> int:
        """Approximate number of queued lists."""
        return self._queue.qsize()
