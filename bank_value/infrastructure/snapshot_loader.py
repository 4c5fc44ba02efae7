"""
Bank snapshot loader.

Reads the cached bank contents from a YAML file written by the host, and
hot-reloads it when the file changes.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import time

import yaml

from ..models.item import CachedItem
from ..domain.exceptions import SnapshotError
from ..utils.logging_setup import get_logger


logger = get_logger(__name__)


class SnapshotLoader:
    """
    Bank snapshot file loader (YAML format).

    Expected format:
    ```yaml
    items:
      - name: Abyssal whip
        value: 1500000
        quantity: 1
      - name: Coins
        value: 1
        quantity: 2500000
    ```

    Items are returned in file order, which is the order the panel uses to
    break sort ties.
    """

    def __init__(
        self,
        file_path: str | Path,
        reload_interval_sec: float = 5,
    ):
        """
        Initialize snapshot loader.

        Args:
            file_path: Path to the YAML snapshot.
            reload_interval_sec: Minimum seconds between change checks.
        """
        self.file_path = Path(file_path)
        self.reload_interval_sec = reload_interval_sec
        self._last_checked: Optional[float] = None
        self._last_mtime: Optional[float] = None

    def load(self) -> List[CachedItem]:
        """
        Load items from the snapshot file.

        Raises:
            SnapshotError: If the file cannot be read or is malformed.
        """
        self._last_checked = time.monotonic()
        self._last_mtime = self._current_mtime()

        try:
            with open(self.file_path, "r") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise SnapshotError(f"Bank snapshot not found: {self.file_path}")
        except (OSError, yaml.YAMLError) as e:
            raise SnapshotError(f"Failed to read bank snapshot {self.file_path}: {e}")

        if data is not None and not isinstance(data, dict):
            raise SnapshotError(f"Top level of {self.file_path} must be a mapping")

        if not data or not data.get("items"):
            logger.info(f"No items found in {self.file_path}")
            return []

        if not isinstance(data["items"], list):
            raise SnapshotError(f"'items' must be a list in {self.file_path}")

        items = []
        for entry in data["items"]:
            if not isinstance(entry, dict):
                raise SnapshotError(f"Item entry must be a mapping, got {entry!r}")
            items.append(CachedItem.from_dict(entry))

        logger.info(f"Loaded {len(items)} items from {self.file_path}")
        return items

    def should_reload(self) -> bool:
        """Check whether the interval elapsed and the file changed since the last load."""
        if self._last_checked is None:
            return True
        if time.monotonic() - self._last_checked < self.reload_interval_sec:
            return False

        self._last_checked = time.monotonic()
        return self._current_mtime() != self._last_mtime

    def poll(self) -> Optional[List[CachedItem]]:
        """
        Reload the snapshot if it changed.

        Returns:
            Fresh item list, or None when nothing changed.

        Raises:
            SnapshotError: If the changed file cannot be parsed.
        """
        if not self.should_reload():
            return None
        return self.load()

    def _current_mtime(self) -> Optional[float]:
        try:
            return self.file_path.stat().st_mtime
        except OSError:
            return None
