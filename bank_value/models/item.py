"""Cached bank item model."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from ..domain.exceptions import SnapshotError


@dataclass(frozen=True)
class CachedItem:
    """
    Snapshot of one bank slot.

    Supplied by the host once per refresh and never mutated by the panel.
    """

    name: str
    value: int  # Unit value
    quantity: int

    @property
    def total_value(self) -> int:
        """Value of the whole stack."""
        return self.value * self.quantity

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CachedItem:
        """
        Build an item from a snapshot mapping.

        Accepts ``price`` as an alias for ``value`` and ``qty`` for ``quantity``.

        Raises:
            SnapshotError: If the name is missing or a number is not an integer.
        """
        name = data.get("name")
        if not name:
            raise SnapshotError(f"Item entry without a name: {dict(data)}")

        value = data.get("value", data.get("price", 0))
        quantity = data.get("quantity", data.get("qty", 0))

        return cls(
            name=str(name),
            value=_as_int(value, "value", name),
            quantity=_as_int(quantity, "quantity", name),
        )


def _as_int(raw: Any, field_name: str, item_name: str) -> int:
    if isinstance(raw, bool):
        raise SnapshotError(f"{item_name}: {field_name} must be an integer, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise SnapshotError(f"{item_name}: {field_name} must be an integer, got {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise SnapshotError(f"{item_name}: {field_name} must be an integer, got {raw!r}")
