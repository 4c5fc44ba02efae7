"""Infrastructure layer - host-facing data sources."""

from .snapshot_loader import SnapshotLoader

__all__ = ["SnapshotLoader"]
