"""Configuration data models."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class PanelConfig:
    """Bank value panel configuration."""
    title: str
    poll_interval_sec: float
    zebra_stripes: bool


@dataclass
class SnapshotConfig:
    """Bank snapshot file configuration."""
    file: str
    reload_interval_sec: float


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str
    json: bool
    dir: str  # Base directory, files land in {dir}/{date}/
    console: bool
    timezone: str  # e.g. "Europe/London", "UTC", or "local"


@dataclass
class AppConfig:
    """Complete application configuration."""
    panel: PanelConfig
    snapshot: SnapshotConfig
    logging: LoggingConfig
    raw: Dict[str, Any]  # Merged raw config dict
