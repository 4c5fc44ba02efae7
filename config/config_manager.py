"""
Configuration manager with environment-based loading.

Supports:
- Base configuration (base.yaml)
- Environment-specific overrides (dev.yaml, prod.yaml)
- Secrets loading (secrets.yaml - gitignored)
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Any
import yaml
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from bank_value.domain.exceptions import ConfigurationError

from .models import (
    AppConfig,
    PanelConfig,
    SnapshotConfig,
    LoggingConfig,
)


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigManager:
    """
    Configuration manager with environment support.

    Loads configuration in this order:
    1. base.yaml (default config)
    2. {env}.yaml (environment-specific, e.g., dev.yaml)
    3. secrets.yaml (if exists, gitignored)

    Later configs override earlier ones.
    """

    def __init__(self, config_dir: str | Path = "config", env: str = "dev"):
        """
        Initialize config manager.

        Args:
            config_dir: Directory containing config files.
            env: Environment name (dev, prod, etc).
        """
        self.config_dir = Path(config_dir)
        self.env = env
        self.config: Dict[str, Any] = {}

    def load(self) -> AppConfig:
        """
        Load configuration from YAML files.

        Returns:
            AppConfig object.

        Raises:
            FileNotFoundError: If base config not found.
            ConfigurationError: If config is invalid.
        """
        base_path = self.config_dir / "base.yaml"
        if not base_path.exists():
            raise FileNotFoundError(f"Base config not found: {base_path}")

        self.config = self._load_yaml(base_path)
        logger.info(f"Loaded base config from {base_path}")

        env_path = self.config_dir / f"{self.env}.yaml"
        if env_path.exists():
            env_config = self._load_yaml(env_path)
            self.config = self._merge_dicts(self.config, env_config)
            logger.info(f"Loaded {self.env} config from {env_path}")

        secrets_path = self.config_dir / "secrets.yaml"
        if secrets_path.exists():
            secrets = self._load_yaml(secrets_path)
            self.config = self._merge_dicts(self.config, secrets)
            logger.info("Loaded secrets")

        return self._parse_config()

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Top level of {path} must be a mapping")
        return data

    def _merge_dicts(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts (override wins)."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def _parse_config(self) -> AppConfig:
        """Parse raw dict into AppConfig."""
        try:
            panel_raw = self.config.get("panel", {})
            panel = PanelConfig(
                title=str(panel_raw.get("title", "Bank Value")),
                poll_interval_sec=float(panel_raw.get("poll_interval_sec", 0.25)),
                zebra_stripes=bool(panel_raw.get("zebra_stripes", True)),
            )

            snapshot_raw = self.config.get("snapshot", {})
            snapshot = SnapshotConfig(
                file=str(snapshot_raw.get("file", "./data/bank.yaml")),
                reload_interval_sec=float(snapshot_raw.get("reload_interval_sec", 5)),
            )

            logging_raw = self.config.get("logging", {})
            logging_config = LoggingConfig(
                level=str(logging_raw.get("level", "INFO")).upper(),
                json=bool(logging_raw.get("json", True)),
                dir=str(logging_raw.get("dir", "./logs")),
                console=bool(logging_raw.get("console", False)),
                timezone=str(logging_raw.get("timezone", "local")),
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Failed to parse config: {e}")

        if panel.poll_interval_sec <= 0:
            raise ConfigurationError("panel.poll_interval_sec must be positive")
        if snapshot.reload_interval_sec < 0:
            raise ConfigurationError("snapshot.reload_interval_sec must not be negative")
        if logging_config.level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown logging.level: {logging_config.level}")
        if logging_config.timezone != "local":
            try:
                ZoneInfo(logging_config.timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigurationError(f"Unknown logging.timezone: {logging_config.timezone}") from e

        return AppConfig(
            panel=panel,
            snapshot=snapshot,
            logging=logging_config,
            raw=self.config,
        )
