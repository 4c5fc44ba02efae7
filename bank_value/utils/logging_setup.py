"""
Logging setup with per-category files and refresh ID support.

Provides:
- 3 log categories: system, data, ui
- Automatic module -> category routing
- Refresh ID correlation in all logs
- JSON-lines file output through a queue listener (non-blocking writes)
- Console output (when the dashboard is disabled or verbose mode)
- Configurable timezone for log timestamps

Categories:
- system: Startup, shutdown, config, errors
- data: Snapshot loading, item refreshes
- ui: Panel interaction, rendering
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
import os
import re
import json
from queue import Queue
from pathlib import Path
from typing import Optional, Dict, List
from datetime import datetime
from zoneinfo import ZoneInfo

from .trace_context import get_refresh_id

# =============================================================================
# GLOBAL STATE
# =============================================================================

# Run number for this session (determined at startup)
_session_run_number: Optional[int] = None

# Timezone for log timestamps (None = local time)
_log_timezone: Optional[ZoneInfo] = None

# Set via --verbose
_verbose_mode: bool = False

# Set via --log-level
_log_level_override: Optional[str] = None

_category_loggers: Dict[str, logging.Logger] = {}

# One queue listener per category
_queue_listeners: List[logging.handlers.QueueListener] = []

# =============================================================================
# LOG CATEGORIES AND ROUTING
# =============================================================================

LOGGER_PREFIX = "bankvalue"

CATEGORIES = ["system", "data", "ui"]

CATEGORY_SUFFIXES = {
    "system": "sys",
    "data": "dat",
    "ui": "ui",
}

# Module path -> category routing, more specific paths first
MODULE_ROUTING: List[tuple[str, str]] = [
    ("bank_value.infrastructure", "data"),
    ("bank_value.models", "data"),
    ("bank_value.tui", "ui"),
    ("bank_value", "system"),
]


def get_category_for_module(module_name: str) -> str:
    """
    Determine the log category for a given module name.

    Args:
        module_name: Full module path (e.g., "bank_value.tui.app").

    Returns:
        Category name (system, data or ui).
    """
    for prefix, category in MODULE_ROUTING:
        if module_name.startswith(prefix):
            return category
    return "system"


# =============================================================================
# TIMEZONE SUPPORT
# =============================================================================

def set_log_timezone(tz: Optional[str] = None) -> None:
    """
    Set the timezone for log timestamps.

    Args:
        tz: Timezone name (e.g., "Europe/London", "UTC"). None or "local"
            uses local system time.
    """
    global _log_timezone
    if tz is None or tz == "local":
        _log_timezone = None
    else:
        _log_timezone = ZoneInfo(tz)


def get_current_timestamp() -> str:
    """ISO format timestamp in the configured log timezone."""
    if _log_timezone is not None:
        return datetime.now(_log_timezone).isoformat()
    return datetime.now().isoformat()


# =============================================================================
# GLOBAL CONFIGURATION
# =============================================================================

def set_verbose_mode(enabled: bool) -> None:
    """Enable or disable verbose mode (DEBUG level logging)."""
    global _verbose_mode
    _verbose_mode = enabled


def set_log_level_override(level: Optional[str]) -> None:
    """Set a global log level override."""
    global _log_level_override
    _log_level_override = level.upper() if level else None


def get_effective_log_level() -> str:
    """Get the effective log level (considering verbose mode and overrides)."""
    if _verbose_mode:
        return "DEBUG"
    if _log_level_override:
        return _log_level_override
    return "INFO"


# =============================================================================
# FORMATTERS
# =============================================================================

class RefreshIdFilter(logging.Filter):
    """Stamps records with the refresh ID of the emitting context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.refresh_id = get_refresh_id()
        return True


def _refresh_id_of(record: logging.LogRecord) -> str:
    # Records formatted on the queue listener thread carry the emitter's ID
    return getattr(record, "refresh_id", None) or get_refresh_id()


class JSONFormatter(logging.Formatter):
    """
    Single-line JSON formatter.

    Each record carries timestamp, level, category, refresh ID and message,
    plus ``data`` extras and exception text when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "ts": get_current_timestamp(),
            "level": record.levelname,
            "cat": self._get_category(record.name),
            "refresh": _refresh_id_of(record),
            "msg": record.getMessage(),
        }

        if hasattr(record, "data") and record.data:
            log_entry["data"] = record.data

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)

    def _get_category(self, logger_name: str) -> str:
        """Extract category from logger name."""
        if logger_name.startswith(f"{LOGGER_PREFIX}."):
            parts = logger_name.split(".")
            if len(parts) >= 2 and parts[1] in CATEGORIES:
                return parts[1]
        return "system"


class ConsoleFormatter(logging.Formatter):
    """
    Console formatter with refresh ID and color support.

    Format: [LEVEL] [refresh] message
    """

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        refresh_id = _refresh_id_of(record)
        level = record.levelname

        if self.use_colors:
            color = self.COLORS.get(level, "")
            return f"{color}[{level:7}]{self.RESET} [{refresh_id}] {record.getMessage()}"
        return f"[{level:7}] [{refresh_id}] {record.getMessage()}"


# =============================================================================
# LOGGER FACTORY
# =============================================================================

def get_logger(module_name: str) -> logging.Logger:
    """
    Get the category logger for a module.

    Example:
        from bank_value.utils.logging_setup import get_logger
        logger = get_logger(__name__)
        logger.info("Loaded snapshot")
    """
    category = get_category_for_module(module_name)
    category_logger_name = f"{LOGGER_PREFIX}.{category}"

    logger = logging.getLogger(category_logger_name)

    # Temporary level until setup_category_logging runs
    if not logger.handlers and category not in _category_loggers:
        logger.setLevel(logging.DEBUG)

    return logger


# =============================================================================
# RUN NUMBER MANAGEMENT
# =============================================================================

def _get_next_run_number(log_dir: str, env: str, date_str: str) -> int:
    """Find the next available run number for today's date."""
    log_path = Path(log_dir) / date_str
    if not log_path.exists():
        return 1

    # Pattern: bank_value_{env}_{category}_{date}_{N}.log
    suffixes = "|".join(CATEGORY_SUFFIXES.values())
    pattern = re.compile(
        rf'^bank_value_{re.escape(env)}_(?:{suffixes})_{re.escape(date_str)}_(\d+)\.log$'
    )

    max_num = 0
    for filename in os.listdir(log_path):
        match = pattern.match(filename)
        if match:
            max_num = max(max_num, int(match.group(1)))

    return max_num + 1


def _get_session_run_number(log_dir: str, env: str) -> int:
    """Get or initialize the session run number."""
    global _session_run_number

    if _session_run_number is None:
        date_str = datetime.now().strftime('%Y-%m-%d')
        _session_run_number = _get_next_run_number(log_dir, env, date_str)

    return _session_run_number


def reset_session_run_number() -> None:
    """Reset the session run number (for testing)."""
    global _session_run_number
    _session_run_number = None


# =============================================================================
# CATEGORY LOGGING SETUP
# =============================================================================

def setup_category_logging(
    env: str,
    log_dir: str = "./logs",
    level: str = "INFO",
    console: bool = False,
    verbose: bool = False,
    json_format: bool = True,
) -> Dict[str, logging.Logger]:
    """
    Set up one log file per category.

    Creates files in a date-specific subdirectory:
    - logs/{date}/bank_value_{env}_sys_{date}_{run}.log
    - logs/{date}/bank_value_{env}_dat_{date}_{run}.log
    - logs/{date}/bank_value_{env}_ui_{date}_{run}.log

    Args:
        env: Environment name (dev/prod/demo).
        log_dir: Base directory for log files.
        level: Default logging level.
        console: Enable console output.
        verbose: Enable verbose (DEBUG) mode.
        json_format: JSON lines in files, otherwise plain text.

    Returns:
        Dict mapping category name to logger.
    """
    shutdown_logging()

    for category in CATEGORIES:
        logger = logging.getLogger(f"{LOGGER_PREFIX}.{category}")
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    set_verbose_mode(verbose)
    if not verbose:
        set_log_level_override(level)

    date_str = datetime.now().strftime('%Y-%m-%d')
    log_path = Path(log_dir) / date_str
    log_path.mkdir(parents=True, exist_ok=True)

    run_number = _get_session_run_number(log_dir, env)
    effective_level = getattr(logging, get_effective_log_level(), logging.INFO)

    for category in CATEGORIES:
        suffix = CATEGORY_SUFFIXES[category]
        filename = f"bank_value_{env}_{suffix}_{date_str}_{run_number}.log"

        logger = logging.getLogger(f"{LOGGER_PREFIX}.{category}")
        logger.setLevel(effective_level)
        logger.propagate = False

        file_handler = logging.FileHandler(
            filename=str(log_path / filename),
            mode='a',
            encoding='utf-8'
        )
        if json_format:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
        file_handler.setLevel(effective_level)

        log_queue: Queue = Queue(-1)
        queue_handler = logging.handlers.QueueHandler(log_queue)
        queue_handler.addFilter(RefreshIdFilter())
        logger.addHandler(queue_handler)

        listener = logging.handlers.QueueListener(
            log_queue, file_handler, respect_handler_level=True
        )
        listener.start()
        _queue_listeners.append(listener)

        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(ConsoleFormatter(use_colors=True))
            console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
            logger.addHandler(console_handler)

        _category_loggers[category] = logger

    return _category_loggers


def flush_all_loggers() -> None:
    """Flush all handlers so logs reach disk."""
    for category in CATEGORIES:
        logger = logging.getLogger(f"{LOGGER_PREFIX}.{category}")
        for handler in logger.handlers:
            handler.flush()


def shutdown_logging() -> None:
    """Stop all queue listeners (call during application shutdown)."""
    for listener in _queue_listeners:
        listener.stop()
        for handler in listener.handlers:
            handler.close()
    _queue_listeners.clear()
