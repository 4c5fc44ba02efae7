"""Utility modules."""

from .logging_setup import (
    setup_category_logging,
    flush_all_loggers,
    shutdown_logging,
    reset_session_run_number,
    set_log_timezone,
    get_current_timestamp,
    get_logger,
    set_verbose_mode,
)
from .trace_context import (
    get_refresh_id,
    new_refresh,
    generate_refresh_id,
)

__all__ = [
    # Logging setup
    "setup_category_logging",
    "flush_all_loggers",
    "shutdown_logging",
    "reset_session_run_number",
    "set_log_timezone",
    "get_current_timestamp",
    "get_logger",
    "set_verbose_mode",
    # Trace context
    "get_refresh_id",
    "new_refresh",
    "generate_refresh_id",
]
