"""
Bank Value - Main Entry Point

Usage:
    python main.py --env dev                      # Interactive panel
    python main.py --snapshot data/bank.yaml      # Custom snapshot file
    python main.py --no-dashboard                 # Print the table and exit
"""

from __future__ import annotations
import argparse
import sys

from rich.console import Console

from config.config_manager import ConfigManager
from bank_value.domain.exceptions import BankValueError, FatalError
from bank_value.infrastructure import SnapshotLoader
from bank_value.tui import BankValueApp
from bank_value.tui.panels import render_bank_summary
from bank_value.utils import (
    flush_all_loggers,
    get_logger,
    new_refresh,
    set_log_timezone,
    setup_category_logging,
    shutdown_logging,
)

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Bank Value panel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --env dev
  python main.py --snapshot data/bank.yaml --no-dashboard --limit 10
        """
    )

    parser.add_argument(
        "--env",
        type=str,
        default="dev",
        choices=["dev", "prod", "demo"],
        help="Environment to run in (default: dev)"
    )

    parser.add_argument(
        "--config-dir",
        type=str,
        default="config",
        help="Directory holding base.yaml and environment overrides"
    )

    parser.add_argument(
        "--snapshot",
        type=str,
        help="Bank snapshot YAML (overrides snapshot.file from config)"
    )

    parser.add_argument(
        "--no-dashboard",
        action="store_true",
        help="Print the bank table once instead of running the panel"
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Max rows to print in --no-dashboard mode"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level for all categories)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level (ignored if --verbose is set)"
    )

    return parser.parse_args(argv)


def run_headless(loader: SnapshotLoader, limit: int | None) -> int:
    """Load the snapshot once and print the bank table."""
    with new_refresh():
        items = loader.load()
        logger.info(f"Headless refresh: {len(items)} items")
    Console().print(render_bank_summary(items, limit=limit))
    return 0


def run_dashboard(loader: SnapshotLoader, title: str, poll_interval_sec: float, zebra_stripes: bool) -> int:
    """Run the interactive panel until the user quits."""
    app = BankValueApp(
        title=title,
        poll_interval_sec=poll_interval_sec,
        zebra_stripes=zebra_stripes,
        loader=loader,
    )
    app.run()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = ConfigManager(config_dir=args.config_dir, env=args.env).load()
    except (FileNotFoundError, FatalError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_category_logging(
        env=args.env,
        log_dir=config.logging.dir,
        level=args.log_level or config.logging.level,
        console=args.no_dashboard or config.logging.console,
        verbose=args.verbose,
        json_format=config.logging.json,
    )
    set_log_timezone(config.logging.timezone)

    loader = SnapshotLoader(
        args.snapshot or config.snapshot.file,
        reload_interval_sec=config.snapshot.reload_interval_sec,
    )
    logger.info(f"Starting bank value panel (env={args.env}, snapshot={loader.file_path})")

    try:
        if args.no_dashboard:
            return run_headless(loader, args.limit)
        return run_dashboard(
            loader,
            title=config.panel.title,
            poll_interval_sec=config.panel.poll_interval_sec,
            zebra_stripes=config.panel.zebra_stripes,
        )
    except BankValueError as e:
        logger.error(f"Fatal error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Shutdown requested")
        return 0
    finally:
        flush_all_loggers()
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
