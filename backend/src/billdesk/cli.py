"""
Dashboard CLI - print the document dashboard in the terminal.

Usage:
    billdesk-dashboard
    billdesk-dashboard --json
    billdesk-dashboard --log-level DEBUG
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from enum import Enum
from typing import TextIO

from billdesk.config import get_settings
from billdesk.domain.errors import DateParseError
from billdesk.infrastructure.database import close_db
from billdesk.infrastructure.store import DocumentStore, SqlDocumentStore
from billdesk.services.dashboard import DashboardController
from billdesk.services.notifications import LoggingNotifier
from billdesk.services.view import DashboardView, build_dashboard_view

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _json_default(value: object) -> object:
    if isinstance(value, Enum):
        return value.value
    return str(value)


def render_text(view: DashboardView, out: TextIO) -> None:
    """Write the dashboard as plain text."""
    print(f"{'=' * 70}", file=out)
    print(view.title, file=out)
    print(f"{'=' * 70}", file=out)

    if view.mode != "ready":
        if view.heading:
            print(view.heading, file=out)
        print(view.message or "", file=out)
        return

    for section in view.sections:
        print(f"\n{section.title}", file=out)
        print("-" * 70, file=out)
        for item in section.items:
            print(
                f"  {item.label:<24} {item.client_name[:18]:<18} "
                f"{item.issue_date:<13} {item.money:>12}  [{item.status}]",
                file=out,
            )


async def run(store: DocumentStore, as_json: bool = False, out: TextIO | None = None) -> int:
    """
    Activate one dashboard session and print it.

    Returns:
        Process exit code: 0 when the dashboard loaded, 1 otherwise
    """
    out = out or sys.stdout
    settings = get_settings()
    controller = DashboardController(store=store, notifier=LoggingNotifier())

    await controller.activate()

    try:
        view = build_dashboard_view(controller.state, settings)
    except DateParseError as e:
        logger.error(f"Malformed document data: {e}")
        return 1

    if as_json:
        print(json.dumps(asdict(view), default=_json_default, indent=2), file=out)
    else:
        render_text(view, out)

    return 1 if view.mode == "error" else 0


async def _main_async(args: argparse.Namespace) -> int:
    try:
        return await run(SqlDocumentStore(), as_json=args.json)
    finally:
        await close_db()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print the billing document dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Text dashboard
  billdesk-dashboard

  # View model as JSON
  billdesk-dashboard --json
        """,
    )

    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Print the view model as JSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()

    setup_logging(args.log_level)

    sys.exit(asyncio.run(_main_async(args)))


if __name__ == "__main__":
    main()
