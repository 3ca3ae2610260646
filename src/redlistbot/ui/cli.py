from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from redlistbot.app import check_page, run_bot
from redlistbot.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Update IUCN Red List statuses on Dutch Wikipedia species pages"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Reconcile all pages in the species categories")
    run.add_argument(
        "--category",
        action="append",
        dest="categories",
        metavar="CATEGORY",
        help="Category to traverse, may be repeated (defaults to config)",
    )
    run.add_argument(
        "--dry-run",
        action="store_true",
        help="Reconcile pages without saving or recording them",
    )
    run.add_argument(
        "--max-pages",
        type=int,
        help="Maximum number of pages to reconcile before stopping",
    )
    run.add_argument(
        "--edit-interval",
        type=float,
        help="Seconds to wait after each saved edit (defaults to config)",
    )
    run.add_argument(
        "--ignore-ledger",
        action="store_true",
        help="Also reconcile pages the ledger marks as processed",
    )

    check = subparsers.add_parser("check", help="Reconcile one page without saving it")
    check.add_argument("title", help="Title of the page to check")

    return parser.parse_args(list(argv))


def _validate(args: argparse.Namespace) -> None:
    if args.command != "run":
        return
    if args.max_pages is not None and args.max_pages < 0:
        raise ValueError("Max pages must be non-negative")
    if args.edit_interval is not None and args.edit_interval < 0:
        raise ValueError("Edit interval must be non-negative")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        _validate(parsed_args)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "run":
            summary = run_bot(
                categories=parsed_args.categories,
                dry_run=parsed_args.dry_run,
                max_pages=parsed_args.max_pages,
                edit_interval_seconds=parsed_args.edit_interval,
                ignore_ledger=parsed_args.ignore_ledger,
            )
            log.info("Run finished: %s pages seen", summary.total)
        elif parsed_args.command == "check":
            result = check_page(parsed_args.title)
            log.info(
                "%s: %s%s",
                result.title,
                result.outcome,
                f" ({result.reason})" if result.reason else "",
            )
            if result.text is not None:
                log.debug("New text of %s:\n%s", result.title, result.text)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def entrypoint() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    entrypoint()
