"""Sequential reconciliation of many pages."""

from __future__ import annotations

import time
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .reconciliation import Outcome, ReconcileResult

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .ports import PageFetcher, PageLedger, PageSaver
    from .reconciliation import Reconciler

log = getLogger(__name__)

DEFAULT_EDIT_INTERVAL_SECONDS = 15.0


@dataclass(slots=True)
class BatchSummary:
    """Counters of a batch run."""

    updated: int = 0
    skipped: int = 0
    failed: int = 0
    already_processed: int = 0

    @property
    def total(self) -> int:
        return self.updated + self.skipped + self.failed + self.already_processed

    def count(self, result: ReconcileResult) -> None:
        if result.outcome is Outcome.UPDATED:
            self.updated += 1
        elif result.outcome is Outcome.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1


def reconcile_pages(  # noqa: PLR0913
    titles: Iterable[str],
    *,
    fetch_page: PageFetcher,
    reconciler: Reconciler,
    save_page: PageSaver,
    ledger: PageLedger | None = None,
    dry_run: bool = False,
    max_pages: int | None = None,
    edit_interval_seconds: float = DEFAULT_EDIT_INTERVAL_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> BatchSummary:
    """Reconcile every page in ``titles`` one after the other.

    Titles the ledger already holds are skipped. A page that cannot be fetched,
    reconciled or saved is counted as failed and the batch moves on. After each
    saved edit the runner waits ``edit_interval_seconds``. In a dry run nothing
    is saved and nothing is recorded in the ledger.
    """

    summary = BatchSummary()
    attempted = 0
    if max_pages is not None and max_pages <= 0:
        return summary

    for title in titles:
        if ledger is not None and ledger.is_processed(title):
            log.debug("Skipping %s: already processed", title)
            summary.already_processed += 1
            continue

        attempted += 1
        result = _process_page(
            title,
            fetch_page=fetch_page,
            reconciler=reconciler,
            save_page=save_page,
            dry_run=dry_run,
        )
        summary.count(result)

        if not dry_run:
            if ledger is not None:
                ledger.record(result)
            if result.updated and edit_interval_seconds > 0:
                sleep(edit_interval_seconds)

        if max_pages is not None and attempted >= max_pages:
            break

    log.info(
        "Batch finished: updated=%s, skipped=%s, failed=%s, already_processed=%s",
        summary.updated,
        summary.skipped,
        summary.failed,
        summary.already_processed,
    )
    return summary


def _process_page(
    title: str,
    *,
    fetch_page: PageFetcher,
    reconciler: Reconciler,
    save_page: PageSaver,
    dry_run: bool,
) -> ReconcileResult:
    try:
        page = fetch_page(title)
    except Exception as exc:  # noqa: BLE001
        log.warning("Fetching %s failed: %s", title, exc)
        return ReconcileResult(title=title, outcome=Outcome.FAILED, reason=str(exc))

    result = reconciler.reconcile(title, page.content)
    if not result.updated or dry_run or result.text is None:
        return result

    try:
        save_page(page, result.text)
    except Exception as exc:  # noqa: BLE001
        log.warning("Saving %s failed: %s", title, exc)
        return ReconcileResult(
            title=title,
            outcome=Outcome.FAILED,
            reason=str(exc),
            assessment=result.assessment,
        )

    log.info("Saved %s", title)
    return result
