"""Application orchestration entry points."""

from __future__ import annotations

from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from redlistbot.adapters.mediawiki import MediaWikiClient
from redlistbot.adapters.redlist import RedListAssessmentLookup, RedListClient
from redlistbot.adapters.sqlalchemy import (
    SqlAlchemyPageLedger,
    create_ledger_engine,
    open_existing_ledger_engine,
)
from redlistbot.adapters.wikitext import extract_fields, merge_fields
from redlistbot.config import get_bot_config, get_mediawiki_config, get_redlist_config
from redlistbot.domain.batch import reconcile_pages
from redlistbot.domain.reconciliation import Reconciler

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from redlistbot.config import BotConfig
    from redlistbot.domain.batch import BatchSummary
    from redlistbot.domain.ports import AssessmentLookup, PageLedger, WikiPage
    from redlistbot.domain.reconciliation import ReconcileResult

log = getLogger(__name__)


class WikiGateway(Protocol):
    def iter_category_members(self, category: str) -> Iterator[str]: ...

    def fetch_page(self, title: str) -> WikiPage: ...

    def login(self) -> None: ...

    def save_page(self, page: WikiPage, text: str, summary: str = ...) -> None: ...


def default_lookup() -> AssessmentLookup:
    return RedListAssessmentLookup(RedListClient(config=get_redlist_config()))


def default_ledger(*, dry_run: bool, ignore_ledger: bool) -> PageLedger | None:
    """The ledger database; a dry run only reads one that already exists."""

    if not dry_run:
        return SqlAlchemyPageLedger(create_ledger_engine(), ignore_processed=ignore_ledger)

    engine = open_existing_ledger_engine()
    if engine is None:
        log.debug("No ledger yet, dry run checks every page")
        return None
    return SqlAlchemyPageLedger(engine, ignore_processed=ignore_ledger)


def build_reconciler(lookup: AssessmentLookup | None = None) -> Reconciler:
    """Reconciler wired to mwparserfromhell and the Red List API."""

    return Reconciler(
        extract_fields=extract_fields,
        merge_fields=merge_fields,
        lookup_assessment=lookup or default_lookup(),
    )


def iter_category_titles(wiki: WikiGateway, categories: Iterable[str]) -> Iterator[str]:
    for category in categories:
        log.info("Traversing category %s", category)
        yield from wiki.iter_category_members(category)


def run_bot(  # noqa: PLR0913
    *,
    categories: Sequence[str] | None = None,
    dry_run: bool = False,
    max_pages: int | None = None,
    edit_interval_seconds: float | None = None,
    ignore_ledger: bool = False,
    wiki: WikiGateway | None = None,
    lookup: AssessmentLookup | None = None,
    ledger: PageLedger | None = None,
    bot_config: BotConfig | None = None,
) -> BatchSummary:
    """Reconcile every species page in the configured categories."""

    config = bot_config or get_bot_config()
    effective_categories = tuple(categories) if categories else config.categories
    interval = (
        edit_interval_seconds
        if edit_interval_seconds is not None
        else config.edit_interval_seconds
    )
    effective_wiki = wiki or MediaWikiClient(
        config=get_mediawiki_config(require_credentials=not dry_run),
        batch_size=config.category_batch_size,
    )
    if not dry_run:
        effective_wiki.login()
    effective_ledger = ledger or default_ledger(dry_run=dry_run, ignore_ledger=ignore_ledger)

    log.info(
        "Starting run: categories=%s, dry_run=%s, max_pages=%s, edit_interval=%s",
        ", ".join(effective_categories),
        dry_run,
        max_pages,
        interval,
    )
    return reconcile_pages(
        iter_category_titles(effective_wiki, effective_categories),
        fetch_page=effective_wiki.fetch_page,
        reconciler=build_reconciler(lookup),
        save_page=partial(effective_wiki.save_page, summary=config.edit_summary),
        ledger=effective_ledger,
        dry_run=dry_run,
        max_pages=max_pages,
        edit_interval_seconds=interval,
    )


def check_page(
    title: str,
    *,
    wiki: WikiGateway | None = None,
    lookup: AssessmentLookup | None = None,
) -> ReconcileResult:
    """Reconcile a single page without saving it."""

    effective_wiki = wiki or MediaWikiClient(
        config=get_mediawiki_config(require_credentials=False)
    )
    page = effective_wiki.fetch_page(title)
    return build_reconciler(lookup).reconcile(page.title, page.content)
