"""Persistent skip-list and run log of processed pages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, delete, insert, inspect, select, update
from sqlalchemy.engine import make_url

from redlistbot.config.storage import get_database_config
from redlistbot.domain.reconciliation import Outcome

from .tables import create_all_tables, processed_pages_table

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.engine import Engine

    from redlistbot.domain.reconciliation import ReconcileResult
    from redlistbot.domain.status import StatusCode

log = getLogger(__name__)

# Failed pages are retried on the next run.
PROCESSED_OUTCOMES = frozenset({Outcome.UPDATED, Outcome.SKIPPED})


@dataclass(frozen=True, slots=True)
class LedgerEntry:
    title: str
    outcome: Outcome
    processed_at: datetime
    reason: str | None = None
    status: StatusCode | None = None


def _now() -> datetime:
    return datetime.now(UTC)


class SqlAlchemyPageLedger:
    """Ledger of the latest outcome per page title.

    With ``ignore_processed`` every page counts as unprocessed, while outcomes
    are still recorded.
    """

    def __init__(
        self,
        engine: Engine,
        *,
        ignore_processed: bool = False,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        self._engine = engine
        self._ignore_processed = ignore_processed
        self._clock = clock

    def is_processed(self, title: str) -> bool:
        if self._ignore_processed:
            return False
        entry = self.get(title)
        return entry is not None and entry.outcome in PROCESSED_OUTCOMES

    def get(self, title: str) -> LedgerEntry | None:
        statement = select(processed_pages_table).where(processed_pages_table.c.title == title)
        with self._engine.connect() as connection:
            row = connection.execute(statement).mappings().first()
        if row is None:
            return None
        return LedgerEntry(
            title=row["title"],
            outcome=row["outcome"],
            processed_at=row["processed_at"],
            reason=row["reason"],
            status=row["status"],
        )

    def record(self, result: ReconcileResult) -> None:
        values = {
            "outcome": result.outcome,
            "reason": result.reason,
            "status": result.assessment.status if result.assessment is not None else None,
            "processed_at": self._clock(),
        }
        table = processed_pages_table
        with self._engine.begin() as connection:
            exists = connection.execute(
                select(table.c.title).where(table.c.title == result.title)
            ).first()
            if exists is None:
                connection.execute(insert(table).values(title=result.title, **values))
            else:
                connection.execute(
                    update(table).where(table.c.title == result.title).values(**values)
                )
        log.debug("Recorded %s as %s", result.title, result.outcome)

    def forget(self, title: str) -> None:
        with self._engine.begin() as connection:
            connection.execute(
                delete(processed_pages_table).where(processed_pages_table.c.title == title)
            )


def create_ledger_engine(*, database_uri: str | None = None) -> Engine:
    """Engine for the ledger database with its tables in place."""

    engine = create_engine(database_uri or get_database_config().uri, future=True)
    create_all_tables(engine)
    return engine


def open_existing_ledger_engine(*, database_uri: str | None = None) -> Engine | None:
    """Engine for a ledger that already exists, or ``None``.

    Neither the data directory, the SQLite file nor the tables are created.
    """

    uri = database_uri or get_database_config(create_data_dir=False).uri
    url = make_url(uri)
    database = url.database
    if (
        url.get_backend_name() == "sqlite"
        and database
        and database != ":memory:"
        and not Path(database).is_file()
    ):
        return None

    engine = create_engine(uri, future=True)
    if not inspect(engine).has_table(processed_pages_table.name):
        engine.dispose()
        return None
    return engine
