from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import inspect, select

from redlistbot.adapters.sqlalchemy import (
    LedgerEntry,
    SqlAlchemyPageLedger,
    create_ledger_engine,
    open_existing_ledger_engine,
    processed_pages_table,
)
from redlistbot.domain.assessment import Assessment
from redlistbot.domain.reconciliation import Outcome, ReconcileResult
from redlistbot.domain.status import StatusCode

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

NOW = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)


@pytest.fixture
def ledger(sqlite_engine: Engine) -> SqlAlchemyPageLedger:
    return SqlAlchemyPageLedger(sqlite_engine, clock=lambda: NOW)


def _updated(title: str = "Dodo", status: StatusCode = StatusCode.CD) -> ReconcileResult:
    return ReconcileResult(
        title=title,
        outcome=Outcome.UPDATED,
        text="{{Taxobox}}",
        assessment=Assessment(subject_id=1, status=status, year_assessed=1996),
    )


def test_unknown_page_is_not_processed(ledger: SqlAlchemyPageLedger) -> None:
    assert not ledger.is_processed("Dodo")
    assert ledger.get("Dodo") is None


def test_record_updated_page(ledger: SqlAlchemyPageLedger) -> None:
    ledger.record(_updated())

    assert ledger.is_processed("Dodo")
    assert ledger.get("Dodo") == LedgerEntry(
        title="Dodo",
        outcome=Outcome.UPDATED,
        processed_at=NOW,
        reason=None,
        status=StatusCode.CD,
    )


def test_status_is_stored_as_display_code(
    ledger: SqlAlchemyPageLedger, sqlite_engine: Engine
) -> None:
    ledger.record(_updated(status=StatusCode.LC))

    with sqlite_engine.connect() as connection:
        raw = connection.exec_driver_sql("SELECT status FROM processed_pages").scalar_one()

    assert raw == "LC"


def test_skipped_page_is_processed(ledger: SqlAlchemyPageLedger) -> None:
    ledger.record(ReconcileResult(title="Kiwi", outcome=Outcome.SKIPPED, reason="up to date"))

    assert ledger.is_processed("Kiwi")
    entry = ledger.get("Kiwi")
    assert entry is not None
    assert entry.reason == "up to date"
    assert entry.status is None


def test_failed_page_is_retried(ledger: SqlAlchemyPageLedger) -> None:
    ledger.record(ReconcileResult(title="Moa", outcome=Outcome.FAILED, reason="Not assessed"))

    assert not ledger.is_processed("Moa")


def test_record_overwrites_previous_outcome(
    ledger: SqlAlchemyPageLedger, sqlite_engine: Engine
) -> None:
    ledger.record(ReconcileResult(title="Dodo", outcome=Outcome.FAILED, reason="timeout"))
    ledger.record(_updated())

    with sqlite_engine.connect() as connection:
        rows = connection.execute(select(processed_pages_table)).all()

    assert len(rows) == 1
    entry = ledger.get("Dodo")
    assert entry is not None
    assert entry.outcome is Outcome.UPDATED
    assert entry.reason is None


def test_ignore_processed(sqlite_engine: Engine) -> None:
    ledger = SqlAlchemyPageLedger(sqlite_engine, ignore_processed=True)

    ledger.record(_updated())

    assert not ledger.is_processed("Dodo")
    assert ledger.get("Dodo") is not None


def test_forget(ledger: SqlAlchemyPageLedger) -> None:
    ledger.record(_updated())

    ledger.forget("Dodo")

    assert ledger.get("Dodo") is None


def test_create_ledger_engine_creates_tables(tmp_path: Path) -> None:
    path = tmp_path / "ledger.db"

    engine = create_ledger_engine(database_uri=f"sqlite+pysqlite:///{path}")
    try:
        assert "processed_pages" in inspect(engine).get_table_names()
    finally:
        engine.dispose()


def test_open_existing_ledger_engine_creates_nothing(tmp_path: Path) -> None:
    path = tmp_path / "missing" / "ledger.db"

    assert open_existing_ledger_engine(database_uri=f"sqlite+pysqlite:///{path}") is None
    assert not path.parent.exists()


def test_open_existing_ledger_engine_without_tables(tmp_path: Path) -> None:
    path = tmp_path / "empty.db"
    path.touch()

    assert open_existing_ledger_engine(database_uri=f"sqlite+pysqlite:///{path}") is None


def test_open_existing_ledger_engine_reads_ledger(tmp_path: Path) -> None:
    uri = f"sqlite+pysqlite:///{tmp_path / 'ledger.db'}"
    writer = create_ledger_engine(database_uri=uri)
    try:
        SqlAlchemyPageLedger(writer).record(_updated())
    finally:
        writer.dispose()

    engine = open_existing_ledger_engine(database_uri=uri)
    assert engine is not None
    try:
        assert SqlAlchemyPageLedger(engine).is_processed("Dodo")
    finally:
        engine.dispose()
