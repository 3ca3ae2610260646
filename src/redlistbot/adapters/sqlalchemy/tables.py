"""SQLAlchemy table metadata for the page ledger."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, Dialect, Enum, MetaData, String, Table, TypeDecorator

from redlistbot.domain.reconciliation import Outcome
from redlistbot.domain.status import StatusCode

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


class StatusDisplayType(TypeDecorator[StatusCode]):
    """Stores a status as its canonical taxobox code."""

    impl = String(16)
    cache_ok = True

    def process_bind_param(self, value: StatusCode | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return value.display

    def process_result_value(self, value: str | None, dialect: Dialect) -> StatusCode | None:
        _ = dialect
        if value is None:
            return None
        return StatusCode.from_display(value)


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "pk": "pk_%(table_name)s",
    }
)

processed_pages_table = Table(
    "processed_pages",
    metadata,
    Column("title", String(255), primary_key=True),
    Column("outcome", Enum(Outcome, native_enum=False), nullable=False),
    Column("reason", String, nullable=True),
    Column("status", StatusDisplayType(), nullable=True),
    Column("processed_at", UTCDateTime(), nullable=False),
)


def create_all_tables(engine: Engine) -> None:
    """Create the ledger tables if they do not exist yet."""

    log.info("Creating all tables")
    metadata.create_all(engine)
