"""SQLAlchemy adapter for the page ledger."""

from __future__ import annotations

from .ledger import (
    LedgerEntry,
    SqlAlchemyPageLedger,
    create_ledger_engine,
    open_existing_ledger_engine,
)
from .tables import create_all_tables, metadata, processed_pages_table

__all__ = [
    "LedgerEntry",
    "SqlAlchemyPageLedger",
    "create_all_tables",
    "create_ledger_engine",
    "metadata",
    "open_existing_ledger_engine",
    "processed_pages_table",
]
