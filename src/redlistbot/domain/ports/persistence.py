"""Ports for saving pages and remembering processed titles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from redlistbot.domain.reconciliation import ReconcileResult

    from .fetching import WikiPage


class PageSaver(Protocol):
    """Store ``text`` as a new revision of ``page``."""

    def __call__(self, page: WikiPage, text: str) -> None: ...


class PageLedger(Protocol):
    """Skip-list and log of pages handled in earlier runs."""

    def is_processed(self, title: str) -> bool: ...

    def record(self, result: ReconcileResult) -> None: ...
