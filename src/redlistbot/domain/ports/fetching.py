"""Ports for fetching pages and assessments from external services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from redlistbot.domain.assessment import AssessmentRecord
    from redlistbot.domain.fact_box import FactBoxView


@dataclass(frozen=True, slots=True)
class WikiPage:
    """Latest revision of a page."""

    title: str
    content: str
    base_timestamp: str | None = None


@runtime_checkable
class AssessmentLookup(Protocol):
    """Callable port returning the Red List record for the species on a page."""

    def __call__(self, title: str, view: FactBoxView) -> AssessmentRecord: ...


class PageFetcher(Protocol):
    def __call__(self, title: str) -> WikiPage: ...


class TitleSource(Protocol):
    """Lazily yields the titles of the pages in a category."""

    def __call__(self, category: str) -> Iterator[str]: ...


__all__ = ["AssessmentLookup", "PageFetcher", "TitleSource", "WikiPage"]
