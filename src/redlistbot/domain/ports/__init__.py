"""Ports through which the reconciliation core reaches its collaborators."""

from __future__ import annotations

from .fetching import AssessmentLookup, PageFetcher, TitleSource, WikiPage
from .persistence import PageLedger, PageSaver
from .wikitext import EditabilityCheck, FieldExtractor, FieldMerger

__all__ = [
    "AssessmentLookup",
    "EditabilityCheck",
    "FieldExtractor",
    "FieldMerger",
    "PageFetcher",
    "PageLedger",
    "PageSaver",
    "TitleSource",
    "WikiPage",
]
