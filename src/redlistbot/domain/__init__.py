"""Reconciliation of taxoboxes with the IUCN Red List."""

from __future__ import annotations

from .assessment import Assessment, AssessmentRecord, validate_assessment
from .batch import BatchSummary, reconcile_pages
from .editability import is_edit_allowed
from .errors import (
    FactBoxNotFoundError,
    MergeFailure,
    NotAssessedError,
    ReconciliationError,
    ValidationError,
)
from .fact_box import FactBoxView
from .markers import rewrite_marker
from .outdated import is_outdated
from .reconciliation import Outcome, ReconcileResult, Reconciler
from .sanitize import sanitize
from .status import StatusCode, category_link, matches, matches_extinct, parse_status

__all__ = [
    "Assessment",
    "AssessmentRecord",
    "BatchSummary",
    "FactBoxNotFoundError",
    "FactBoxView",
    "MergeFailure",
    "NotAssessedError",
    "Outcome",
    "ReconcileResult",
    "ReconciliationError",
    "Reconciler",
    "StatusCode",
    "ValidationError",
    "category_link",
    "is_edit_allowed",
    "is_outdated",
    "matches",
    "matches_extinct",
    "parse_status",
    "reconcile_pages",
    "rewrite_marker",
    "sanitize",
    "validate_assessment",
]
