"""Errors raised while reconciling a single page."""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for failures that end the reconciliation of one page."""


class ValidationError(ReconciliationError):
    """Raised when an assessment record is malformed or out of range."""


class FactBoxNotFoundError(ReconciliationError):
    """Raised when a page does not contain a taxobox."""


class NotAssessedError(ReconciliationError):
    """Raised when the Red List holds no assessment for a species."""


class MergeFailure(ReconciliationError):
    """Raised when writing fields into the taxobox did not yield a usable page."""
