"""Reconciliation of one page with its Red List assessment.

The ``Reconciler`` composes the pure decision logic with the collaborators that
read and write taxobox parameters and look up assessments. It never raises:
every attempt ends in an ``updated``, ``skipped`` or ``failed`` result, so a
batch can carry on with the next page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from .assessment import Assessment, validate_assessment
from .editability import is_edit_allowed
from .errors import MergeFailure
from .fact_box import (
    RED_LIST_ID_FIELD,
    STATUS_FIELD,
    YEAR_ASSESSED_FIELD,
    FactBoxView,
    has_fact_box,
)
from .markers import rewrite_marker
from .outdated import is_outdated

if TYPE_CHECKING:
    from collections.abc import Callable

    from .ports import AssessmentLookup, EditabilityCheck, FieldExtractor, FieldMerger

log = getLogger(__name__)

SKIP_NOT_EDITABLE = "edit not allowed"
SKIP_UP_TO_DATE = "up to date"


class Outcome(StrEnum):
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Outcome of reconciling one page."""

    title: str
    outcome: Outcome
    text: str | None = None
    reason: str | None = None
    assessment: Assessment | None = None

    @property
    def updated(self) -> bool:
        return self.outcome is Outcome.UPDATED


def target_fields(assessment: Assessment) -> dict[str, str]:
    """Taxobox parameters that describe ``assessment``."""

    year = assessment.year_assessed
    return {
        RED_LIST_ID_FIELD: str(assessment.subject_id),
        STATUS_FIELD: assessment.status.display,
        YEAR_ASSESSED_FIELD: str(year) if year is not None else "",
    }


def _today() -> date:
    return datetime.now(UTC).date()


@dataclass(slots=True)
class Reconciler:
    """Bring the taxobox and IUCN-status category of a page in line with the Red List."""

    extract_fields: FieldExtractor
    merge_fields: FieldMerger
    lookup_assessment: AssessmentLookup
    is_editable: EditabilityCheck = field(default=is_edit_allowed)
    today: Callable[[], date] = field(default=_today)

    def reconcile(self, title: str, text: str) -> ReconcileResult:
        try:
            result = self._reconcile(title, text)
        except Exception as exc:  # noqa: BLE001
            log.warning("Reconciling %s failed: %s", title, exc)
            return ReconcileResult(title=title, outcome=Outcome.FAILED, reason=str(exc))

        log.info("Reconciled %s: %s", title, result.reason or result.outcome)
        return result

    def _reconcile(self, title: str, text: str) -> ReconcileResult:
        view = FactBoxView(self.extract_fields(text))

        if not self.is_editable(text):
            return ReconcileResult(title=title, outcome=Outcome.SKIPPED, reason=SKIP_NOT_EDITABLE)

        record = self.lookup_assessment(title, view)
        assessment = validate_assessment(record, today=self.today())

        if not is_outdated(view, assessment):
            return ReconcileResult(
                title=title,
                outcome=Outcome.SKIPPED,
                reason=SKIP_UP_TO_DATE,
                assessment=assessment,
            )

        merged = self.merge_fields(text, target_fields(assessment))
        if not has_fact_box(merged):
            raise MergeFailure("Could not update taxobox")

        return ReconcileResult(
            title=title,
            outcome=Outcome.UPDATED,
            text=rewrite_marker(merged, assessment.status),
            assessment=assessment,
        )
