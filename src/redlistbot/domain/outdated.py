"""Decide whether a taxobox lags behind the Red List."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .status import matches

if TYPE_CHECKING:
    from .assessment import Assessment
    from .fact_box import FactBoxView


def is_outdated(view: FactBoxView, assessment: Assessment) -> bool:
    """Return whether the taxobox in ``view`` should be rewritten from ``assessment``.

    A taxobox whose status reads as extinct or fossil is never outdated,
    whatever the Red List says. Otherwise the identifier, the status and the
    assessment year must all agree. Fields other than ``rl-id``, ``status``
    and ``statusbron`` are not looked at.
    """

    if view.is_extinct:
        return False

    if view.red_list_id != assessment.subject_id:
        return True

    status_text = view.status_text
    if status_text is None or not matches(assessment.status, status_text):
        return True

    return view.year_assessed != assessment.year_assessed
