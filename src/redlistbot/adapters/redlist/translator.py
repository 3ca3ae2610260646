"""Translate Red List payloads into assessment records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from redlistbot.domain.assessment import AssessmentRecord
from redlistbot.domain.errors import NotAssessedError

if TYPE_CHECKING:
    from .schema import SpeciesAssessment, SpeciesResponse


def translate_assessment(payload: SpeciesAssessment) -> AssessmentRecord:
    return AssessmentRecord(
        subject_id=payload.taxonid,
        category_text=payload.category,
        assessment_date_text=payload.assessment_date,
        published_year=payload.published_year,
        scientific_name=payload.scientific_name,
    )


def translate_species(response: SpeciesResponse) -> AssessmentRecord:
    """First assessment of the response; an empty result means not assessed."""

    if not response.result:
        raise NotAssessedError("Not assessed")
    return translate_assessment(response.result[0])
