"""Pydantic models describing the Red List API v3 species payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class RedListBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SpeciesAssessment(RedListBaseModel):
    """One entry of the ``result`` list.

    Identifier and category are kept as sent so that malformed values reach
    assessment validation instead of being coerced here.
    """

    taxonid: object = None
    category: object = None
    scientific_name: str | None = None
    published_year: object = None
    assessment_date: str | None = None

    _normalize_scientific_name = field_validator("scientific_name", mode="before")(
        _blank_to_none
    )
    _normalize_assessment_date = field_validator("assessment_date", mode="before")(
        _blank_to_none
    )


class SpeciesResponse(RedListBaseModel):
    name: str | int | None = None
    result: list[SpeciesAssessment]


class ErrorResponse(RedListBaseModel):
    message: str
