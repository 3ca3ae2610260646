"""Red List assessments and validation of raw lookup records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Final

from .errors import ValidationError
from .status import StatusCode, parse_status

# The Red List was first published in 1964; nothing can have been assessed earlier.
FIRST_ASSESSMENT_YEAR: Final[int] = 1964
ASSESSMENT_DATE_FORMAT: Final[str] = "%Y-%m-%d"


@dataclass(frozen=True, slots=True)
class Assessment:
    """Authoritative status of one species."""

    subject_id: int
    status: StatusCode
    year_assessed: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AssessmentRecord:
    """Unvalidated assessment data as returned by a lookup service."""

    subject_id: object
    category_text: object
    assessment_date_text: str | None = None
    published_year: object | None = None
    scientific_name: str | None = None


def validate_assessment(record: AssessmentRecord, *, today: date | None = None) -> Assessment:
    """Turn a raw lookup record into an ``Assessment`` or raise ``ValidationError``."""

    subject_id = _positive_int(record.subject_id, field="subject id")

    if not isinstance(record.category_text, str):
        raise ValidationError(f"Invalid category: {record.category_text!r}")
    status = parse_status(record.category_text)
    if status is None:
        raise ValidationError(f"Unknown category: {record.category_text!r}")

    current_year = (today or datetime.now(UTC).date()).year
    year: int | None = None
    if record.assessment_date_text is not None:
        year = _parse_assessment_year(record.assessment_date_text)
    elif record.published_year is not None:
        year = _positive_int(record.published_year, field="published year")

    if year is not None and not FIRST_ASSESSMENT_YEAR <= year <= current_year:
        raise ValidationError(
            f"Assessment year {year} outside {FIRST_ASSESSMENT_YEAR}-{current_year}"
        )

    return Assessment(subject_id=subject_id, status=status, year_assessed=year)


def _positive_int(value: object, *, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"Invalid {field}: {value!r}")
    return value


def _parse_assessment_year(text: str) -> int:
    # Only the date is read from values like "2016-10-01 00:00:00 UTC".
    date_part = text.strip()[:10]
    try:
        return datetime.strptime(date_part, ASSESSMENT_DATE_FORMAT).replace(tzinfo=UTC).year
    except ValueError:
        raise ValidationError(f"Invalid assessment date: {text!r}") from None
