"""Typed read access to the parameters of a taxobox."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from .sanitize import sanitize
from .status import StatusCode, matches_extinct, parse_status

if TYPE_CHECKING:
    from collections.abc import Mapping

type FieldKey = str | int
type RawFieldMap = Mapping[FieldKey, object]
type CleanedFieldMap = Mapping[FieldKey, str]

TEMPLATE_NAME: Final[str] = "Taxobox"

RED_LIST_ID_FIELD: Final[str] = "rl-id"
STATUS_FIELD: Final[str] = "status"
YEAR_ASSESSED_FIELD: Final[str] = "statusbron"
SCIENTIFIC_NAME_FIELD: Final[str] = "w-naam"
COMMON_NAME_FIELD: Final[str] = "naam"

# Matches the opening of a taxobox, with or without namespace prefix.
FACT_BOX_OPENER: Final = re.compile(
    r"\{\{\s*(?:(?:sjabloon|template)\s*:\s*)?" + TEMPLATE_NAME.lower(),
    re.IGNORECASE,
)

_DIGITS: Final = re.compile(r"[0-9]+")


def clean_fields(fields: RawFieldMap) -> dict[FieldKey, str]:
    """Trim string keys and sanitize every value."""

    cleaned: dict[FieldKey, str] = {}
    for key, value in fields.items():
        cleaned_key = key.strip() if isinstance(key, str) else key
        cleaned[cleaned_key] = sanitize(value if isinstance(value, str) else str(value))
    return cleaned


def has_fact_box(text: str) -> bool:
    return FACT_BOX_OPENER.search(text) is not None


class FactBoxView:
    """Read-only view over the cleaned parameters of one taxobox.

    Numeric fields are only exposed when their cleaned value consists of ASCII
    digits; anything else (``"invalid"``, ``""``, ``"2020?"``) reads as absent.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: RawFieldMap) -> None:
        self._fields: CleanedFieldMap = MappingProxyType(clean_fields(fields))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._fields)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FactBoxView):
            return NotImplemented
        return dict(self._fields) == dict(other._fields)

    __hash__ = None  # type: ignore[assignment]

    @property
    def fields(self) -> CleanedFieldMap:
        return self._fields

    def get(self, key: FieldKey) -> str | None:
        return self._fields.get(key)

    @property
    def red_list_id(self) -> int | None:
        return self._digits(RED_LIST_ID_FIELD)

    @property
    def status_text(self) -> str | None:
        return self._fields.get(STATUS_FIELD)

    @property
    def status(self) -> StatusCode | None:
        text = self.status_text
        if text is None:
            return None
        return parse_status(text)

    @property
    def scientific_name(self) -> str | None:
        return self._fields.get(SCIENTIFIC_NAME_FIELD)

    @property
    def common_name(self) -> str | None:
        return self._fields.get(COMMON_NAME_FIELD)

    @property
    def name(self) -> str | None:
        """Scientific name if present, common name otherwise."""
        if self.scientific_name is not None:
            return self.scientific_name
        return self.common_name

    @property
    def year_assessed(self) -> int | None:
        return self._digits(YEAR_ASSESSED_FIELD)

    @property
    def is_extinct(self) -> bool:
        text = self.status_text
        return text is not None and matches_extinct(text)

    def _digits(self, key: str) -> int | None:
        value = self._fields.get(key)
        if value is None or _DIGITS.fullmatch(value) is None:
            return None
        return int(value)
