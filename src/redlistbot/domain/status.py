"""IUCN Red List categories and the free-text vocabulary used in taxoboxes.

Taxobox authors write the status in many ways: the two-letter code, the Dutch
or English category name, with or without spaces, or in the pre-2001
``LR/..`` notation. All lookups here ignore case and whitespace, so
``"Uitgestorven in het Wild"`` and ``"uitgestorveninhetwild"`` are the same
synonym.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

CATEGORY_NAMESPACE: Final[str] = "Categorie"
CATEGORY_PREFIX: Final[str] = "IUCN-status"


class StatusCode(StrEnum):
    """The nine Red List categories a taxobox can be reconciled to."""

    EX = "EX"
    EW = "EW"
    CR = "CR"
    EN = "EN"
    VU = "VU"
    CD = "CD"
    NT = "NT"
    LC = "LC"
    DD = "DD"

    @property
    def display(self) -> str:
        """Canonical code written into the taxobox ``status`` field."""
        return self.value

    @property
    def category_phrase(self) -> str:
        return CATEGORY_PHRASES[self]

    @property
    def synonyms(self) -> frozenset[str]:
        return _SYNONYMS[self]

    @classmethod
    def from_display(cls, text: str) -> StatusCode:
        """Strictly parse a canonical display code such as ``"VU"``."""

        try:
            return cls(text.strip())
        except ValueError:
            raise ValueError(f"Not a canonical status code: {text!r}") from None


CATEGORY_PHRASES: Final[dict[StatusCode, str]] = {
    StatusCode.EX: "uitgestorven",
    StatusCode.EW: "uitgestorven in het wild",
    StatusCode.CR: "kritiek",
    StatusCode.EN: "bedreigd",
    StatusCode.VU: "kwetsbaar",
    StatusCode.CD: "van bescherming afhankelijk",
    StatusCode.NT: "gevoelig",
    StatusCode.LC: "niet bedreigd",
    StatusCode.DD: "onzeker",
}


def normalize_status_text(text: str) -> str:
    """Case- and whitespace-insensitive lookup form of ``text``."""

    return "".join(text.split()).casefold()


def _table(*spellings: str) -> frozenset[str]:
    return frozenset(normalize_status_text(spelling) for spelling in spellings)


_SYNONYMS: Final[dict[StatusCode, frozenset[str]]] = {
    StatusCode.EX: _table("EX", "uitgestorven", "extinct"),
    StatusCode.EW: _table(
        "EW",
        "UIHW",
        "uitgestorven in het wild",
        "extinct in the wild",
    ),
    StatusCode.CR: _table("CR", "kritiek", "ernstig bedreigd", "critically endangered"),
    StatusCode.EN: _table("EN", "bedreigd", "endangered"),
    StatusCode.VU: _table("VU", "kwetsbaar", "vulnerable"),
    StatusCode.CD: _table(
        "CD",
        "LR/cd",
        "VBA",
        "van bescherming afhankelijk",
        "conservation dependent",
    ),
    StatusCode.NT: _table("NT", "LR/nt", "gevoelig", "near threatened"),
    StatusCode.LC: _table(
        "LC",
        "LR/lc",
        "veilig",
        "secure",
        "niet bedreigd",
        "least concern",
    ),
    StatusCode.DD: _table("DD", "onzeker", "data deficient"),
}

# Informal spellings used on pages about species only known from fossils.
# They are not Red List categories and only protect a page from being updated.
_FOSSIL_SYNONYMS: Final[frozenset[str]] = _table("fossil", "fossiel")

_STATUS_BY_SYNONYM: Final[dict[str, StatusCode]] = {
    synonym: status for status, synonyms in _SYNONYMS.items() for synonym in synonyms
}


def parse_status(text: str) -> StatusCode | None:
    """Return the category ``text`` denotes, or ``None`` when it is not in any table."""

    return _STATUS_BY_SYNONYM.get(normalize_status_text(text))


def matches(status: StatusCode, text: str) -> bool:
    """Return whether ``text`` is one of the synonyms of ``status``."""

    return normalize_status_text(text) in _SYNONYMS[status]


def matches_extinct(text: str) -> bool:
    """Return whether ``text`` denotes an extinct species, fossil spellings included."""

    normalized = normalize_status_text(text)
    return normalized in _SYNONYMS[StatusCode.EX] or normalized in _FOSSIL_SYNONYMS


def category_link(status: StatusCode) -> str:
    """Return the category link that tags a page with ``status``."""

    return f"[[{CATEGORY_NAMESPACE}:{CATEGORY_PREFIX} {status.category_phrase}]]"
