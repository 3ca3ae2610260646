"""Rewriting of the IUCN-status category on a page."""

from __future__ import annotations

import re
from typing import Final

from .status import CATEGORY_PHRASES, CATEGORY_PREFIX, StatusCode, category_link


def _phrase_pattern(phrase: str) -> str:
    return r"\s+".join(re.escape(word) for word in phrase.split())


# Tag of species the Red List has not evaluated; replaced but never written.
NOT_EVALUATED_PHRASE: Final[str] = "niet geëvalueerd"

# Longest phrases first so "uitgestorven in het wild" wins over "uitgestorven".
_PHRASES: Final = "|".join(
    _phrase_pattern(phrase)
    for phrase in sorted(
        (*CATEGORY_PHRASES.values(), NOT_EVALUATED_PHRASE), key=len, reverse=True
    )
)

MARKER_PATTERN: Final = re.compile(
    r"\[\[\s*Categor(?:ie|y)\s*:\s*"
    + re.escape(CATEGORY_PREFIX)
    + r"\s+(?:"
    + _PHRASES
    + r")\s*\]\][ \t]*\n?",
    re.IGNORECASE,
)


def remove_markers(document: str) -> str:
    """Remove every IUCN-status category together with one trailing line break."""

    return MARKER_PATTERN.sub("", document)


def rewrite_marker(document: str, status: StatusCode) -> str:
    """Replace all IUCN-status categories on ``document`` by a single one for ``status``.

    The new category is appended as the last line. Other categories and text
    keep their position, and rewriting twice gives the same page as rewriting
    once.
    """

    return remove_markers(document).rstrip("\n") + "\n" + category_link(status)
