"""Detection of pages the bot must leave alone."""

from __future__ import annotations

import re
from typing import Final

# Bot exclusion, deletion requests and work-in-progress notices.
_DISALLOW_PATTERNS: Final = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"\{\{\s*nobots",
        r"\{\{\s*bots\s*\|\s*deny\s*=\s*all",
        r"\{\{\s*nuweg",
        r"\{\{\s*speedy",
        r"\{\{\s*delete",
        r"\{\{\s*meebezig",
        r"\{\{\s*mee bezig",
        r"\{\{\s*wiu",
    )
)


def is_edit_allowed(text: str) -> bool:
    """Return whether the bot may edit a page with this wikitext."""

    return not any(pattern.search(text) for pattern in _DISALLOW_PATTERNS)
