"""Cleaning of raw taxobox parameter values.

Taxobox values routinely carry presentation markup around the data the bot
cares about, for example ``''[[Raphus cucullatus]]'' {{†}}``. ``sanitize``
reduces such a value to ``Raphus cucullatus``.

Template removal is a single shortest-match pass: ``{{a|{{b}}}}`` loses
``{{a|{{b}}`` and keeps the trailing ``}}``. Nested templates are rare in the
fields this bot reads, so no depth-aware stripping is attempted.
"""

from __future__ import annotations

import re
import string
from typing import Final

_TEMPLATE_PATTERN: Final = re.compile(r"\{\{.+?\}\}", re.DOTALL)

_WHITESPACE: Final[str] = string.whitespace + "\0"
_QUOTES: Final[str] = "'\"‘’‚‛“”„‟"
_BRACKETS: Final[str] = "[]"
_TRIMMED: Final[str] = _WHITESPACE + _QUOTES + _BRACKETS


def strip_templates(value: str) -> str:
    """Remove every ``{{...}}`` template, nearest closing braces first."""

    return _TEMPLATE_PATTERN.sub("", value)


def sanitize(value: str) -> str:
    """Return ``value`` without templates, surrounding quotes, brackets or whitespace.

    Whitespace, quote and bracket characters are trimmed as one set, so
    ``"  '[[Dodo]]'  "`` and ``"[['Dodo']]"`` both give ``"Dodo"`` and
    ``sanitize(sanitize(value)) == sanitize(value)`` holds for every input.
    """

    return strip_templates(value).strip(_TRIMMED)
