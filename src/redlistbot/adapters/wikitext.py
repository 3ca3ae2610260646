"""Reading and writing taxobox parameters with mwparserfromhell."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

import mwparserfromhell as mwpfh

from redlistbot.domain.errors import FactBoxNotFoundError
from redlistbot.domain.fact_box import TEMPLATE_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mwparserfromhell.nodes import Template
    from mwparserfromhell.wikicode import Wikicode

    from redlistbot.domain.fact_box import FieldKey

# "Taxobox" or a variant such as "Taxobox vogel", optionally with namespace.
_TEMPLATE_NAME_PATTERN: Final = re.compile(
    r"(?:(?:sjabloon|template)\s*:\s*)?" + re.escape(TEMPLATE_NAME) + r"(?:\s.*)?",
    re.IGNORECASE | re.DOTALL,
)


def is_fact_box_template(template: Template) -> bool:
    name = str(template.name).replace("_", " ").strip()
    return _TEMPLATE_NAME_PATTERN.fullmatch(name) is not None


def _find_fact_box(code: Wikicode) -> Template:
    for template in code.filter_templates(recursive=False):
        if is_fact_box_template(template):
            return template
    raise FactBoxNotFoundError("No taxobox found")


def extract_fields(text: str) -> dict[FieldKey, str]:
    """Return the raw parameters of the first top-level taxobox on the page.

    Positional parameters are keyed by their integer index.
    """

    template = _find_fact_box(mwpfh.parse(text))
    fields: dict[FieldKey, str] = {}
    for param in template.params:
        name = str(param.name).strip()
        key: FieldKey = int(name) if not param.showkey and name.isdigit() else name
        fields[key] = str(param.value)
    return fields


def merge_fields(text: str, fields: Mapping[str, str]) -> str:
    """Set ``fields`` on the first top-level taxobox and return the new page text.

    Existing parameters are overwritten in place; new ones are appended in the
    spacing style of the parameters already there.
    """

    code = mwpfh.parse(text)
    template = _find_fact_box(code)
    for name, value in fields.items():
        template.add(name, value, preserve_spacing=True)
    return str(code)
