"""Assessment lookup backed by the Red List API."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from .translator import translate_species

if TYPE_CHECKING:
    from redlistbot.domain.assessment import AssessmentRecord
    from redlistbot.domain.fact_box import FactBoxView

    from .schema import SpeciesResponse

log = getLogger(__name__)


class SpeciesLookupClient(Protocol):
    def species_by_id(self, taxon_id: int) -> SpeciesResponse: ...

    def species_by_name(self, name: str) -> SpeciesResponse: ...


def query_name(title: str, view: FactBoxView) -> str:
    """First non-blank of scientific name, common name and page title."""

    for candidate in (view.scientific_name, view.common_name):
        if candidate:
            return candidate
    return title


@dataclass(slots=True)
class RedListAssessmentLookup:
    """Look up the assessment for a page.

    The taxobox ``rl-id`` is used when it holds a number, the name from
    ``query_name`` otherwise.
    """

    client: SpeciesLookupClient

    def __call__(self, title: str, view: FactBoxView) -> AssessmentRecord:
        taxon_id = view.red_list_id
        if taxon_id is not None:
            log.debug("Looking up %s by Red List id %s", title, taxon_id)
            return translate_species(self.client.species_by_id(taxon_id))

        name = query_name(title, view)
        log.debug("Looking up %s by name %r", title, name)
        return translate_species(self.client.species_by_name(name))
