"""IUCN Red List adapter."""

from __future__ import annotations

from .client import RedListAPIError, RedListClient
from .fetcher import RedListAssessmentLookup, SpeciesLookupClient, query_name
from .schema import ErrorResponse, SpeciesAssessment, SpeciesResponse
from .translator import translate_assessment, translate_species

__all__ = [
    "ErrorResponse",
    "RedListAPIError",
    "RedListAssessmentLookup",
    "RedListClient",
    "SpeciesAssessment",
    "SpeciesLookupClient",
    "SpeciesResponse",
    "query_name",
    "translate_assessment",
    "translate_species",
]
