"""HTTP client for the IUCN Red List API v3."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

from redlistbot.adapters.http_resilience import ResilientClient
from redlistbot.config.redlist import REDLIST_BASE_URL

from .schema import ErrorResponse, SpeciesResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from redlistbot.config.http_resilience import ResilienceConfig
    from redlistbot.config.redlist import RedListConfig

log = getLogger(__name__)


class RedListAPIError(RuntimeError):
    """Raised when the Red List API returns an application-level error."""


class RedListClient:
    """Low-level HTTP client for the global species assessment endpoints."""

    def __init__(
        self,
        *,
        config: RedListConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._token = config.api_token
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def species_by_id(self, taxon_id: int) -> SpeciesResponse:
        return asyncio.run(self._request_species(f"species/id/{taxon_id}"))

    def species_by_name(self, name: str) -> SpeciesResponse:
        return asyncio.run(self._request_species(f"species/{quote(name, safe='')}"))

    async def _request_species(self, path: str) -> SpeciesResponse:
        base_url = (self._resilience.base_url or REDLIST_BASE_URL).rstrip("/")
        url = f"{base_url}/{path}"
        log.debug("Requesting %s", url)

        async with self._client_factory(self._resilience) as client:
            response = await client.get(url, params={"token": self._token})
        response.raise_for_status()

        payload = response.json()
        if isinstance(payload, dict) and "message" in payload:
            error_payload = ErrorResponse.model_validate(payload)
            log.error("Red List API error: %s", error_payload.message)
            raise RedListAPIError(error_payload.message)

        if not isinstance(payload, dict) or "result" not in payload:
            raise RedListAPIError("Unexpected Red List response payload")

        return SpeciesResponse.model_validate(payload)
