"""Shared fixtures for HTTP adapter tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from redlistbot.adapters.http_resilience import ResilientClient
from redlistbot.config.http_resilience import ResilienceConfig

Handler = Callable[[httpx.Request], httpx.Response]
ClientFactory = Callable[[ResilienceConfig], ResilientClient]


def _make_client_factory(handler: Handler) -> ClientFactory:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(async_handler))  # noqa: SLF001  # type: ignore[reportPrivateUsage]
        return client

    return factory


@pytest.fixture
def make_client_factory() -> Callable[[Handler], ClientFactory]:
    return _make_client_factory
