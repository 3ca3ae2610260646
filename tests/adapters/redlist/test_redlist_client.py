from __future__ import annotations

from collections.abc import Callable  # noqa: TC003

import httpx
import pytest

from redlistbot.adapters.redlist import RedListAPIError, RedListClient, SpeciesResponse
from redlistbot.config.redlist import RedListConfig  # noqa: TC001


def _client(
    config: RedListConfig,
    make_client_factory: Callable[..., object],
    handler: Callable[[httpx.Request], httpx.Response],
) -> RedListClient:
    return RedListClient(config=config, client_factory=make_client_factory(handler))  # type: ignore[arg-type]


def test_species_by_id(
    redlist_config: RedListConfig,
    make_client_factory: Callable[..., object],
    species_payload: dict[str, object],
) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=species_payload)

    response = _client(redlist_config, make_client_factory, handler).species_by_id(22690059)

    assert isinstance(response, SpeciesResponse)
    assert response.result[0].taxonid == 22690059
    assert response.result[0].category == "EX"
    assert requests[0].url.host == "redlist.test"
    assert requests[0].url.path == "/api/v3/species/id/22690059"
    assert requests[0].url.params["token"] == "secret-token"


def test_species_by_name_quotes_the_name(
    redlist_config: RedListConfig,
    make_client_factory: Callable[..., object],
    species_payload: dict[str, object],
) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=species_payload)

    _client(redlist_config, make_client_factory, handler).species_by_name("Raphus cucullatus")

    assert requests[0].url.raw_path.startswith(b"/api/v3/species/Raphus%20cucullatus?")


def test_empty_result_is_returned(
    redlist_config: RedListConfig,
    make_client_factory: Callable[..., object],
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"name": "Onbekend", "result": []})

    response = _client(redlist_config, make_client_factory, handler).species_by_name("Onbekend")

    assert response.result == []


def test_api_error_message(
    redlist_config: RedListConfig,
    make_client_factory: Callable[..., object],
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"message": "Token not valid!"})

    with pytest.raises(RedListAPIError, match="Token not valid!"):
        _client(redlist_config, make_client_factory, handler).species_by_id(1)


def test_unexpected_payload(
    redlist_config: RedListConfig,
    make_client_factory: Callable[..., object],
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=["not", "a", "dict"])

    with pytest.raises(RedListAPIError, match="Unexpected"):
        _client(redlist_config, make_client_factory, handler).species_by_id(1)


def test_http_errors_propagate(
    redlist_config: RedListConfig,
    make_client_factory: Callable[..., object],
) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "not found"})

    with pytest.raises(httpx.HTTPStatusError):
        _client(redlist_config, make_client_factory, handler).species_by_id(1)
