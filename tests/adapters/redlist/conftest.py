"""Shared fixtures for Red List adapter tests."""

from __future__ import annotations

import pytest

from redlistbot.config.http_resilience import ResilienceConfig
from redlistbot.config.redlist import RedListConfig

RedListPayload = dict[str, object]


@pytest.fixture
def redlist_config() -> RedListConfig:
    return RedListConfig(
        api_token="secret-token",
        resilience=ResilienceConfig(
            name="redlist", base_url="https://redlist.test/api/v3", cache=None
        ),
    )


@pytest.fixture
def species_payload() -> RedListPayload:
    return {
        "name": "Raphus cucullatus",
        "result": [
            {
                "taxonid": 22690059,
                "scientific_name": "Raphus cucullatus",
                "kingdom": "ANIMALIA",
                "category": "EX",
                "criteria": None,
                "published_year": 2016,
                "assessment_date": "2016-10-01 00:00:00 UTC",
            }
        ],
    }
