"""IUCN Red List API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

REDLIST_BASE_URL = "https://apiv3.iucnredlist.org/api/v3"
REDLIST_TIMEOUT_SECONDS = 20.0
REDLIST_CACHE_TTL_SECONDS = 7 * 24 * 60 * 60


def _is_successful_payload(payload: object) -> bool:
    return isinstance(payload, dict) and "result" in payload and "message" not in payload


@dataclass(frozen=True, slots=True)
class RedListConfig:
    """Holds Red List API configuration values."""

    api_token: str
    resilience: ResilienceConfig


def get_redlist_config(*, resilience: ResilienceConfig | None = None) -> RedListConfig:
    values = require_env_vars(("REDLIST_API_TOKEN",))
    return RedListConfig(
        api_token=values["REDLIST_API_TOKEN"],
        resilience=resilience
        or ResilienceConfig(
            name="redlist",
            base_url=REDLIST_BASE_URL,
            timeout_seconds=REDLIST_TIMEOUT_SECONDS,
            retry=RetryPolicy(total=4),
            ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
            cache=CacheConfig(
                ttl_seconds=REDLIST_CACHE_TTL_SECONDS,
                should_cache=_is_successful_payload,
            ),
        ),
    )
