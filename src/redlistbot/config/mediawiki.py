"""MediaWiki API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from redlistbot import __version__

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_MEDIAWIKI_API_URL = "https://nl.wikipedia.org/w/api.php"
MEDIAWIKI_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class MediaWikiConfig:
    api_url: str
    resilience: ResilienceConfig
    username: str | None = None
    password: str | None = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)


def build_user_agent(contact: str | None) -> str:
    agent = f"redlistbot/{__version__}"
    return f"{agent} ({contact})" if contact else agent


def get_mediawiki_config(*, require_credentials: bool = True) -> MediaWikiConfig:
    """Read the wiki endpoint and, unless only reading, the bot account.

    The session logs in and edits, so responses are never cached.
    """

    username: str | None = None
    password: str | None = None
    if require_credentials:
        values = require_env_vars(("MEDIAWIKI_USER", "MEDIAWIKI_PASSWORD"))
        username = values["MEDIAWIKI_USER"]
        password = values["MEDIAWIKI_PASSWORD"]

    api_url = optional_env_var("MEDIAWIKI_API_URL") or DEFAULT_MEDIAWIKI_API_URL
    user_agent = build_user_agent(optional_env_var("REDLISTBOT_CONTACT"))

    resilience = ResilienceConfig(
        name="mediawiki",
        timeout_seconds=MEDIAWIKI_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        cache=None,
        default_headers={"User-Agent": user_agent},
    )
    return MediaWikiConfig(
        api_url=api_url,
        resilience=resilience,
        username=username,
        password=password,
    )
