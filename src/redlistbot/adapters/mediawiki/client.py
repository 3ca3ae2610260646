"""HTTP client for the MediaWiki Action API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from redlistbot.adapters.http_resilience import ResilientClient
from redlistbot.config.bot import DEFAULT_CATEGORY_BATCH_SIZE, DEFAULT_EDIT_SUMMARY
from redlistbot.domain.ports import WikiPage

from .schema import (
    CategoryMembersResponse,
    EditResponse,
    ErrorResponse,
    LoginResponse,
    RevisionsResponse,
    TokensResponse,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping

    from redlistbot.config.http_resilience import ResilienceConfig
    from redlistbot.config.mediawiki import MediaWikiConfig

log = getLogger(__name__)

MAIN_NAMESPACE = 0

type Params = dict[str, str | int]


class MediaWikiAPIError(RuntimeError):
    """Raised when the MediaWiki API reports an error."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class MediaWikiClient:
    """Reads category members and pages, and saves edits as a logged-in bot.

    Every public call runs its own short-lived HTTP session; the session
    cookies are carried over so that a login holds for later edits.
    """

    def __init__(
        self,
        *,
        config: MediaWikiConfig,
        batch_size: int = DEFAULT_CATEGORY_BATCH_SIZE,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._batch_size = batch_size
        self._client_factory = client_factory or ResilientClient
        self._cookies = httpx.Cookies()

    def iter_category_members(self, category: str) -> Iterator[str]:
        """Yield the titles of the articles in ``category``, following continuation."""

        params: Params = {
            "action": "query",
            "list": "categorymembers",
            "cmtitle": category,
            "cmtype": "page",
            "cmnamespace": MAIN_NAMESPACE,
            "cmlimit": self._batch_size,
        }
        while True:
            payload = asyncio.run(self._call("GET", params))
            response = CategoryMembersResponse.model_validate(payload)
            if response.query is None:
                return

            for member in response.query.categorymembers:
                if member.pageid is None:
                    continue
                yield member.title

            if not response.continuation:
                return
            params = {**params, **response.continuation}

    def fetch_page(self, title: str) -> WikiPage:
        """Return the wikitext and timestamp of the latest revision of ``title``."""

        params: Params = {
            "action": "query",
            "prop": "revisions",
            "titles": title,
            "rvprop": "content|timestamp",
            "rvslots": "main",
        }
        payload = asyncio.run(self._call("GET", params))
        response = RevisionsResponse.model_validate(payload)
        if not response.query.pages:
            raise MediaWikiAPIError(f"No page returned for {title!r}")

        page = response.query.pages[0]
        if page.missing or page.invalid:
            raise MediaWikiAPIError(f"Page {title!r} does not exist", code="missingtitle")
        if not page.revisions or "main" not in page.revisions[0].slots:
            raise MediaWikiAPIError(f"Page {title!r} has no content")

        revision = page.revisions[0]
        return WikiPage(
            title=page.title,
            content=revision.slots["main"].content,
            base_timestamp=revision.timestamp,
        )

    def login(self) -> None:
        username = self._config.username
        password = self._config.password
        if not username or not password:
            raise MediaWikiAPIError("Cannot log in without credentials")

        asyncio.run(self._login(username, password))
        log.info("Logged in as %s", username)

    def save_page(self, page: WikiPage, text: str, summary: str = DEFAULT_EDIT_SUMMARY) -> None:
        """Replace the content of ``page`` with ``text`` as a bot edit.

        The edit fails instead of creating the page when it was deleted, and
        conflicts with edits made since ``page`` was fetched.
        """

        if not text.strip():
            raise ValueError(f"Refusing to save blank text to {page.title!r}")

        params: Params = {
            "action": "edit",
            "title": page.title,
            "text": text,
            "summary": summary,
            "bot": 1,
            "nocreate": 1,
            "assert": "user",
        }
        if page.base_timestamp is not None:
            params["basetimestamp"] = page.base_timestamp
        asyncio.run(self._edit(params))

    async def _login(self, username: str, password: str) -> None:
        token = await self._token("login")
        payload = await self._call(
            "POST",
            {"action": "login", "lgname": username, "lgpassword": password, "lgtoken": token},
        )
        result = LoginResponse.model_validate(payload).login
        if result.result != "Success":
            raise MediaWikiAPIError(
                f"Login failed: {result.reason or result.result}", code=result.result
            )

    async def _edit(self, params: Params) -> None:
        token = await self._token("csrf")
        payload = await self._call("POST", {**params, "token": token})
        result = EditResponse.model_validate(payload).edit
        if result.result != "Success":
            raise MediaWikiAPIError(f"Edit failed: {result.result}", code=result.result)
        if result.nochange:
            log.debug("Edit of %s changed nothing", params["title"])

    async def _token(self, kind: str) -> str:
        payload = await self._call("GET", {"action": "query", "meta": "tokens", "type": kind})
        tokens = TokensResponse.model_validate(payload).query.tokens
        token = tokens.get(f"{kind}token")
        if token is None:
            raise MediaWikiAPIError(f"No {kind} token returned")
        return token

    async def _call(self, method: str, params: Mapping[str, str | int]) -> dict[str, object]:
        query: Params = {**params, "format": "json", "formatversion": 2}
        async with self._client_factory(self._resilience) as client:
            client.cookies.update(self._cookies)
            if method == "GET":
                response = await client.get(self._config.api_url, params=query)
            else:
                response = await client.post(self._config.api_url, data=query)
            self._cookies.update(client.cookies)
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise MediaWikiAPIError("Unexpected MediaWiki response payload")
        if "error" in payload:
            error = ErrorResponse.model_validate(payload).error
            log.error("MediaWiki API error %s: %s", error.code, error.info)
            raise MediaWikiAPIError(error.info or error.code, code=error.code)
        return payload
