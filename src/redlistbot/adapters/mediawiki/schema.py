"""Pydantic models for the MediaWiki Action API responses (``formatversion=2``)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MediaWikiBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ApiError(MediaWikiBaseModel):
    code: str
    info: str = ""


class ErrorResponse(MediaWikiBaseModel):
    error: ApiError


class CategoryMember(MediaWikiBaseModel):
    title: str
    pageid: int | None = None
    ns: int = 0


class CategoryMembersQuery(MediaWikiBaseModel):
    categorymembers: list[CategoryMember] = Field(default_factory=list)


class CategoryMembersResponse(MediaWikiBaseModel):
    query: CategoryMembersQuery | None = None
    continuation: dict[str, str | int] | None = Field(default=None, alias="continue")


class RevisionSlot(MediaWikiBaseModel):
    content: str = ""


class Revision(MediaWikiBaseModel):
    timestamp: str | None = None
    slots: dict[str, RevisionSlot] = Field(default_factory=dict)


class PageRevisions(MediaWikiBaseModel):
    title: str
    missing: bool = False
    invalid: bool = False
    revisions: list[Revision] = Field(default_factory=list)


class RevisionsQuery(MediaWikiBaseModel):
    pages: list[PageRevisions] = Field(default_factory=list)


class RevisionsResponse(MediaWikiBaseModel):
    query: RevisionsQuery


class TokensQuery(MediaWikiBaseModel):
    tokens: dict[str, str]


class TokensResponse(MediaWikiBaseModel):
    query: TokensQuery


class LoginResult(MediaWikiBaseModel):
    result: str
    reason: str | None = None
    lgusername: str | None = None


class LoginResponse(MediaWikiBaseModel):
    login: LoginResult


class EditResult(MediaWikiBaseModel):
    result: str
    title: str | None = None
    nochange: bool = False
    newrevid: int | None = None


class EditResponse(MediaWikiBaseModel):
    edit: EditResult
