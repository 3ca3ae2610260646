"""MediaWiki adapter."""

from __future__ import annotations

from .client import MediaWikiAPIError, MediaWikiClient

__all__ = ["MediaWikiAPIError", "MediaWikiClient"]
