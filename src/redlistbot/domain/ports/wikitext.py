"""Ports for reading and writing taxobox parameters in wikitext."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from redlistbot.domain.fact_box import FieldKey


class FieldExtractor(Protocol):
    """Return the raw parameters of the taxobox on a page."""

    def __call__(self, text: str) -> dict[FieldKey, str]: ...


class FieldMerger(Protocol):
    """Set or overwrite taxobox parameters and return the full page text."""

    def __call__(self, text: str, fields: Mapping[str, str]) -> str: ...


class EditabilityCheck(Protocol):
    def __call__(self, text: str) -> bool: ...
