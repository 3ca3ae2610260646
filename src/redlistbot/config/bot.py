"""Run-level defaults of the bot."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_float_env_var

DEFAULT_CATEGORIES: tuple[str, ...] = (
    "Categorie:Wikipedia:Diersoorten",
    "Categorie:Wikipedia:Plantenlemma",
)
DEFAULT_EDIT_INTERVAL_SECONDS = 15.0
DEFAULT_CATEGORY_BATCH_SIZE = 500
DEFAULT_EDIT_SUMMARY = "Bijwerken/toevoegen status van de Rode Lijst van de IUCN"


@dataclass(frozen=True, slots=True)
class BotConfig:
    categories: tuple[str, ...] = field(default=DEFAULT_CATEGORIES)
    edit_interval_seconds: float = DEFAULT_EDIT_INTERVAL_SECONDS
    category_batch_size: int = DEFAULT_CATEGORY_BATCH_SIZE
    edit_summary: str = DEFAULT_EDIT_SUMMARY


def get_bot_config() -> BotConfig:
    return BotConfig(
        edit_interval_seconds=optional_float_env_var(
            "REDLISTBOT_EDIT_INTERVAL", DEFAULT_EDIT_INTERVAL_SECONDS
        ),
    )
