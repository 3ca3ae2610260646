"""Where the ledger database and the HTTP cache live on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

APP_DIR_NAME: Final[str] = "redlistbot"
LEDGER_FILENAME: Final[str] = "ledger.db"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def get_data_dir(*, create: bool = True) -> Path:
    """``REDLISTBOT_DATA_DIR``, or ``redlistbot`` under the XDG data home."""

    configured = optional_env_var("REDLISTBOT_DATA_DIR")
    if configured is not None:
        data_dir = Path(configured)
    else:
        xdg_data_home = optional_env_var("XDG_DATA_HOME")
        base = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
        data_dir = base / APP_DIR_NAME

    data_dir = data_dir.expanduser().resolve()
    if create:
        data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_http_cache_path() -> Path:
    return get_data_dir() / HTTP_CACHE_FILENAME


def get_database_config(*, create_data_dir: bool = True) -> DatabaseConfig:
    """Ledger database location; ``DATABASE_URI`` wins over the data directory."""

    uri = optional_env_var("DATABASE_URI")
    if uri is None:
        ledger_path = get_data_dir(create=create_data_dir) / LEDGER_FILENAME
        uri = f"sqlite+pysqlite:///{ledger_path}"
    return DatabaseConfig(uri=uri)
