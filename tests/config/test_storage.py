from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest  # noqa: TC002

from redlistbot.config import storage


def test_data_dir_prefers_explicit_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    custom = tmp_path / "custom-data"
    monkeypatch.setenv("REDLISTBOT_DATA_DIR", str(custom))

    assert storage.get_data_dir() == custom.resolve()
    assert custom.is_dir()


def test_data_dir_follows_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("REDLISTBOT_DATA_DIR", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert storage.get_data_dir() == (tmp_path / storage.APP_DIR_NAME).resolve()


def test_database_config_uses_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite:///override.db")

    assert storage.get_database_config().uri == "sqlite:///override.db"


def test_database_config_creates_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("REDLISTBOT_DATA_DIR", str(tmp_path / "data-dir"))

    uri = storage.get_database_config().uri

    expected_path = (tmp_path / "data-dir" / storage.LEDGER_FILENAME).resolve()
    assert uri == f"sqlite+pysqlite:///{expected_path}"
    assert expected_path.parent.is_dir()


def test_database_config_can_leave_disk_untouched(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("REDLISTBOT_DATA_DIR", str(tmp_path / "data-dir"))

    uri = storage.get_database_config(create_data_dir=False).uri

    assert uri.endswith(storage.LEDGER_FILENAME)
    assert not (tmp_path / "data-dir").exists()


def test_http_cache_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("REDLISTBOT_DATA_DIR", str(tmp_path))

    assert storage.get_http_cache_path() == tmp_path.resolve() / storage.HTTP_CACHE_FILENAME
