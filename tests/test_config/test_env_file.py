"""Testes da carga do arquivo .env."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from config.settings import get_telegram_settings, load_env_file


def _track(monkeypatch: pytest.MonkeyPatch, *names: str) -> None:
    # Registra as variáveis no monkeypatch para que o teardown remova o que o .env definir
    for name in names:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)


def _write_env(tmp_path: Path, content: str) -> Path:
    env_file = tmp_path / ".env"
    env_file.write_text(content, encoding="utf-8")
    return env_file


def test_missing_file_returns_false(tmp_path: Path) -> None:
    assert load_env_file(tmp_path / "nope.env") is False


def test_populates_missing_variables(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = _write_env(tmp_path, "TELEGRAM_BOT_TOKEN=from-file\nTELEGRAM_CHAT_ID=99\n")
    _track(monkeypatch, "TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID")

    assert load_env_file(env_file) is True

    settings = get_telegram_settings()
    assert settings.bot_token == "from-file"
    assert settings.default_chat_id == "99"


def test_never_overrides_real_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = _write_env(tmp_path, "TELEGRAM_CHAT_ID=from-file\n")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "from-env")

    load_env_file(env_file)

    assert os.environ["TELEGRAM_CHAT_ID"] == "from-env"


def test_path_from_relay_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = _write_env(tmp_path, "API_KEYS=alpha\n")
    monkeypatch.setenv("RELAY_ENV_FILE", str(env_file))
    _track(monkeypatch, "API_KEYS")

    assert load_env_file() is True
    assert os.environ["API_KEYS"] == "alpha"
