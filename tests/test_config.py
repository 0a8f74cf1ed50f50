from __future__ import annotations

import os

import pytest

from app.config import (
    DEFAULT_PORT,
    get_app_version_from_env,
    get_cors_origins_from_env,
    get_port_from_env,
    load_env_file,
)


def test_port_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert get_port_from_env() == DEFAULT_PORT == 8000


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "3000")
    assert get_port_from_env() == 3000


@pytest.mark.parametrize("raw", ["abc", "0", "70000"])
def test_port_rejects_bad_values(monkeypatch, raw):
    monkeypatch.setenv("PORT", raw)
    with pytest.raises(ValueError):
        get_port_from_env()


def test_cors_origins_default_to_wildcard(monkeypatch):
    monkeypatch.delenv("CORS_ORIGIN", raising=False)
    assert get_cors_origins_from_env() == ["*"]


def test_cors_origins_split_on_commas(monkeypatch):
    monkeypatch.setenv("CORS_ORIGIN", "http://a.test, http://b.test ,")
    assert get_cors_origins_from_env() == ["http://a.test", "http://b.test"]


def test_app_version(monkeypatch):
    monkeypatch.setenv("APP_VERSION", "9.9.9")
    assert get_app_version_from_env() == "9.9.9"


def test_load_env_file(tmp_path):
    key = "USERS_API_DOTENV_CHECK"
    env_file = tmp_path / ".env"
    env_file.write_text(f"{key}=from-file\n")
    try:
        assert load_env_file(env_file) is True
        assert os.environ[key] == "from-file"
    finally:
        os.environ.pop(key, None)


def test_load_env_file_does_not_override(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "1234")
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=9999\n")
    load_env_file(env_file)
    assert get_port_from_env() == 1234


def test_load_env_file_missing(tmp_path):
    assert load_env_file(tmp_path / "nope.env") is False
