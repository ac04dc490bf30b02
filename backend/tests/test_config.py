"""
Startup configuration: required variables, production guards, defaults.
"""
from __future__ import annotations

import pytest

from backend.web.config import ConfigError, DEFAULT_SESSION_TTL_SECONDS, load_settings, should_load_dotenv


def test_missing_backend_settings_abort_startup():
    with pytest.raises(ConfigError) as excinfo:
        load_settings()
    assert "SUPABASE_URL" in str(excinfo.value)
    assert "SUPABASE_ANON_KEY" in str(excinfo.value)


def test_config_error_is_a_system_exit(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SUPABASE_URL", "http://127.0.0.1:54321")
    with pytest.raises(SystemExit):
        load_settings()


def test_dev_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SUPABASE_URL", "http://127.0.0.1:54321/")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")

    settings = load_settings()

    assert settings.supabase_url == "http://127.0.0.1:54321"
    assert settings.environment == "dev"
    assert settings.prod_like is False
    assert settings.session_ttl_seconds == DEFAULT_SESSION_TTL_SECONDS
    assert settings.log_level == "INFO"


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_invalid_ttl_falls_back_to_default(monkeypatch: pytest.MonkeyPatch, raw: str):
    monkeypatch.setenv("SUPABASE_URL", "http://127.0.0.1:54321")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
    monkeypatch.setenv("EDUMANAGE_SESSION_TTL_SECONDS", raw)
    assert load_settings().session_ttl_seconds == DEFAULT_SESSION_TTL_SECONDS


def test_prod_requires_https(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EDUMANAGE_ENV", "prod")
    monkeypatch.setenv("SUPABASE_URL", "http://school.example.org")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "eyJrealkey")
    with pytest.raises(ConfigError) as excinfo:
        load_settings()
    assert "https" in str(excinfo.value)


def test_prod_rejects_placeholder_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EDUMANAGE_ENV", "production")
    monkeypatch.setenv("SUPABASE_URL", "https://school.example.org")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "CHANGE_ME")
    with pytest.raises(ConfigError):
        load_settings()


def test_prod_accepts_secure_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EDUMANAGE_ENV", "staging")
    monkeypatch.setenv("SUPABASE_URL", "https://school.example.org")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "eyJrealkey")
    monkeypatch.setenv("EDUMANAGE_SESSION_TTL_SECONDS", "900")
    settings = load_settings()
    assert settings.prod_like is True
    assert settings.session_ttl_seconds == 900


def test_dotenv_is_never_loaded_under_pytest(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EDUMANAGE_ENABLE_DOTENV", "true")
    assert should_load_dotenv() is False
