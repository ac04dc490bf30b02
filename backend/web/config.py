"""
Configuration and startup checks for EduManage.

Why: Without a backend endpoint and public API key the dashboard cannot
authenticate anyone or load data, so the process must refuse to start rather
than serve a half-working UI. Production-like environments get a few extra
guards against obviously insecure settings.

Permissions: The caller needs no special privileges. The functions simply read
environment variables and raise `ConfigError` (a `SystemExit`) on fatal
misconfiguration.
"""
from __future__ import annotations

import os
import sys
from dataclasses import dataclass

DEFAULT_SESSION_TTL_SECONDS = 3600
_PLACEHOLDER_PREFIXES = ("DUMMY", "CHANGE_ME")


class ConfigError(SystemExit):
    """Required configuration is missing or unsafe; startup is aborted."""


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_anon_key: str
    environment: str = "dev"
    session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS
    log_level: str = "INFO"

    @property
    def prod_like(self) -> bool:
        return _is_prod_like(self.environment)


def _is_prod_like(env: str) -> bool:
    env_l = (env or "").lower()
    return env_l in {"prod", "production", "stage", "staging"}


def should_load_dotenv() -> bool:
    """Decide if we should load a local .env file.

    - Never load under pytest to avoid contaminating test env.
    - Allow explicit opt-out via EDUMANAGE_ENABLE_DOTENV (default true
      outside pytest).
    """
    if "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST"):
        return False
    flag = (os.getenv("EDUMANAGE_ENABLE_DOTENV", "true") or "").strip().lower()
    return flag in ("1", "true", "yes")


def _parse_ttl(raw: str | None) -> int:
    try:
        value = int((raw or "").strip())
    except ValueError:
        return DEFAULT_SESSION_TTL_SECONDS
    return value if value > 0 else DEFAULT_SESSION_TTL_SECONDS


def load_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        ConfigError: SUPABASE_URL or SUPABASE_ANON_KEY is unset or blank.
    """
    url = (os.getenv("SUPABASE_URL") or "").strip()
    key = (os.getenv("SUPABASE_ANON_KEY") or "").strip()
    missing = [name for name, value in (("SUPABASE_URL", url), ("SUPABASE_ANON_KEY", key)) if not value]
    if missing:
        raise ConfigError(f"Refusing to start: missing required environment variables: {', '.join(missing)}")
    settings = Settings(
        supabase_url=url.rstrip("/"),
        supabase_anon_key=key,
        environment=(os.getenv("EDUMANAGE_ENV", "dev") or "dev").strip().lower(),
        session_ttl_seconds=_parse_ttl(os.getenv("EDUMANAGE_SESSION_TTL_SECONDS")),
        log_level=(os.getenv("EDUMANAGE_LOG_LEVEL", "INFO") or "INFO").strip().upper(),
    )
    ensure_secure_config(settings)
    return settings


def ensure_secure_config(settings: Settings) -> None:
    """Fail fast on insecure production configuration.

    Development remains permissive for convenience (local Supabase runs on
    plain http with well-known demo keys).
    """
    if not settings.prod_like:
        return
    if not settings.supabase_url.lower().startswith("https://"):
        raise ConfigError("Refusing to start: SUPABASE_URL must use https in production.")
    if settings.supabase_anon_key.upper().startswith(_PLACEHOLDER_PREFIXES):
        raise ConfigError("Refusing to start: SUPABASE_ANON_KEY is a placeholder in production.")


__all__ = [
    "ConfigError",
    "DEFAULT_SESSION_TTL_SECONDS",
    "Settings",
    "ensure_secure_config",
    "load_settings",
    "should_load_dotenv",
]
