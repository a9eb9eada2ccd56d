"""
Environment-driven settings.

Every setting is read on demand so tests can monkeypatch `os.environ`.
Unparseable numeric values fall back to their defaults.
"""

from __future__ import annotations

import logging
import os

DEFAULT_JWT_SECRET = "dev-change-this-secret"

AUTH_MODES = {"header", "token"}
SSL_MODES = {"disable", "require"}


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def app_env() -> str:
    return _env_str("APP_ENV", "development").lower()


def is_production() -> bool:
    return app_env() == "production"


def database_ssl() -> str:
    """
    Returns "require" or "disable".

    Production defaults to "require": TLS without certificate verification.
    """
    default = "require" if is_production() else "disable"
    value = _env_str("DATABASE_SSL", default).lower()
    return value if value in SSL_MODES else default


def pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def pool_max_size() -> int:
    return max(pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def command_timeout_s() -> float:
    return float(max(1, _env_int("DB_COMMAND_TIMEOUT", 30)))


def auto_migrate() -> bool:
    return _env_bool("DB_AUTO_MIGRATE", default=False)


def auth_mode() -> str:
    mode = _env_str("AUTH_MODE", "header").lower()
    return mode if mode in AUTH_MODES else "header"


def jwt_secret() -> str:
    # In production, set JWT_SECRET in environment.
    return _env_str("JWT_SECRET", DEFAULT_JWT_SECRET)


def jwt_algorithm() -> str:
    return _env_str("JWT_ALG", "HS256")


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> int:
    name = _env_str("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def validate_runtime_config() -> None:
    if is_production() and auth_mode() == "token" and jwt_secret() == DEFAULT_JWT_SECRET:
        raise RuntimeError("JWT_SECRET must be set in production when AUTH_MODE=token.")
