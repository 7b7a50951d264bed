"""Configuration helpers for environment variables."""

from __future__ import annotations

import os
import logging

from dotenv import load_dotenv


logger = logging.getLogger(__name__)


_TRUE_VALUES = {"1", "true", "yes"}
_FALSE_VALUES = {"0", "false", "no"}


def _should_load_dotenv() -> bool:
    """Return whether local dotenv loading should run."""
    app_env = os.getenv("APP_ENV", "dev").strip().lower()
    return app_env in {"dev", "local"}


if _should_load_dotenv():
    load_dotenv()


def get_env(name: str, default: str | None = None) -> str | None:
    """Return a raw environment value or default."""
    return os.getenv(name, default)


def app_env() -> str:
    """Return the current application environment."""
    return (get_env("APP_ENV", "dev") or "dev").strip() or "dev"


def _is_test_env() -> bool:
    return app_env().strip().lower() in {"test", "ci"}


def log_level() -> str:
    """Return the configured root log level name."""
    return (get_env("LOG_LEVEL", "INFO") or "INFO").strip().upper() or "INFO"


def cors_allow_origins() -> list[str]:
    """Return CORS allowed origins from env with safe environment defaults."""
    raw_origins = get_env("CORS_ALLOW_ORIGINS", "") or ""
    parsed_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

    if parsed_origins:
        return parsed_origins

    if app_env().strip().lower() in {"dev", "local"}:
        return ["http://localhost:4000", "http://127.0.0.1:4000"]

    logger.warning(
        "cors_allow_origins_empty app_env=%s; define CORS_ALLOW_ORIGINS",
        app_env(),
    )

    return []


def seed_demo_data() -> bool:
    """Return whether the ledger starts with the demo transactions.

    An explicit ``LEDGER_SEED_DEMO_DATA`` always wins; otherwise demo data is
    seeded everywhere except test/ci environments.
    """
    raw_value = (get_env("LEDGER_SEED_DEMO_DATA", "") or "").strip().lower()
    if raw_value in _TRUE_VALUES:
        return True
    if raw_value in _FALSE_VALUES:
        return False
    return not _is_test_env()
