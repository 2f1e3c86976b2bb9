"""Shared runtime settings for server/CLI adapters.

This module owns environment-backed application settings. It is intentionally
separate from ``shelfcheck.core.config`` because core config stays minimal and
framework-agnostic.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from .core.config import CoreConfig


@dataclass(frozen=True)
class Settings:
    app_name: str
    debug: bool
    log_verbosity: str
    currency: str
    supabase_url: str | None
    supabase_service_key: str | None
    supplier_id: str | None
    migrations_dir: str
    database_url: str | None
    cors_allow_origins: tuple[str, ...]

    def core_config(self) -> CoreConfig:
        return CoreConfig(
            backend_url=self.supabase_url,
            service_key=self.supabase_service_key,
            supplier_id=self.supplier_id,
            migrations_dir=self.migrations_dir,
            database_url=self.database_url,
            debug=self.debug,
        )


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = tuple(
        origin.strip()
        for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
        if origin.strip()
    )
    return Settings(
        app_name=os.getenv("APP_NAME", "Shelfcheck Supplier API"),
        debug=_env_bool("DEBUG", default=False),
        log_verbosity=_env_choice(
            "LOG_VERBOSITY",
            default="medium",
            allowed={"low", "medium", "high", "extrahigh"},
        ),
        currency=os.getenv("CURRENCY", "INR").strip().upper() or "INR",
        supabase_url=os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL"),
        supabase_service_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY"),
        supplier_id=os.getenv("SUPPLIER_ID"),
        migrations_dir=os.getenv("MIGRATIONS_DIR", "supabase/migrations"),
        database_url=os.getenv("DATABASE_URL"),
        cors_allow_origins=origins or ("*",),
    )


__all__ = ["Settings", "get_settings"]
