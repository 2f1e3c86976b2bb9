"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CoreConfig:
    backend_url: str | None = None
    service_key: str | None = None
    supplier_id: str | None = None
    migrations_dir: str = "supabase/migrations"
    database_url: str | None = None
    request_timeout: int = 20
    debug: bool = False

    @property
    def backend_configured(self) -> bool:
        return bool(self.backend_url and self.service_key)


def config_from_env(*, debug: bool = False) -> CoreConfig:
    return CoreConfig(
        backend_url=os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL"),
        service_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY"),
        supplier_id=os.getenv("SUPPLIER_ID"),
        migrations_dir=os.getenv("MIGRATIONS_DIR", "supabase/migrations"),
        database_url=os.getenv("DATABASE_URL"),
        debug=debug,
    )


__all__ = ["CoreConfig", "config_from_env"]
