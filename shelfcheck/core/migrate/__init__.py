from .runner import (
    MigrationResult,
    MigrationRunner,
    build_combined_sql,
    discover_migrations,
    manual_instructions,
    split_statements,
)

__all__ = [
    "MigrationResult",
    "MigrationRunner",
    "build_combined_sql",
    "discover_migrations",
    "manual_instructions",
    "split_statements",
]
