"""Apply ``.sql`` migration files through the hosted database's ``exec_sql`` RPC.

There is no transaction around a file: statements run one by one. When the
RPC path fails, the runner stops and writes a combined SQL file that can be
pasted into the database console or fed to ``psql``.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
from pathlib import Path

import requests

from ..backend.client import BackendError, RestClient

logger = logging.getLogger(__name__)

TRACKING_TABLE = "schema_migrations"
EXEC_SQL_FUNCTION = "exec_sql"
COMBINED_FILENAME = "combined_migration.sql"
TRACKING_TABLE_SQL = (
    f"CREATE TABLE IF NOT EXISTS {TRACKING_TABLE} (\n"
    "  filename VARCHAR(255) PRIMARY KEY,\n"
    "  applied_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP\n"
    ");"
)
# Undefined table (Postgres) and the PostgREST schema cache / no rows codes.
_MISSING_TABLE_CODES = {"42P01", "PGRST205", "PGRST116"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MigrationResult:
    pending: list[str] = field(default_factory=list)
    applied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: str | None = None
    error: str | None = None
    combined_path: Path | None = None
    instructions: str | None = None

    @property
    def needs_manual(self) -> bool:
        return self.combined_path is not None

    def to_dict(self) -> dict:
        return {
            "pending": list(self.pending),
            "applied": list(self.applied),
            "skipped": list(self.skipped),
            "failed": self.failed,
            "error": self.error,
            "combined_path": str(self.combined_path) if self.combined_path else None,
            "instructions": self.instructions,
        }


def discover_migrations(directory: str | Path) -> list[Path]:
    path = Path(directory)
    if not path.is_dir():
        raise ValueError(f"Migrations directory not found: {path}")
    return sorted(
        item
        for item in path.iterdir()
        if item.is_file() and item.suffix == ".sql" and item.name != COMBINED_FILENAME
    )


def split_statements(sql: str) -> list[str]:
    """Split SQL on ``;`` that sit outside quoted strings and ``--`` comments."""
    statements: list[str] = []
    current: list[str] = []
    in_quote = False
    in_comment = False
    index = 0
    while index < len(sql):
        char = sql[index]
        if in_comment:
            current.append(char)
            if char == "\n":
                in_comment = False
        elif in_quote:
            current.append(char)
            if char == "'":
                if sql[index + 1 : index + 2] == "'":
                    current.append("'")
                    index += 1
                else:
                    in_quote = False
        elif char == "'":
            in_quote = True
            current.append(char)
        elif char == "-" and sql[index + 1 : index + 2] == "-":
            in_comment = True
            current.append(char)
        elif char == ";":
            statements.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1
    statements.append("".join(current))
    return [statement.strip() for statement in statements if _has_sql(statement)]


def _has_sql(statement: str) -> bool:
    for line in statement.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("--"):
            return True
    return False


def _error_message(exc: Exception) -> str:
    if isinstance(exc, BackendError):
        return exc.message
    return str(exc) or exc.__class__.__name__


def _sql_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def build_combined_sql(files: list[Path], *, now: datetime | None = None) -> str:
    timestamp = (now or _utcnow()).isoformat()
    names = ", ".join(path.name for path in files)
    parts = [
        f"-- Migration batch generated on {timestamp}",
        f"-- Files: {names}",
        "",
        "-- Create migrations tracking table",
        TRACKING_TABLE_SQL,
        "",
    ]
    for path in files:
        parts.append(f"-- Migration: {path.name}")
        parts.append(path.read_text(encoding="utf-8").rstrip())
        parts.append("-- Record migration")
        parts.append(
            f"INSERT INTO {TRACKING_TABLE} (filename) VALUES ({_sql_literal(path.name)}) "
            "ON CONFLICT (filename) DO NOTHING;"
        )
        parts.append("")
    return "\n".join(parts)


def manual_instructions(combined_path: Path, database_url: str | None = None) -> str:
    target = database_url or "postgresql://postgres:<password>@<host>:5432/postgres?sslmode=require"
    return (
        f"Automatic migration failed. Apply {combined_path} manually:\n"
        "  1. Open the SQL editor of the database dashboard and paste the file contents, or\n"
        f'  2. Run: psql "{target}" -f {combined_path}'
    )


class MigrationRunner:
    def __init__(
        self,
        client: RestClient,
        directory: str | Path,
        *,
        output_dir: str | Path | None = None,
        database_url: str | None = None,
    ) -> None:
        self.client = client
        self.directory = Path(directory)
        # The fallback file must not land among the migrations it replays.
        self.output_dir = Path(output_dir) if output_dir is not None else self.directory.parent
        self.database_url = database_url

    def ensure_tracking_table(self) -> bool:
        try:
            self.client.rpc(EXEC_SQL_FUNCTION, {"sql": TRACKING_TABLE_SQL})
        except (BackendError, requests.RequestException) as exc:
            logger.warning("Could not create %s through RPC: %s", TRACKING_TABLE, _error_message(exc))
            return False
        return True

    def applied_migrations(self) -> set[str]:
        try:
            rows = self.client.select(TRACKING_TABLE, columns="filename")
        except BackendError as exc:
            if exc.code in _MISSING_TABLE_CODES:
                return set()
            raise
        return {str(row.get("filename")) for row in rows if row.get("filename")}

    def pending_migrations(self) -> tuple[list[Path], list[str]]:
        files = discover_migrations(self.directory)
        applied = self.applied_migrations()
        pending = [path for path in files if path.name not in applied]
        skipped = [path.name for path in files if path.name in applied]
        return pending, skipped

    def run(self, *, dry_run: bool = False) -> MigrationResult:
        if not dry_run:
            self.ensure_tracking_table()
        try:
            pending, skipped = self.pending_migrations()
        except (BackendError, requests.RequestException) as exc:
            # Applied state is unknown; the combined file is idempotent so replay everything.
            message = _error_message(exc)
            logger.error("Could not read applied migrations: %s", message)
            files = discover_migrations(self.directory)
            result = MigrationResult(pending=[path.name for path in files], error=message)
            if not dry_run and files:
                self._write_fallback(files, result)
            return result
        result = MigrationResult(pending=[path.name for path in pending], skipped=skipped)
        for name in skipped:
            logger.info("Skipping already applied migration: %s", name)
        if dry_run or not pending:
            return result

        for position, path in enumerate(pending):
            logger.info("Applying migration: %s", path.name)
            try:
                for statement in split_statements(path.read_text(encoding="utf-8")):
                    self.client.rpc(EXEC_SQL_FUNCTION, {"sql": statement})
                self.client.insert(TRACKING_TABLE, {"filename": path.name})
            except (BackendError, requests.RequestException) as exc:
                message = _error_message(exc)
                logger.error("Migration %s failed: %s", path.name, message)
                result.failed = path.name
                result.error = message
                self._write_fallback(pending[position:], result)
                return result
            result.applied.append(path.name)
        return result

    def _write_fallback(self, files: list[Path], result: MigrationResult) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        combined_path = self.output_dir / COMBINED_FILENAME
        combined_path.write_text(build_combined_sql(files), encoding="utf-8")
        result.combined_path = combined_path
        result.instructions = manual_instructions(combined_path, self.database_url)
        logger.warning("%s", result.instructions)


__all__ = [
    "COMBINED_FILENAME",
    "MigrationResult",
    "MigrationRunner",
    "TRACKING_TABLE",
    "build_combined_sql",
    "discover_migrations",
    "manual_instructions",
    "split_statements",
]
