"""Stable public API facade for the Shelfcheck core engine."""


from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .backend import ProductRepository, RestClient
from .canonical import AuxiliaryData, ProductDraft
from .config import CoreConfig, config_from_env
from .importers.csv import MAX_BATCH_SIZE, import_drafts_from_csv
from .migrate import MigrationResult, MigrationRunner
from .seed import SeedResult, seed_products
from .validate import ValidationReport, report_from_errors, validate_collections, validate_product_form


@dataclass
class DraftResult:
    row: int
    errors: dict[str, str] = field(default_factory=dict)
    collection_errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def report(self) -> ValidationReport:
        return report_from_errors(self.errors, self.collection_errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "row": self.row,
            "valid": self.valid,
            "errors": dict(self.errors),
            "collection_errors": dict(self.collection_errors),
            "issues": self.report.to_dict()["issues"],
        }


def parse_draft_payload(payload: Mapping[str, Any]) -> tuple[ProductDraft, AuxiliaryData]:
    """Split a form payload into the draft and its auxiliary collections.

    Accepts either ``{"product": {...}, "simpleFields": [...]}`` or a flat
    object carrying the collections next to the draft fields.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("Product payload must be an object.")
    product = payload.get("product")
    draft_data = product if isinstance(product, Mapping) else payload
    return ProductDraft.from_payload(draft_data), AuxiliaryData.from_payload(payload)


def validate_draft(
    draft: ProductDraft,
    auxiliary: AuxiliaryData | None = None,
    *,
    row: int = 1,
    require_images: bool = False,
) -> DraftResult:
    auxiliary = auxiliary or AuxiliaryData()
    return DraftResult(
        row=row,
        errors=validate_product_form(draft, auxiliary),
        collection_errors=validate_collections(auxiliary, require_images=require_images),
    )


def validate_payload(payload: Mapping[str, Any], *, row: int = 1) -> DraftResult:
    draft, auxiliary = parse_draft_payload(payload)
    return validate_draft(draft, auxiliary, row=row)


def validate_drafts(payloads: list[Mapping[str, Any]]) -> list[DraftResult]:
    if not isinstance(payloads, list):
        raise ValueError("Products array is required")
    if len(payloads) > MAX_BATCH_SIZE:
        raise ValueError(f"Cannot process more than {MAX_BATCH_SIZE} products at once")
    return [validate_payload(payload, row=row) for row, payload in enumerate(payloads, start=1)]


def validate_csv(csv_input: bytes | str | Path) -> list[DraftResult]:
    rows = import_drafts_from_csv(_coerce_bytes(csv_input))
    return [
        validate_draft(draft, auxiliary, row=row)
        for row, (draft, auxiliary) in enumerate(rows, start=1)
    ]


def build_repository(config: CoreConfig | None = None) -> ProductRepository:
    config = config or config_from_env()
    if not config.backend_configured:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are required for backend access.")
    client = RestClient(config.backend_url or "", config.service_key or "", timeout=config.request_timeout)
    return ProductRepository(client)


def create_product(
    payload: Mapping[str, Any],
    *,
    repository: ProductRepository | None = None,
    supplier_id: str | None = None,
    config: CoreConfig | None = None,
) -> dict[str, Any]:
    config = config or config_from_env()
    draft, auxiliary = parse_draft_payload(payload)
    repository = repository or build_repository(config)
    return repository.create_product(draft, auxiliary, supplier_id=supplier_id or config.supplier_id)


def seed(
    *,
    count: int = 100,
    seed_value: int | None = None,
    dry_run: bool = False,
    repository: ProductRepository | None = None,
    config: CoreConfig | None = None,
) -> SeedResult:
    config = config or config_from_env()
    if repository is None and not dry_run:
        repository = build_repository(config)
    return seed_products(
        repository,
        count=count,
        seed=seed_value,
        supplier_id=config.supplier_id,
        dry_run=dry_run,
    )


def migrate(
    *,
    directory: str | Path | None = None,
    dry_run: bool = False,
    client: RestClient | None = None,
    config: CoreConfig | None = None,
) -> MigrationResult:
    config = config or config_from_env()
    if client is None:
        client = build_repository(config).client
    runner = MigrationRunner(
        client,
        directory or config.migrations_dir,
        database_url=config.database_url,
    )
    return runner.run(dry_run=dry_run)


def _coerce_bytes(value: bytes | str | Path) -> bytes:
    if isinstance(value, bytes):
        return value
    path = Path(value)
    return path.read_bytes()


__all__ = [
    "CoreConfig",
    "DraftResult",
    "build_repository",
    "config_from_env",
    "create_product",
    "migrate",
    "parse_draft_payload",
    "seed",
    "validate_csv",
    "validate_draft",
    "validate_drafts",
    "validate_payload",
]
