from dataclasses import dataclass, field
import logging
from typing import Any, Mapping

from ..backend import BackendError, DraftValidationError, ProductRepository
from ..validate import validate_product_form
from .generator import SeedProduct, generate_drafts

logger = logging.getLogger(__name__)

CATEGORIES_TABLE = "categories"


@dataclass
class SeedResult:
    generated: int = 0
    created: list[dict[str, Any]] = field(default_factory=list)
    failed: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "generated": self.generated,
            "created": len(self.created),
            "failed": list(self.failed),
        }


def load_category_ids(repository: ProductRepository) -> dict[str, str]:
    rows = repository.client.select(CATEGORIES_TABLE, columns="id,name")
    return {str(row["name"]): str(row["id"]) for row in rows if row.get("name") and row.get("id")}


def seed_products(
    repository: ProductRepository | None,
    *,
    count: int = 100,
    seed: int | None = None,
    supplier_id: str | None = None,
    category_ids: Mapping[str, str] | None = None,
    dry_run: bool = False,
) -> SeedResult:
    if repository is None and not dry_run:
        raise ValueError("A backend repository is required unless dry_run is set.")

    if category_ids is None and repository is not None and not dry_run:
        category_ids = load_category_ids(repository)

    products: list[SeedProduct] = generate_drafts(count, seed=seed, category_ids=category_ids)
    result = SeedResult(generated=len(products))

    for row, product in enumerate(products, start=1):
        if dry_run:
            errors = validate_product_form(product.draft, product.auxiliary)
            if errors:
                result.failed.append({"row": row, "errors": errors})
            continue
        try:
            created = repository.create_product(product.draft, product.auxiliary, supplier_id=supplier_id)
        except DraftValidationError as exc:
            result.failed.append({"row": row, "errors": exc.errors})
            continue
        except BackendError as exc:
            logger.error("Seeding row %s failed: %s", row, exc.message)
            result.failed.append({"row": row, "error": exc.message})
            continue
        result.created.append(created)

    logger.info(
        "Seeded %s/%s products (%s failed)",
        len(result.created),
        result.generated,
        len(result.failed),
    )
    return result


__all__ = ["SeedResult", "load_category_ids", "seed_products"]
