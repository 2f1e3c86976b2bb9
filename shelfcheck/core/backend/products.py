"""Persistence of validated product drafts through the REST backend."""

from datetime import datetime, timezone
import logging
import random
from typing import Any

from ..canonical import AuxiliaryData, ProductDraft, coerce_number, unique_sku, unique_slug
from ..validate import validate_product_form
from .client import RestClient

logger = logging.getLogger(__name__)

PRODUCTS_TABLE = "products"
VARIANTS_TABLE = "product_variants"
IMAGES_TABLE = "product_images"
FAQS_TABLE = "product_faqs"

_DEFAULT_DIMENSIONS = {"length": 0, "width": 0, "height": 0, "unit": "cm"}


class DraftValidationError(ValueError):
    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("Product draft failed validation.")
        self.errors = dict(errors)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _price(value: Any) -> float | None:
    amount = coerce_number(value)
    if amount is None:
        return None
    return float(amount)


def build_product_row(
    draft: ProductDraft,
    auxiliary: AuxiliaryData,
    *,
    supplier_id: str | None,
    slug: str,
    sku: str,
) -> dict[str, Any]:
    status = draft.status or "draft"
    title = str(draft.title).strip()
    return {
        "supplier_id": supplier_id,
        "sku": sku,
        "slug": slug,
        "title": title,
        "short_description": draft.short_description or "",
        "description": str(draft.description or ""),
        "brand_id": draft.brand_id or None,
        "category_id": draft.category_id,
        "base_price": _price(draft.base_price),
        "cost_price": _price(draft.cost_price),
        "compare_price": _price(draft.compare_price),
        "specifications": dict(draft.specifications or {}),
        "features": list(draft.features or []),
        "product_details": {"simple_fields": [item.to_dict() for item in auxiliary.simple_fields]},
        "warranty_months": draft.warranty_months or 12,
        "seo_title": draft.seo_title or title,
        "seo_description": draft.seo_description or draft.short_description,
        "status": status,
        "visibility": draft.visibility or "public",
        "is_featured": bool(draft.is_featured),
        "is_digital": bool(draft.is_digital),
        "requires_shipping": draft.requires_shipping is not False,
        "track_inventory": draft.track_inventory is not False,
        "weight": draft.weight or None,
        "dimensions": draft.dimensions or dict(_DEFAULT_DIMENSIONS),
        "tags": list(draft.tags or []),
        "published_at": _utcnow().isoformat() if status == "active" else None,
    }


class ProductRepository:
    def __init__(self, client: RestClient, *, rng: random.Random | None = None) -> None:
        self.client = client
        self._rng = rng or random.Random()

    def slug_exists(self, slug: str) -> bool:
        return self.client.exists(PRODUCTS_TABLE, "slug", slug)

    def sku_exists(self, sku: str) -> bool:
        return self.client.exists(PRODUCTS_TABLE, "sku", sku)

    def create_product(
        self,
        draft: ProductDraft,
        auxiliary: AuxiliaryData,
        *,
        supplier_id: str | None = None,
    ) -> dict[str, Any]:
        errors = validate_product_form(draft, auxiliary)
        if errors:
            raise DraftValidationError(errors)

        slug = draft.slug or unique_slug(draft.title, self.slug_exists)
        sku = draft.sku or unique_sku(self.sku_exists, self._rng)
        row = build_product_row(draft, auxiliary, supplier_id=supplier_id, slug=slug, sku=sku)

        created = self.client.insert(PRODUCTS_TABLE, row)
        if not created:
            raise ValueError("Backend returned no row for the created product.")
        product = created[0]
        product_id = product.get("id")
        logger.info("Created product %s (slug=%s sku=%s)", product_id, slug, sku)

        variant_rows = [
            {
                "product_id": product_id,
                "sku": variant.sku or unique_sku(self.sku_exists, self._rng),
                "title": variant.title or "",
                "price": _price(variant.price),
                "compare_price": _price(variant.compare_price),
                "cost_price": _price(variant.cost_price),
                "inventory_quantity": variant.inventory_quantity or 0,
                "image_url": variant.image_url,
                "is_active": variant.is_active,
                "option1_value": variant.option1_value or "",
                "option2_value": variant.option2_value or "",
                "option3_value": variant.option3_value or "",
            }
            for variant in auxiliary.variants
        ]
        if variant_rows:
            self.client.insert(VARIANTS_TABLE, variant_rows)

        image_rows = [
            {
                "product_id": product_id,
                "url": image.url,
                "alt_text": image.alt_text,
                "position": position,
                "is_primary": position == 0,
            }
            for position, image in enumerate(auxiliary.images)
        ]
        if image_rows:
            self.client.insert(IMAGES_TABLE, image_rows)

        faq_rows = [
            {
                "product_id": product_id,
                "question": faq.question.strip(),
                "answer": faq.answer.strip(),
                "is_active": faq.is_active,
                "position": position,
            }
            for position, faq in enumerate(auxiliary.faqs)
        ]
        if faq_rows:
            self.client.insert(FAQS_TABLE, faq_rows)

        return product


__all__ = [
    "DraftValidationError",
    "FAQS_TABLE",
    "IMAGES_TABLE",
    "PRODUCTS_TABLE",
    "ProductRepository",
    "VARIANTS_TABLE",
    "build_product_row",
]
