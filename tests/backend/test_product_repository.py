from datetime import datetime, timezone

import pytest

from shelfcheck.core.backend import DraftValidationError, ProductRepository, RestClient, build_product_row
from shelfcheck.core.canonical import AuxiliaryData, ProductDraft
from tests.helpers._draft_builders import details, valid_draft
from tests.helpers._fake_backend import FakeResponse, FakeSession


class _Backend:
    def __init__(self, *, taken_slugs=(), taken_skus=()) -> None:
        self.taken = {"slug": set(taken_slugs), "sku": set(taken_skus)}
        self.inserted: dict[str, list] = {}

    def __call__(self, call: dict) -> FakeResponse:
        table = call["url"].rsplit("/", 1)[-1]
        if call["method"] == "GET":
            column = call["params"]["select"]
            value = call["params"][column].removeprefix("eq.")
            return FakeResponse(payload=[{column: value}] if value in self.taken[column] else [])
        rows = call["json"] if isinstance(call["json"], list) else [call["json"]]
        self.inserted.setdefault(table, []).extend(rows)
        created = [{"id": f"{table}-{index}", **row} for index, row in enumerate(rows, start=1)]
        return FakeResponse(status_code=201, payload=created)


def _repository(backend: _Backend) -> ProductRepository:
    return ProductRepository(RestClient("https://db.example.co", "key", session=FakeSession(backend)))


def test_invalid_drafts_are_never_sent_to_the_backend() -> None:
    backend = _Backend()
    repository = _repository(backend)

    with pytest.raises(DraftValidationError) as excinfo:
        repository.create_product(valid_draft(title=""), details())

    assert excinfo.value.errors == {"title": "Product title is required"}
    assert backend.inserted == {}


def test_create_product_generates_unique_slug_and_inserts_collections() -> None:
    backend = _Backend(taken_slugs={"steel-bottle"})
    repository = _repository(backend)
    draft = valid_draft(title="Steel Bottle", sku=None, base_price="499", compare_price="599", cost_price=None)
    auxiliary = AuxiliaryData(
        simple_fields=["Capacity: 1L"],
        variants=[{"title": "Blue", "price": "499", "image_url": "https://cdn.example.com/b.jpg"}],
        images=["https://cdn.example.com/1.jpg", "https://cdn.example.com/2.jpg"],
        faqs=[{"question": "Dishwasher safe? ", "answer": " Yes"}],
    )

    created = repository.create_product(draft, auxiliary, supplier_id="sup-1")

    assert created["id"] == "products-1"
    product_row = backend.inserted["products"][0]
    assert product_row["slug"] == "steel-bottle-1"
    assert product_row["sku"].startswith("SKU-")
    assert product_row["supplier_id"] == "sup-1"
    assert product_row["base_price"] == 499.0
    assert product_row["cost_price"] is None
    assert product_row["product_details"] == {"simple_fields": [{"key": "Capacity", "value": "1L"}]}

    variant_row = backend.inserted["product_variants"][0]
    assert variant_row["product_id"] == "products-1"
    assert variant_row["price"] == 499.0
    assert variant_row["sku"].startswith("SKU-")

    images = backend.inserted["product_images"]
    assert [(image["position"], image["is_primary"]) for image in images] == [(0, True), (1, False)]

    faq_row = backend.inserted["product_faqs"][0]
    assert (faq_row["question"], faq_row["answer"]) == ("Dishwasher safe?", "Yes")


def test_create_product_keeps_supplied_slug_and_sku() -> None:
    backend = _Backend()
    repository = _repository(backend)

    repository.create_product(valid_draft(slug="custom-slug", sku="MY-SKU"), details())

    row = backend.inserted["products"][0]
    assert (row["slug"], row["sku"]) == ("custom-slug", "MY-SKU")
    assert "product_variants" not in backend.inserted


def test_build_product_row_defaults(monkeypatch) -> None:
    fixed_now = datetime(2026, 2, 8, tzinfo=timezone.utc)
    monkeypatch.setattr("shelfcheck.core.backend.products._utcnow", lambda: fixed_now)
    draft = ProductDraft(title=" Mug ", category_id="kitchen", base_price=10, description="Ceramic", status="active")

    row = build_product_row(draft, AuxiliaryData(), supplier_id=None, slug="mug", sku="MUG-1")

    assert row["title"] == "Mug"
    assert row["seo_title"] == "Mug"
    assert row["warranty_months"] == 12
    assert row["visibility"] == "public"
    assert row["dimensions"] == {"length": 0, "width": 0, "height": 0, "unit": "cm"}
    assert row["published_at"] == fixed_now.isoformat()
    assert row["requires_shipping"] is True


def test_draft_rows_are_unpublished() -> None:
    row = build_product_row(valid_draft(), details(), supplier_id="s", slug="a", sku="b")

    assert row["status"] == "draft"
    assert row["published_at"] is None
