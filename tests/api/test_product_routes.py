from dataclasses import replace

from fastapi.testclient import TestClient

from shelfcheck.config import get_settings
from shelfcheck.core.backend import BackendError
from shelfcheck.server.main import app
from tests.helpers._draft_builders import valid_fields, valid_payload


client = TestClient(app)


class _FakeRepository:
    def __init__(self, *, error: Exception | None = None) -> None:
        self.calls: list[tuple] = []
        self.error = error

    def create_product(self, draft, auxiliary, *, supplier_id=None) -> dict:
        self.calls.append((draft, auxiliary, supplier_id))
        if self.error is not None:
            raise self.error
        return {"id": "p-1", "title": draft.title}


def test_health() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_validate_reports_errors_without_failing_the_request() -> None:
    payload = {
        "product": {
            "title": "Valid Product Title",
            "sku": "VALID-SKU",
            "category_id": "electronics",
            "base_price": 100,
            "cost_price": 50,
            "compare_price": 80,
            "description": "Valid description",
        },
        "simpleFields": ["field1"],
    }

    response = client.post("/api/v1/products/validate", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert body["errors"] == {"compare_price": "MRP should be greater than or equal to selling price"}
    assert body["issues"][0]["code"] == "compare_price_below_base_price"


def test_validate_accepts_flat_payload_with_string_prices() -> None:
    payload = {**valid_fields(base_price="100", compare_price="100"), "simple_fields": ["Weight: 1kg"]}

    response = client.post("/api/v1/products/validate", json=payload)

    assert response.status_code == 200
    assert response.json()["valid"] is True
    assert response.json()["errors"] == {}


def test_validate_reports_collection_errors_separately() -> None:
    payload = {
        **valid_payload(),
        "productFAQs": [{"question": "Warranty?", "answer": ""}],
        "require_images": True,
    }

    body = client.post("/api/v1/products/validate", json=payload).json()

    assert body["valid"] is True
    assert body["collection_errors"] == {
        "images": "At least one product image is required",
        "faqs": "1 FAQ(s) incomplete",
    }


def test_create_rejects_invalid_drafts_before_touching_the_backend(monkeypatch) -> None:
    repository = _FakeRepository()
    monkeypatch.setattr("shelfcheck.server.routers.api.build_repository", lambda config: repository)

    response = client.post("/api/v1/products", json=valid_payload(title=""))

    assert response.status_code == 422
    assert response.json()["detail"] == {"errors": {"title": "Product title is required"}}
    assert repository.calls == []


def test_create_without_backend_configuration_is_unavailable(monkeypatch) -> None:
    settings = get_settings()
    monkeypatch.setattr(
        "shelfcheck.server.routers.api.settings",
        replace(settings, supabase_url=None, supabase_service_key=None),
    )

    response = client.post("/api/v1/products", json=valid_payload())

    assert response.status_code == 503
    assert "SUPABASE_URL" in response.json()["detail"]


def test_create_persists_valid_drafts(monkeypatch) -> None:
    repository = _FakeRepository()
    monkeypatch.setattr("shelfcheck.server.routers.api.build_repository", lambda config: repository)

    response = client.post("/api/v1/products", json=valid_payload())

    assert response.status_code == 201
    assert response.json() == {"id": "p-1", "title": "Valid Product Title"}
    assert len(repository.calls) == 1


def test_create_maps_backend_errors_to_bad_gateway(monkeypatch) -> None:
    repository = _FakeRepository(error=BackendError("permission denied", status_code=401))
    monkeypatch.setattr("shelfcheck.server.routers.api.build_repository", lambda config: repository)

    response = client.post("/api/v1/products", json=valid_payload())

    assert response.status_code == 502
    assert response.json()["detail"] == "Backend error: permission denied"


def test_bulk_validate_returns_per_row_results() -> None:
    response = client.post(
        "/api/v1/products/bulk/validate",
        json={"products": [valid_payload(), valid_payload(sku="TEST@123")]},
    )

    assert response.status_code == 200
    body = response.json()
    assert (body["total"], body["valid"], body["invalid"]) == (2, 1, 1)
    assert body["results"][1]["row"] == 2
    assert body["results"][1]["errors"] == {
        "sku": "SKU can only contain letters, numbers, hyphens, and underscores"
    }


def test_bulk_validate_rejects_more_than_one_hundred_products() -> None:
    response = client.post("/api/v1/products/bulk/validate", json={"products": [valid_payload()] * 101})

    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot process more than 100 products at once"


def test_bulk_csv_upload() -> None:
    csv_text = (
        "title,category_id,base_price,description,details\n"
        "Mug,kitchen,10,Ceramic mug,Size: M\n"
        "Bowl,,10,Ceramic bowl,Size: L\n"
    )

    response = client.post(
        "/api/v1/products/bulk/csv",
        files={"file": ("products.csv", csv_text.encode("utf-8"), "text/csv")},
    )

    assert response.status_code == 200
    body = response.json()
    assert (body["valid"], body["invalid"]) == (1, 1)
    assert body["results"][1]["errors"] == {"category_id": "Category is required"}


def test_bulk_csv_upload_reports_malformed_files() -> None:
    response = client.post(
        "/api/v1/products/bulk/csv",
        files={"file": ("products.csv", b"title\nMug\n", "text/csv")},
    )

    assert response.status_code == 422
    assert "Missing required CSV headers" in response.json()["detail"]
