from typing import Any

from shelfcheck.core.canonical import AuxiliaryData, ProductDraft, SimpleField


def valid_fields(**overrides: Any) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "title": "Valid Product Title",
        "sku": "VALID-SKU",
        "category_id": "electronics",
        "base_price": 100,
        "cost_price": 50,
        "compare_price": 120,
        "description": "Valid description",
    }
    fields.update(overrides)
    return fields


def valid_draft(**overrides: Any) -> ProductDraft:
    return ProductDraft(**valid_fields(**overrides))


def details(*entries: str) -> AuxiliaryData:
    return AuxiliaryData(simple_fields=[SimpleField(key=entry) for entry in entries or ("field1",)])


def valid_payload(**overrides: Any) -> dict[str, Any]:
    return {
        "product": valid_fields(**overrides),
        "simpleFields": [{"key": "Weight", "value": "500g"}],
    }
