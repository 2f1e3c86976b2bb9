from decimal import Decimal
import random

import pytest

from shelfcheck.core.canonical import (
    DRAFT_FORM_DEFAULTS,
    AuxiliaryData,
    DraftImage,
    ProductDraft,
    SimpleField,
    coerce_number,
    format_decimal,
    generate_sku,
    generate_slug,
    random_sku,
    unique_slug,
)
from shelfcheck.core.validate import validate_field


def test_from_payload_ignores_unknown_keys_and_keeps_raw_values() -> None:
    draft = ProductDraft.from_payload(
        {"title": " Mug ", "base_price": "12.50", "unknown": "x", "tags": None},
    )

    assert draft.title == " Mug "
    assert draft.base_price == "12.50"
    assert draft.tags == []
    assert not hasattr(draft, "unknown")


def test_form_defaults_apply_only_when_passed() -> None:
    plain = ProductDraft.from_payload({"title": "Mug"})
    with_defaults = ProductDraft.from_payload({"title": "Mug", "base_price": 9}, defaults=DRAFT_FORM_DEFAULTS)

    assert plain.status is None
    assert plain.base_price is None
    assert with_defaults.status == "draft"
    assert with_defaults.base_price == 9
    assert with_defaults.cost_price == 0


def test_from_payload_rejects_non_objects() -> None:
    with pytest.raises(ValueError):
        ProductDraft.from_payload(["not", "a", "dict"])  # type: ignore[arg-type]


def test_auxiliary_from_payload_accepts_form_and_snake_case_keys() -> None:
    auxiliary = AuxiliaryData.from_payload(
        {
            "simpleFields": ["Weight: 500g", {"key": "Color", "value": "Red"}, ["Origin", "India"], "  "],
            "productImages": ["https://cdn.example.com/1.jpg", {"url": ""}],
            "faqs": [{"question": "Q?", "answer": "A"}],
        }
    )

    assert auxiliary.simple_fields == [
        SimpleField(key="Weight", value="500g"),
        SimpleField(key="Color", value="Red"),
        SimpleField(key="Origin", value="India"),
    ]
    assert auxiliary.images == [DraftImage(url="https://cdn.example.com/1.jpg")]
    assert auxiliary.faqs[0].is_active is True
    assert auxiliary.variants == []


def test_auxiliary_rejects_malformed_variants() -> None:
    with pytest.raises(ValueError):
        AuxiliaryData(variants=["not-a-variant"])


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (10, Decimal("10")),
        (0.1, Decimal("0.1")),
        ("  42.5 ", Decimal("42.5")),
        ("$ 1,000", Decimal("1000")),
        ("₹2,499.00", Decimal("2499.00")),
        ("-3", Decimal("-3")),
        (Decimal("7.25"), Decimal("7.25")),
    ],
)
def test_coerce_number_accepts_numbers_and_numeric_strings(value, expected) -> None:
    assert coerce_number(value) == expected


@pytest.mark.parametrize("value", [None, "", "abc", "12abc", True, False, float("nan"), float("inf"), [], "-"])
def test_coerce_number_treats_non_numeric_input_as_absent(value) -> None:
    assert coerce_number(value) is None


def test_format_decimal_trims_trailing_zeros() -> None:
    assert format_decimal(Decimal("12.50")) == "12.5"
    assert format_decimal(Decimal("100.00")) == "100"
    assert format_decimal(None) == ""


def test_slug_generation_and_uniqueness() -> None:
    taken = {"cotton-t-shirt", "cotton-t-shirt-1"}

    assert generate_slug("Cotton T-Shirt!") == "cotton-t-shirt"
    assert unique_slug("Cotton T-Shirt!", taken.__contains__) == "cotton-t-shirt-2"
    assert unique_slug("", lambda slug: False) == "product"


def test_generated_skus_pass_the_sku_rule() -> None:
    sku = generate_sku("Men's Clothing", "Linen Shirt (Slim)", "ab12cd")

    assert sku == "MEN-LINENS-AB12CD"
    assert validate_field("sku", sku) is None


def test_random_sku_shape() -> None:
    sku = random_sku(random.Random(7), now_ms=36)

    assert sku.startswith("SKU-10-")
    assert len(sku.split("-")[-1]) == 4
    assert validate_field("sku", sku) is None


def test_simple_field_pairs_with_a_missing_key() -> None:
    auxiliary = AuxiliaryData(simple_fields=[[None, "x"], [None, None], ("Size", None)])

    assert auxiliary.simple_fields == [SimpleField(key="", value="x"), SimpleField(key="Size", value="")]
