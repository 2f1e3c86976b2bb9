"""Whole-draft validation: field rules, price ordering and required details."""

from typing import Any, Mapping

from ..canonical.entities import AuxiliaryData, ProductDraft, SimpleField
from ..canonical.helpers import coerce_number
from .fields import DRAFT_FIELDS, SIMPLE_FIELDS_KEY, validate_field

MSG_COMPARE_BELOW_BASE = "MRP should be greater than or equal to selling price"
MSG_SIMPLE_FIELDS_REQUIRED = "Product details are required"

FormErrors = dict[str, str]


def _field_values(draft: ProductDraft | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(draft, ProductDraft):
        return {name: getattr(draft, name) for name in DRAFT_FIELDS}
    return {name: draft.get(name) for name in DRAFT_FIELDS}


def _simple_fields(auxiliary: AuxiliaryData | Mapping[str, Any] | None) -> list[SimpleField]:
    if auxiliary is None:
        return []
    if isinstance(auxiliary, AuxiliaryData):
        return list(auxiliary.simple_fields)
    # Same normalization as parsed payloads, so blank entries never count as details.
    for key in ("simpleFields", SIMPLE_FIELDS_KEY):
        value = auxiliary.get(key)
        if isinstance(value, (list, tuple)) and value:
            return AuxiliaryData(simple_fields=list(value)).simple_fields
    return []


def validate_product_form(
    draft: ProductDraft | Mapping[str, Any],
    auxiliary: AuxiliaryData | Mapping[str, Any] | None = None,
) -> FormErrors:
    values = _field_values(draft)
    errors: FormErrors = {}

    for name in DRAFT_FIELDS:
        message = validate_field(name, values[name])
        if message is not None:
            errors[name] = message

    # Ordering only runs when both prices passed their own rules; an invalid
    # selling price surfaces alone.
    if "compare_price" not in errors and "base_price" not in errors:
        compare_price = coerce_number(values["compare_price"])
        base_price = coerce_number(values["base_price"])
        if compare_price and base_price and compare_price < base_price:
            errors["compare_price"] = MSG_COMPARE_BELOW_BASE

    if not _simple_fields(auxiliary):
        errors[SIMPLE_FIELDS_KEY] = MSG_SIMPLE_FIELDS_REQUIRED

    return errors


def is_valid_draft(
    draft: ProductDraft | Mapping[str, Any],
    auxiliary: AuxiliaryData | Mapping[str, Any] | None = None,
) -> bool:
    return not validate_product_form(draft, auxiliary)


__all__ = [
    "FormErrors",
    "MSG_COMPARE_BELOW_BASE",
    "MSG_SIMPLE_FIELDS_REQUIRED",
    "is_valid_draft",
    "validate_product_form",
]
