"""Single-field validation rules for product drafts.

Each rule maps a raw form value to ``None`` (valid) or the literal message
rendered next to the form control. Checks inside a rule run in order and stop
at the first failure.
"""

import re
from typing import Any, Callable, Literal

from ..canonical.helpers import coerce_number

FormField = Literal[
    "title",
    "sku",
    "category_id",
    "base_price",
    "cost_price",
    "compare_price",
    "description",
    "simple_fields",
]

DRAFT_FIELDS: tuple[str, ...] = (
    "title",
    "sku",
    "category_id",
    "base_price",
    "cost_price",
    "compare_price",
    "description",
)
SIMPLE_FIELDS_KEY = "simple_fields"
FORM_FIELDS: tuple[str, ...] = DRAFT_FIELDS + (SIMPLE_FIELDS_KEY,)

TITLE_MAX_LENGTH = 200
SKU_MAX_LENGTH = 50

MSG_TITLE_REQUIRED = "Product title is required"
MSG_TITLE_TOO_LONG = "Title must be less than 200 characters"
MSG_TITLE_HTML = "Title cannot contain HTML tags"
MSG_SKU_CHARS = "SKU can only contain letters, numbers, hyphens, and underscores"
MSG_SKU_TOO_LONG = "SKU must be less than 50 characters"
MSG_CATEGORY_REQUIRED = "Category is required"
MSG_BASE_PRICE = "Selling price must be greater than 0"
MSG_COST_PRICE_NEGATIVE = "Cost price cannot be negative"
MSG_COMPARE_PRICE_NEGATIVE = "MRP cannot be negative"
MSG_DESCRIPTION_REQUIRED = "Product description is required"

_SKU_RE = re.compile(r"[A-Za-z0-9_-]*")
_HTML_CHARS = ("<", ">")

FieldRule = Callable[[Any], "str | None"]


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return not str(value).strip()


def validate_title(value: Any) -> str | None:
    if _is_blank(value):
        return MSG_TITLE_REQUIRED
    text = str(value)
    if len(text) > TITLE_MAX_LENGTH:
        return MSG_TITLE_TOO_LONG
    if any(char in text for char in _HTML_CHARS):
        return MSG_TITLE_HTML
    return None


def validate_sku(value: Any) -> str | None:
    if value is None or value == "":
        return None
    text = str(value)
    if not _SKU_RE.fullmatch(text):
        return MSG_SKU_CHARS
    if len(text) > SKU_MAX_LENGTH:
        return MSG_SKU_TOO_LONG
    return None


def validate_category_id(value: Any) -> str | None:
    if value is None or value == "":
        return MSG_CATEGORY_REQUIRED
    return None


def validate_base_price(value: Any) -> str | None:
    amount = coerce_number(value)
    if amount is None or amount <= 0:
        return MSG_BASE_PRICE
    return None


def validate_cost_price(value: Any) -> str | None:
    amount = coerce_number(value)
    if amount is not None and amount < 0:
        return MSG_COST_PRICE_NEGATIVE
    return None


def validate_compare_price(value: Any) -> str | None:
    amount = coerce_number(value)
    if amount is not None and amount < 0:
        return MSG_COMPARE_PRICE_NEGATIVE
    return None


def validate_description(value: Any) -> str | None:
    if _is_blank(value):
        return MSG_DESCRIPTION_REQUIRED
    return None


FIELD_RULES: dict[str, FieldRule] = {
    "title": validate_title,
    "sku": validate_sku,
    "category_id": validate_category_id,
    "base_price": validate_base_price,
    "cost_price": validate_cost_price,
    "compare_price": validate_compare_price,
    "description": validate_description,
}


def validate_field(field_name: str, value: Any) -> str | None:
    rule = FIELD_RULES.get(field_name)
    if rule is None:
        return None
    return rule(value)


__all__ = [
    "DRAFT_FIELDS",
    "FIELD_RULES",
    "FORM_FIELDS",
    "FormField",
    "SIMPLE_FIELDS_KEY",
    "SKU_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    "validate_base_price",
    "validate_category_id",
    "validate_compare_price",
    "validate_cost_price",
    "validate_description",
    "validate_field",
    "validate_sku",
    "validate_title",
]
