from .entities import (
    DRAFT_FORM_DEFAULTS,
    AuxiliaryData,
    DraftFaq,
    DraftImage,
    DraftVariant,
    ProductDraft,
    SimpleField,
)
from .helpers import (
    clean_text,
    coerce_number,
    format_decimal,
    generate_sku,
    generate_slug,
    ordered_unique_strings,
    random_sku,
    unique_sku,
    unique_slug,
)

__all__ = [
    "DRAFT_FORM_DEFAULTS",
    "AuxiliaryData",
    "DraftFaq",
    "DraftImage",
    "DraftVariant",
    "ProductDraft",
    "SimpleField",
    "clean_text",
    "coerce_number",
    "format_decimal",
    "generate_sku",
    "generate_slug",
    "ordered_unique_strings",
    "random_sku",
    "unique_sku",
    "unique_slug",
]
