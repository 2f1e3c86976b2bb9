from dataclasses import dataclass, field, fields
from typing import Any, Mapping

DraftStatus = str

DRAFT_FORM_DEFAULTS: dict[str, Any] = {
    "status": "draft",
    "base_price": 0,
    "cost_price": 0,
    "compare_price": 0,
}


@dataclass
class SimpleField:
    key: str
    value: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "value": self.value}


@dataclass
class DraftVariant:
    sku: str | None = None
    title: str | None = None
    price: Any = None
    compare_price: Any = None
    cost_price: Any = None
    inventory_quantity: int = 0
    image_url: str | None = None
    is_active: bool = True
    option1_value: str = ""
    option2_value: str = ""
    option3_value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass
class DraftImage:
    url: str
    alt_text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "alt_text": self.alt_text}


@dataclass
class DraftFaq:
    question: str = ""
    answer: str = ""
    is_active: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"question": self.question, "answer": self.answer, "is_active": self.is_active}


@dataclass
class AuxiliaryData:
    """Collections attached to a draft and validated apart from its fields."""

    simple_fields: list[SimpleField] = field(default_factory=list)
    variants: list[DraftVariant] = field(default_factory=list)
    images: list[DraftImage] = field(default_factory=list)
    faqs: list[DraftFaq] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.simple_fields = [_simple_field_from_payload(item) for item in self.simple_fields or []]
        self.simple_fields = [item for item in self.simple_fields if item is not None]
        self.variants = [_variant_from_payload(item) for item in self.variants or []]
        self.images = [image for image in (_image_from_payload(item) for item in self.images or []) if image]
        self.faqs = [_faq_from_payload(item) for item in self.faqs or []]

    @classmethod
    def from_payload(cls, data: Mapping[str, Any] | None) -> "AuxiliaryData":
        data = data or {}
        return cls(
            simple_fields=_first_list(data, "simpleFields", "simple_fields"),
            variants=_first_list(data, "productVariants", "variants"),
            images=_first_list(data, "productImages", "images"),
            faqs=_first_list(data, "productFAQs", "faqs"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "simple_fields": [item.to_dict() for item in self.simple_fields],
            "variants": [item.to_dict() for item in self.variants],
            "images": [item.to_dict() for item in self.images],
            "faqs": [item.to_dict() for item in self.faqs],
        }


@dataclass
class ProductDraft:
    """A product record as authored in the supplier form, before persistence.

    Values are kept exactly as received. Prices may be numbers, numeric
    strings or ``None``; validators coerce them.
    """

    title: Any = None
    sku: Any = None
    category_id: Any = None
    base_price: Any = None
    cost_price: Any = None
    compare_price: Any = None
    description: Any = None
    short_description: str | None = None
    brand_id: str | None = None
    status: DraftStatus | None = None
    visibility: str = "public"
    slug: str | None = None
    tags: list[str] = field(default_factory=list)
    specifications: dict[str, Any] = field(default_factory=dict)
    features: list[str] = field(default_factory=list)
    is_featured: bool = False
    is_digital: bool = False
    requires_shipping: bool = True
    track_inventory: bool = True
    weight: Any = None
    dimensions: dict[str, Any] | None = None
    warranty_months: int = 12
    seo_title: str | None = None
    seo_description: str | None = None

    @classmethod
    def from_payload(
        cls,
        data: Mapping[str, Any],
        *,
        defaults: Mapping[str, Any] | None = None,
    ) -> "ProductDraft":
        if not isinstance(data, Mapping):
            raise ValueError("Product payload must be an object.")
        merged: dict[str, Any] = dict(defaults or {})
        merged.update(data)
        known = {item.name for item in fields(cls)}
        kwargs = {key: value for key, value in merged.items() if key in known}
        if kwargs.get("tags") is None:
            kwargs.pop("tags", None)
        if kwargs.get("specifications") is None:
            kwargs.pop("specifications", None)
        if kwargs.get("features") is None:
            kwargs.pop("features", None)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


def _first_list(data: Mapping[str, Any], *keys: str) -> list[Any]:
    for key in keys:
        value = data.get(key)
        if isinstance(value, list):
            return value
    return []


def _simple_field_from_payload(item: Any) -> SimpleField | None:
    if isinstance(item, SimpleField):
        return item
    if isinstance(item, Mapping):
        key = str(item.get("key") or item.get("name") or "").strip()
        value = str(item.get("value") or "").strip()
        if not key and not value:
            return None
        return SimpleField(key=key, value=value)
    if isinstance(item, (list, tuple)) and item:
        key = str(item[0]).strip() if item[0] is not None else ""
        value = str(item[1]).strip() if len(item) > 1 and item[1] is not None else ""
        if not key and not value:
            return None
        return SimpleField(key=key, value=value)
    if isinstance(item, str):
        key, _, value = item.partition(":")
        if not key.strip() and not value.strip():
            return None
        return SimpleField(key=key.strip(), value=value.strip())
    return None


def _variant_from_payload(item: Any) -> DraftVariant:
    if isinstance(item, DraftVariant):
        return item
    if not isinstance(item, Mapping):
        raise ValueError("Variant entries must be objects.")
    known = {entry.name for entry in fields(DraftVariant)}
    kwargs = {key: value for key, value in item.items() if key in known}
    if "is_active" in kwargs:
        kwargs["is_active"] = bool(kwargs["is_active"])
    return DraftVariant(**kwargs)


def _image_from_payload(item: Any) -> DraftImage | None:
    if isinstance(item, DraftImage):
        return item
    if isinstance(item, str):
        url = item.strip()
        return DraftImage(url=url) if url else None
    if isinstance(item, Mapping):
        url = str(item.get("url") or item.get("image_url") or "").strip()
        if not url:
            return None
        return DraftImage(url=url, alt_text=str(item.get("alt_text") or "").strip())
    return None


def _faq_from_payload(item: Any) -> DraftFaq:
    if isinstance(item, DraftFaq):
        return item
    if not isinstance(item, Mapping):
        raise ValueError("FAQ entries must be objects.")
    return DraftFaq(
        question=str(item.get("question") or ""),
        answer=str(item.get("answer") or ""),
        is_active=bool(item.get("is_active", True)),
    )
