from typing import Any

from pydantic import AliasChoices, BaseModel, Field, model_validator


class DraftRequest(BaseModel):
    product: dict[str, Any]
    simple_fields: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("simpleFields", "simple_fields"),
    )
    variants: list[dict[str, Any]] = Field(
        default_factory=list,
        validation_alias=AliasChoices("productVariants", "variants"),
    )
    images: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("productImages", "images"),
    )
    faqs: list[dict[str, Any]] = Field(
        default_factory=list,
        validation_alias=AliasChoices("productFAQs", "faqs"),
    )
    require_images: bool = Field(default=False)

    @model_validator(mode="before")
    @classmethod
    def _compat_flat_product(cls, data: Any) -> Any:
        """Accept a flat draft object with the collections next to its fields."""
        if isinstance(data, dict) and "product" not in data:
            data = {**data, "product": dict(data)}
        return data

    def to_core_payload(self) -> dict[str, Any]:
        return {
            "product": dict(self.product),
            "simple_fields": list(self.simple_fields),
            "variants": list(self.variants),
            "images": list(self.images),
            "faqs": list(self.faqs),
        }


class BulkValidateRequest(BaseModel):
    products: list[dict[str, Any]] = Field(..., description="Draft payloads, at most 100 per request.")
