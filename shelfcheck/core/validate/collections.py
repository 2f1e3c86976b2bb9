"""Checks on the optional draft collections (images, variants, FAQs)."""

from ..canonical.entities import AuxiliaryData

MSG_IMAGES_REQUIRED = "At least one product image is required"


def validate_collections(auxiliary: AuxiliaryData, *, require_images: bool = False) -> dict[str, str]:
    errors: dict[str, str] = {}

    if require_images and not auxiliary.images:
        errors["images"] = MSG_IMAGES_REQUIRED

    variants_without_images = [
        variant
        for variant in auxiliary.variants
        if variant.is_active and not str(variant.image_url or "").strip()
    ]
    if variants_without_images:
        errors["variants"] = f"{len(variants_without_images)} active variant(s) missing images"

    incomplete_faqs = [
        faq
        for faq in auxiliary.faqs
        if faq.is_active and (not faq.question.strip() or not faq.answer.strip())
    ]
    if incomplete_faqs:
        errors["faqs"] = f"{len(incomplete_faqs)} FAQ(s) incomplete"

    return errors


__all__ = ["MSG_IMAGES_REQUIRED", "validate_collections"]
