from typing import Any

from babel.numbers import get_currency_symbol

from ...config import get_settings
from ...core.canonical import AuxiliaryData, ProductDraft, coerce_number, format_decimal

_DEFAULT_DESCRIPTION_LIMITS = {
    "low": 80,
    "medium": 160,
    "high": 240,
}
_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}


def _truncate_description(value: Any, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _format_price(value: Any, currency: str | None) -> str:
    amount = coerce_number(value)
    if amount is None:
        if isinstance(value, str):
            return value.strip()
        return ""
    number = format_decimal(amount)

    symbol = ""
    currency_code = str(currency or "").upper()
    if currency_code:
        try:
            symbol = get_currency_symbol(currency_code, locale="en_US")
        except Exception:
            symbol = currency_code

    if symbol:
        if symbol.isalpha():
            return f"{number} {symbol}"
        return f"{symbol}{number}"
    return number


def draft_to_loggable(
    draft: ProductDraft,
    auxiliary: AuxiliaryData | None = None,
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
    currency: str | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    auxiliary = auxiliary or AuxiliaryData()
    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    currency = currency or settings.currency

    data = draft.to_dict()
    if level == "extrahigh":
        data.update(auxiliary.to_dict())
        return data

    if level == "high":
        data["description"] = _truncate_description(data.get("description"), limit=_DEFAULT_DESCRIPTION_LIMITS["high"])
        data["simple_fields"] = [item.to_dict() for item in auxiliary.simple_fields]
        return data

    summary = {
        "title": draft.title,
        "sku": draft.sku,
        "category_id": draft.category_id,
        "status": draft.status,
        "description": _truncate_description(draft.description, limit=_DEFAULT_DESCRIPTION_LIMITS["medium"]),
        "price": _format_price(draft.base_price, currency),
        "cost_price": _format_price(draft.cost_price, currency),
        "mrp": _format_price(draft.compare_price, currency),
        "details_count": len(auxiliary.simple_fields),
        "images": {"count": len(auxiliary.images)},
        "variants_count": len(auxiliary.variants),
        "faqs_count": len(auxiliary.faqs),
    }

    if level == "low":
        return {
            "title": summary["title"],
            "category_id": summary["category_id"],
            "price": summary["price"],
            "mrp": summary["mrp"],
            "details_count": summary["details_count"],
        }

    return summary
