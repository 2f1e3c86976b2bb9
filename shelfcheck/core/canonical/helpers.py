from decimal import Decimal, InvalidOperation
import math
import random
import re
import time
from typing import Any, Callable, Iterable

from slugify import slugify

_MONEY_SANITIZE_RE = re.compile(r"^[\$₹]\s*")
_THOUSANDS_RE = re.compile(r",(?=\d{3}(?:\D|$))")
_SKU_TOKEN_RE = re.compile(r"[^A-Za-z0-9]")
_BASE36_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def coerce_number(value: Any) -> Decimal | None:
    """Coerce loose form input into a ``Decimal``.

    Numbers pass through, numeric strings are parsed after stripping a leading
    currency symbol and thousands separators. Anything else (including
    booleans, blank strings, NaN and infinities) is treated as absent.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        return value if value.is_finite() else None

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return Decimal(str(value))

    if isinstance(value, str):
        cleaned = _MONEY_SANITIZE_RE.sub("", value.strip())
        cleaned = _THOUSANDS_RE.sub("", cleaned)
        if cleaned in {"", "-", ".", "-.", "+"}:
            return None
        try:
            parsed = Decimal(cleaned)
        except InvalidOperation:
            return None
        return parsed if parsed.is_finite() else None

    return None


def format_decimal(value: Decimal | None) -> str:
    if value is None:
        return ""
    if not value.is_finite():
        return ""

    text = format(value.normalize(), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"", "-0"}:
        return "0"
    return text


def clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def ordered_unique_strings(items: Iterable[Any]) -> list[str]:
    values: list[str] = []
    seen: set[str] = set()
    for item in items:
        cleaned = clean_text(item)
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        values.append(cleaned)
    return values


def generate_slug(title: str | None) -> str:
    return slugify(str(title or ""), separator="-")


def unique_slug(title: str | None, exists: Callable[[str], bool]) -> str:
    base_slug = generate_slug(title) or "product"
    slug = base_slug
    counter = 1
    while exists(slug):
        slug = f"{base_slug}-{counter}"
        counter += 1
    return slug


def _base36(number: int) -> str:
    if number <= 0:
        return "0"
    digits: list[str] = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def generate_sku(category_name: str, product_name: str, suffix: str) -> str:
    category_code = _SKU_TOKEN_RE.sub("", category_name)[:3].upper()
    product_code = _SKU_TOKEN_RE.sub("", product_name)[:6].upper()
    parts = [part for part in (category_code, product_code, _SKU_TOKEN_RE.sub("", suffix).upper()) if part]
    return "-".join(parts)


def random_sku(rng: random.Random | None = None, *, now_ms: int | None = None) -> str:
    rng = rng or random.Random()
    timestamp = _base36(now_ms if now_ms is not None else int(time.time() * 1000))
    tail = "".join(rng.choice(_BASE36_ALPHABET) for _ in range(4))
    return f"SKU-{timestamp}-{tail}"


def unique_sku(exists: Callable[[str], bool], rng: random.Random | None = None) -> str:
    rng = rng or random.Random()
    while True:
        sku = random_sku(rng)
        if not exists(sku):
            return sku
