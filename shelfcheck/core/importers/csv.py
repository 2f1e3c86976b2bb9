import csv
import io
from typing import Any, Iterable

from ..canonical import AuxiliaryData, ProductDraft, SimpleField, ordered_unique_strings

MAX_CSV_UPLOAD_BYTES = 5 * 1024 * 1024
MAX_BATCH_SIZE = 100

REQUIRED_HEADERS = ("title", "category_id", "base_price", "description")
OPTIONAL_HEADERS = (
    "sku",
    "cost_price",
    "compare_price",
    "short_description",
    "brand_id",
    "status",
    "tags",
    "details",
)

DraftRow = tuple[ProductDraft, AuxiliaryData]


def decode_csv_bytes(data: bytes) -> str:
    for encoding in ("utf-8-sig", "utf-8"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError("CSV must be UTF-8 encoded.")


def csv_rows(csv_text: str) -> tuple[list[str], list[dict[str, str]]]:
    reader = csv.DictReader(io.StringIO(csv_text))
    headers = [str(header or "").strip() for header in reader.fieldnames or []]
    if not any(headers):
        raise ValueError("CSV header row is required.")
    rows: list[dict[str, str]] = []
    for row in reader:
        rows.append({str(key or "").strip(): str(value or "").strip() for key, value in row.items()})
    if not rows:
        raise ValueError("CSV must include at least one data row.")
    return headers, rows


def require_headers(headers: Iterable[str], required_headers: Iterable[str]) -> None:
    available = {str(header or "").strip() for header in headers}
    missing = [header for header in required_headers if header not in available]
    if missing:
        raise ValueError(f"Missing required CSV headers: {', '.join(missing)}")


def parse_details(value: Any) -> list[SimpleField]:
    details: list[SimpleField] = []
    for chunk in str(value or "").split("|"):
        key, _, detail = chunk.partition(":")
        if not key.strip() and not detail.strip():
            continue
        details.append(SimpleField(key=key.strip(), value=detail.strip()))
    return details


def split_tokens(value: Any) -> list[str]:
    return ordered_unique_strings(str(value or "").split(","))


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    return value or None


def draft_from_row(row: dict[str, str]) -> DraftRow:
    draft = ProductDraft(
        title=row.get("title", ""),
        sku=_blank_to_none(row.get("sku")),
        category_id=row.get("category_id", ""),
        base_price=_blank_to_none(row.get("base_price")),
        cost_price=_blank_to_none(row.get("cost_price")),
        compare_price=_blank_to_none(row.get("compare_price")),
        description=row.get("description", ""),
        short_description=_blank_to_none(row.get("short_description")),
        brand_id=_blank_to_none(row.get("brand_id")),
        status=row.get("status") or "draft",
        tags=split_tokens(row.get("tags")),
    )
    auxiliary = AuxiliaryData(simple_fields=parse_details(row.get("details")))
    return draft, auxiliary


def import_drafts_from_csv(csv_bytes: bytes) -> list[DraftRow]:
    if not csv_bytes:
        raise ValueError("CSV file is empty.")
    if len(csv_bytes) > MAX_CSV_UPLOAD_BYTES:
        raise ValueError("CSV file exceeds 5 MB limit.")

    headers, rows = csv_rows(decode_csv_bytes(csv_bytes))
    require_headers(headers, REQUIRED_HEADERS)
    if len(rows) > MAX_BATCH_SIZE:
        raise ValueError(f"Cannot process more than {MAX_BATCH_SIZE} products at once")
    return [draft_from_row(row) for row in rows]


__all__ = [
    "DraftRow",
    "MAX_BATCH_SIZE",
    "MAX_CSV_UPLOAD_BYTES",
    "OPTIONAL_HEADERS",
    "REQUIRED_HEADERS",
    "csv_rows",
    "decode_csv_bytes",
    "draft_from_row",
    "import_drafts_from_csv",
    "parse_details",
    "require_headers",
    "split_tokens",
]
