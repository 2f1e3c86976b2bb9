"""Validation report types for product draft checks."""


from dataclasses import dataclass, field
from typing import Mapping

from . import fields as _fields
from .collections import MSG_IMAGES_REQUIRED
from .form import MSG_COMPARE_BELOW_BASE, MSG_SIMPLE_FIELDS_REQUIRED

_CODES_BY_MESSAGE: dict[str, str] = {
    _fields.MSG_TITLE_REQUIRED: "missing_title",
    _fields.MSG_TITLE_TOO_LONG: "title_too_long",
    _fields.MSG_TITLE_HTML: "title_has_html",
    _fields.MSG_SKU_CHARS: "invalid_sku_chars",
    _fields.MSG_SKU_TOO_LONG: "sku_too_long",
    _fields.MSG_CATEGORY_REQUIRED: "missing_category",
    _fields.MSG_BASE_PRICE: "invalid_base_price",
    _fields.MSG_COST_PRICE_NEGATIVE: "negative_cost_price",
    _fields.MSG_COMPARE_PRICE_NEGATIVE: "negative_compare_price",
    _fields.MSG_DESCRIPTION_REQUIRED: "missing_description",
    MSG_COMPARE_BELOW_BASE: "compare_price_below_base_price",
    MSG_SIMPLE_FIELDS_REQUIRED: "missing_simple_fields",
    MSG_IMAGES_REQUIRED: "missing_images",
}

# Collection messages carry counts, so they are looked up by field.
_CODES_BY_FIELD: dict[str, str] = {
    "variants": "variants_missing_images",
    "faqs": "incomplete_faqs",
}


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    severity: str = "error"
    field: str | None = None


@dataclass
class ValidationReport:
    valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    def errors(self) -> dict[str, str]:
        return {issue.field or issue.code: issue.message for issue in self.issues}

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "issues": [issue.__dict__ for issue in self.issues],
        }


def issue_code(field_name: str, message: str) -> str:
    code = _CODES_BY_MESSAGE.get(message) or _CODES_BY_FIELD.get(field_name)
    return code or f"invalid_{field_name}"


def report_from_errors(*error_maps: Mapping[str, str]) -> ValidationReport:
    issues: list[ValidationIssue] = []
    for errors in error_maps:
        for field_name, message in errors.items():
            issues.append(
                ValidationIssue(
                    code=issue_code(field_name, message),
                    message=message,
                    field=field_name,
                )
            )
    return ValidationReport(valid=not issues, issues=issues)


__all__ = ["ValidationIssue", "ValidationReport", "issue_code", "report_from_errors"]
