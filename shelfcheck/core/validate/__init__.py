from .collections import validate_collections
from .fields import DRAFT_FIELDS, FORM_FIELDS, FormField, SIMPLE_FIELDS_KEY, validate_field
from .form import FormErrors, is_valid_draft, validate_product_form
from .report import ValidationIssue, ValidationReport, report_from_errors

__all__ = [
    "DRAFT_FIELDS",
    "FORM_FIELDS",
    "FormErrors",
    "FormField",
    "SIMPLE_FIELDS_KEY",
    "ValidationIssue",
    "ValidationReport",
    "is_valid_draft",
    "report_from_errors",
    "validate_collections",
    "validate_field",
    "validate_product_form",
]
