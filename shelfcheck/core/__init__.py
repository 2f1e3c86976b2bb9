"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and web frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AuxiliaryData": ("shelfcheck.core.canonical.entities", "AuxiliaryData"),
    "CoreConfig": ("shelfcheck.core.config", "CoreConfig"),
    "DraftResult": ("shelfcheck.core.api", "DraftResult"),
    "ProductDraft": ("shelfcheck.core.canonical.entities", "ProductDraft"),
    "config_from_env": ("shelfcheck.core.config", "config_from_env"),
    "create_product": ("shelfcheck.core.api", "create_product"),
    "migrate": ("shelfcheck.core.api", "migrate"),
    "parse_draft_payload": ("shelfcheck.core.api", "parse_draft_payload"),
    "seed": ("shelfcheck.core.api", "seed"),
    "validate_collections": ("shelfcheck.core.validate.collections", "validate_collections"),
    "validate_csv": ("shelfcheck.core.api", "validate_csv"),
    "validate_draft": ("shelfcheck.core.api", "validate_draft"),
    "validate_drafts": ("shelfcheck.core.api", "validate_drafts"),
    "validate_field": ("shelfcheck.core.validate.fields", "validate_field"),
    "validate_payload": ("shelfcheck.core.api", "validate_payload"),
    "validate_product_form": ("shelfcheck.core.validate.form", "validate_product_form"),
}

__all__ = [
    "AuxiliaryData",
    "CoreConfig",
    "DraftResult",
    "ProductDraft",
    "config_from_env",
    "create_product",
    "migrate",
    "parse_draft_payload",
    "seed",
    "validate_collections",
    "validate_csv",
    "validate_draft",
    "validate_drafts",
    "validate_field",
    "validate_payload",
    "validate_product_form",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
