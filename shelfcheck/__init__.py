"""Public package entrypoint for the Shelfcheck engine.

This package provides a stable import surface for supplier product draft
validation, bulk import, seeding and migrations, plus optional frontend
adapters (CLI and FastAPI server).
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AuxiliaryData": ("shelfcheck.core", "AuxiliaryData"),
    "ProductDraft": ("shelfcheck.core", "ProductDraft"),
    "app": ("shelfcheck.server.main", "app"),
    "create_app": ("shelfcheck.server.main", "create_app"),
    "validate_field": ("shelfcheck.core", "validate_field"),
    "validate_product_form": ("shelfcheck.core", "validate_product_form"),
}

try:
    __version__ = version("shelfcheck")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "AuxiliaryData",
    "ProductDraft",
    "__version__",
    "app",
    "create_app",
    "validate_field",
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
