from .client import BackendError, RestClient, http_session
from .products import DraftValidationError, ProductRepository, build_product_row

__all__ = [
    "BackendError",
    "DraftValidationError",
    "ProductRepository",
    "RestClient",
    "build_product_row",
    "http_session",
]
