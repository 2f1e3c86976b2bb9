from .generator import CATEGORY_STRUCTURE, SeedProduct, generate_draft, generate_drafts
from .seeder import SeedResult, load_category_ids, seed_products

__all__ = [
    "CATEGORY_STRUCTURE",
    "SeedProduct",
    "SeedResult",
    "generate_draft",
    "generate_drafts",
    "load_category_ids",
    "seed_products",
]
