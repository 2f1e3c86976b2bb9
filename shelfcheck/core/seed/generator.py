"""Synthetic product drafts for seeding development databases."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping

from faker import Faker

from ..canonical import AuxiliaryData, DraftFaq, DraftImage, ProductDraft, SimpleField, generate_sku, generate_slug

CATEGORY_STRUCTURE: dict[str, list[str]] = {
    "Electronics": [
        "Smartphones & Tablets",
        "Laptops & Computers",
        "Audio & Headphones",
        "Cameras & Photography",
        "Gaming & Consoles",
        "Smart Home & IoT",
        "Wearables & Accessories",
    ],
    "Fashion & Apparel": [
        "Men's Clothing",
        "Women's Clothing",
        "Kids & Baby",
        "Footwear",
        "Bags & Accessories",
        "Jewelry & Watches",
        "Sportswear & Activewear",
    ],
    "Home & Garden": [
        "Furniture & Decor",
        "Kitchen & Dining",
        "Bedding & Bath",
        "Home Appliances",
        "Garden & Outdoor",
        "Home Improvement",
        "Storage & Organization",
    ],
    "Sports & Outdoors": [
        "Fitness & Exercise",
        "Camping & Hiking",
        "Water Sports",
        "Team Sports",
        "Cycling & Biking",
        "Winter Sports",
        "Outdoor Recreation",
    ],
    "Books & Media": [
        "Fiction & Literature",
        "Non-Fiction & Educational",
        "Children's Books",
        "Comics & Graphic Novels",
        "Movies & TV",
        "Music & Audio",
        "Magazines & Periodicals",
    ],
    "Beauty & Personal Care": [
        "Skincare",
        "Makeup & Cosmetics",
        "Hair Care",
        "Fragrances & Perfumes",
        "Personal Care & Hygiene",
        "Tools & Accessories",
        "Men's Grooming",
    ],
    "Toys & Games": [
        "Educational Toys",
        "Board Games & Puzzles",
        "Action Figures & Collectibles",
        "Dolls & Plush Toys",
        "Video Games & Accessories",
        "Outdoor & Ride-on Toys",
        "Arts & Crafts",
    ],
    "Food & Beverages": [
        "Snacks & Confectionery",
        "Beverages",
        "Breakfast Foods",
        "Cooking Ingredients",
        "Organic & Natural Foods",
        "International Cuisine",
        "Health & Dietary Foods",
    ],
}

BRAND_NAMES = [
    "TechPro", "SoundMax", "VisionClear", "PowerDrive", "EcoGreen", "StyleCraft",
    "HomeEssentials", "FitLife", "BookWorld", "BeautyPlus", "ToyLand", "FoodHub",
    "SmartTech", "AudioPro", "CamGear", "GameZone", "HomeTech", "SportsGear",
    "FashionHub", "KidZone", "GourmetFoods", "BeautyEssentials", "ToyMaster",
    "TechVision", "SoundWave", "PhotoPro", "GameMaster", "SmartHome", "OutdoorPro",
]

BASE_FEATURES = [
    "High quality materials",
    "Durable construction",
    "Easy to use",
    "Compact design",
    "Energy efficient",
]

CATEGORY_FEATURES: dict[str, list[str]] = {
    "Electronics": ["Latest technology", "Fast processing", "Long battery life", "Wireless connectivity", "HD display"],
    "Fashion & Apparel": ["Comfortable fit", "Breathable fabric", "Machine washable", "Trendy design", "Premium stitching"],
    "Home & Garden": ["Space saving", "Weather resistant", "Easy assembly", "Stain resistant", "Eco friendly"],
    "Sports & Outdoors": ["Lightweight", "Sweat resistant", "Ergonomic grip", "Portable", "All weather"],
}

_SKU_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
_CENT = Decimal("0.01")


@dataclass
class SeedProduct:
    category: str
    subcategory: str
    draft: ProductDraft
    auxiliary: AuxiliaryData


def _money(value: float) -> Decimal:
    return Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP)


def generate_specifications(fake: Faker, category: str) -> dict[str, str]:
    if category == "Electronics":
        return {
            "warranty": f"{fake.random_int(1, 5)} years",
            "power": f"{fake.random_int(5, 500)}W",
            "connectivity": fake.random_element(["USB-C", "Bluetooth 5.0", "WiFi 6", "Lightning", "3.5mm Jack"]),
            "color": fake.color_name(),
        }
    if category == "Fashion & Apparel":
        return {
            "material": fake.random_element(["Cotton", "Polyester", "Wool", "Silk", "Denim", "Leather", "Linen"]),
            "season": fake.random_element(["Spring", "Summer", "Fall", "Winter", "All Season"]),
            "origin": fake.random_element(["USA", "China", "India", "Vietnam", "Bangladesh", "Turkey"]),
        }
    if category == "Home & Garden":
        return {
            "material": fake.random_element(["Wood", "Metal", "Plastic", "Glass", "Ceramic", "Fabric"]),
            "style": fake.random_element(["Modern", "Traditional", "Contemporary", "Industrial", "Rustic"]),
            "assembly": fake.random_element(["Required", "Pre-assembled", "Partial Assembly"]),
        }
    return {
        "material": fake.random_element(["Plastic", "Metal", "Wood", "Glass", "Fabric"]),
        "color": fake.color_name(),
    }


def generate_features(fake: Faker, category: str) -> list[str]:
    pool = BASE_FEATURES + CATEGORY_FEATURES.get(category, [])
    return list(fake.random_elements(pool, length=fake.random_int(3, 5), unique=True))


def generate_dimensions(fake: Faker) -> dict[str, Any]:
    return {
        "length": round(fake.random.uniform(5, 100), 1),
        "width": round(fake.random.uniform(5, 100), 1),
        "height": round(fake.random.uniform(2, 50), 1),
        "unit": "cm",
    }


def generate_draft(
    fake: Faker,
    *,
    category: str,
    subcategory: str,
    category_id: str | None = None,
) -> SeedProduct:
    brand = fake.random_element(BRAND_NAMES)
    noun = subcategory.split("&")[0].strip().rstrip("s")
    title = f"{brand} {fake.word().title()} {noun}"
    suffix = fake.lexify("??????", letters=_SKU_LETTERS)

    base_price = _money(fake.random.uniform(5, 2000))
    cost_price = _money(float(base_price) * fake.random.uniform(0.4, 0.8))
    compare_price = _money(float(base_price) * fake.random.uniform(1.0, 1.6))
    if compare_price < base_price:
        compare_price = base_price

    specifications = generate_specifications(fake, category)
    details = [SimpleField(key=key.title(), value=value) for key, value in specifications.items()]
    details.append(SimpleField(key="Weight", value=f"{fake.random_int(50, 5000)}g"))
    details = details[: fake.random_int(2, 5)]

    draft = ProductDraft(
        title=title,
        sku=generate_sku(category, title, suffix),
        category_id=category_id or generate_slug(subcategory),
        base_price=base_price,
        cost_price=cost_price,
        compare_price=compare_price,
        description=fake.paragraph(nb_sentences=4),
        short_description=fake.sentence(nb_words=10),
        status=fake.random_element(["draft", "active", "active", "active"]),
        tags=[generate_slug(category), generate_slug(subcategory), brand.lower()],
        specifications=specifications,
        features=generate_features(fake, category),
        is_featured=fake.boolean(chance_of_getting_true=15),
        weight=fake.random_int(50, 5000),
        dimensions=generate_dimensions(fake),
        warranty_months=fake.random_element([6, 12, 24]),
    )
    auxiliary = AuxiliaryData(
        simple_fields=details,
        images=[DraftImage(url=fake.image_url(), alt_text=title) for _ in range(fake.random_int(1, 4))],
        faqs=[
            DraftFaq(question=f"{fake.sentence(nb_words=6).rstrip('.')}?", answer=fake.sentence(nb_words=12))
            for _ in range(fake.random_int(0, 3))
        ],
    )
    return SeedProduct(category=category, subcategory=subcategory, draft=draft, auxiliary=auxiliary)


def generate_drafts(
    count: int,
    *,
    seed: int | None = None,
    category_ids: Mapping[str, str] | None = None,
    locale: str = "en_US",
) -> list[SeedProduct]:
    if count < 0:
        raise ValueError("count must be zero or positive.")
    fake = Faker(locale)
    if seed is not None:
        fake.seed_instance(seed)

    pairs = [(category, sub) for category, subs in CATEGORY_STRUCTURE.items() for sub in subs]
    ids = dict(category_ids or {})
    products: list[SeedProduct] = []
    for index in range(count):
        category, subcategory = pairs[index % len(pairs)]
        products.append(
            generate_draft(
                fake,
                category=category,
                subcategory=subcategory,
                category_id=ids.get(subcategory) or ids.get(category),
            )
        )
    return products


__all__ = [
    "BRAND_NAMES",
    "CATEGORY_STRUCTURE",
    "SeedProduct",
    "generate_draft",
    "generate_drafts",
    "generate_features",
    "generate_specifications",
]
