# Catalog/products.py
from typing import Iterable, List, Optional

from GREENCROSS.Catalog.models import Product

_IMAGE = "https://images.pexels.com/photos/{}/pexels-photo-{}.jpeg?auto=compress&cs=tinysrgb&w=800"


def _image(photo_id: int) -> str:
    return _IMAGE.format(photo_id, photo_id)


# ✅ Fixed catalog, defined at build time and never mutated
PRODUCTS: List[Product] = [
    Product(
        id="blue-dream",
        name="Blue Dream",
        price=45,
        category="flower",
        strain="hybrid",
        weight_label="3.5g",
        thc_percent=21,
        cbd_percent=0.1,
        featured=True,
        image_url=_image(7667906),
        description="A legendary hybrid that balances full-body relaxation with gentle cerebral invigoration.",
    ),
    Product(
        id="og-kush",
        name="OG Kush",
        price=55,
        category="flower",
        strain="indica",
        weight_label="3.5g",
        thc_percent=24,
        cbd_percent=0.3,
        featured=True,
        image_url=_image(6065060),
        description="Classic indica strain with complex aroma of fuel and spice. Perfect for evening relaxation.",
    ),
    Product(
        id="sour-diesel",
        name="Sour Diesel",
        price=50,
        category="flower",
        strain="sativa",
        weight_label="3.5g",
        thc_percent=22,
        cbd_percent=0.2,
        featured=True,
        image_url=_image(7667937),
        description="Energizing sativa with pungent diesel aroma. Great for daytime creativity and focus.",
    ),
    Product(
        id="gummy-bears-100mg",
        name="Gummy Bears 100mg",
        price=25,
        category="edibles",
        strain="hybrid",
        weight_label="100mg",
        featured=True,
        image_url=_image(12002720),
        description="Assorted fruit-flavored gummies, 10 pieces at 10mg each for precise dosing.",
    ),
    Product(
        id="live-resin-cartridge",
        name="Live Resin Cartridge",
        price=65,
        category="vapes",
        strain="hybrid",
        weight_label="1g",
        image_url=_image(7667893),
        description="High-potency live resin cartridge with full-spectrum flavor and effects.",
    ),
    Product(
        id="pre-roll-5-pack",
        name="Pre-Roll 5-Pack",
        price=35,
        category="pre-rolls",
        strain="hybrid",
        weight_label="5 x 0.7g",
        image_url=_image(7667724),
        description="Five handcrafted pre-rolls for convenient on-the-go sessions.",
    ),
    Product(
        id="cooling-topical",
        name="Cooling Relief Topical",
        price=40,
        category="topicals",
        strain=None,
        image_url=_image(3738341),
        description="Fast-absorbing mentholated cream for targeted relief without psychoactive effects.",
    ),
    Product(
        id="cbd-tincture",
        name="CBD Tincture 1000mg",
        price=70,
        category="concentrates",
        strain="cbd",
        image_url=_image(7667730),
        description="High-CBD tincture for daily wellness with minimal THC.",
    ),
    Product(
        id="glass-pipe",
        name="Hand-Blown Glass Pipe",
        price=30,
        category="accessories",
        strain=None,
        image_url=_image(11135639),
        description="Durable glass pipe with deep bowl and comfortable grip.",
    ),
]

_BY_ID = {product.id: product for product in PRODUCTS}


def get_product_by_id(product_id: str) -> Optional[Product]:
    return _BY_ID.get(product_id)


def featured_products() -> List[Product]:
    return [product for product in PRODUCTS if product.featured]


def filter_products(
    products: Iterable[Product],
    search: str = "",
    category: str = "all",
    strain: str = "all",
) -> List[Product]:
    """
    Apply the storefront filters, preserving catalog order.
    - category/strain "all" disables that filter
    - a strain filter excludes products without a strain
    - search matches name or description, case-insensitive
    """
    query = (search or "").strip().lower()
    results = []
    for product in products:
        if category != "all" and product.category != category:
            continue
        if strain != "all" and product.strain != strain:
            continue
        if query and query not in product.name.lower() and query not in product.description.lower():
            continue
        results.append(product)
    return results
