"""The store's fixed product list, loaded once at startup."""

from __future__ import annotations

from storefront.domain.model.catalog import Catalog
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money

PRODUCTS: tuple[Product, ...] = (
    Product(
        id="prod_1",
        name="Smartphone Premium X1",
        description="Latest-generation smartphone with 108MP camera and 5G",
        price=Money.of("3499.90"),
        original_price=Money.of("4199.90"),
        category=Category.ELECTRONICS,
        rating=4.8,
        reviews=324,
        image="📱",
        stock=15,
    ),
    Product(
        id="prod_2",
        name='Notebook Pro 15"',
        description="Professional notebook with i7 processor and 16GB RAM",
        price=Money.of("5299.90"),
        category=Category.ELECTRONICS,
        rating=4.9,
        reviews=189,
        image="💻",
        stock=8,
    ),
    Product(
        id="prod_3",
        name="Premium Bluetooth Headphones",
        description="Active noise cancelling headphones with 30h battery life",
        price=Money.of("899.90"),
        original_price=Money.of("1299.90"),
        category=Category.ELECTRONICS,
        rating=4.7,
        reviews=567,
        image="🎧",
        stock=42,
    ),
    Product(
        id="prod_4",
        name="Fitness Smartwatch",
        description="Smart watch with health monitoring",
        price=Money.of("1299.90"),
        category=Category.ELECTRONICS,
        rating=4.6,
        reviews=234,
        image="⌚",
        stock=25,
    ),
    Product(
        id="prod_5",
        name="Premium Cotton T-Shirt",
        description="100% Egyptian cotton t-shirt with a modern fit",
        price=Money.of("89.90"),
        original_price=Money.of("149.90"),
        category=Category.CLOTHING,
        rating=4.5,
        reviews=892,
        image="👕",
        stock=120,
    ),
    Product(
        id="prod_6",
        name="Pro Running Shoes",
        description="Professional running shoes with cushioning",
        price=Money.of("449.90"),
        category=Category.SPORTS,
        rating=4.8,
        reviews=445,
        image="👟",
        stock=34,
    ),
    Product(
        id="prod_7",
        name="Book: Clean Code",
        description="Complete guide to good programming practices",
        price=Money.of("79.90"),
        category=Category.BOOKS,
        rating=5.0,
        reviews=1203,
        image="📚",
        stock=67,
    ),
    Product(
        id="prod_8",
        name="Smart Coffee Maker",
        description="Coffee maker with app control and programmable timer",
        price=Money.of("599.90"),
        original_price=Money.of("799.90"),
        category=Category.HOME,
        rating=4.4,
        reviews=178,
        image="☕",
        stock=19,
    ),
    Product(
        id="prod_9",
        name="Official Match Football",
        description="Official championship ball with anti-slip technology",
        price=Money.of("189.90"),
        category=Category.SPORTS,
        rating=4.7,
        reviews=312,
        image="⚽",
        stock=55,
    ),
    Product(
        id="prod_10",
        name="Smart LED Lamp",
        description="Smart RGB lamp with voice control",
        price=Money.of("249.90"),
        category=Category.HOME,
        rating=4.6,
        reviews=267,
        image="💡",
        stock=41,
    ),
)


def default_catalog() -> Catalog:
    return Catalog(PRODUCTS)
