"""Product — an entry of the static catalog.

Products are fixed at process start and never mutated, so the dataclass
is frozen. A cart line or order line can hold a reference to one without
worrying about it changing underneath.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MIN_RATING = 0.0
MAX_RATING = 5.0


class Category(Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    BOOKS = "books"
    HOME = "home"
    SPORTS = "sports"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    Category.ELECTRONICS: "Electronics",
    Category.CLOTHING: "Clothing",
    Category.BOOKS: "Books",
    Category.HOME: "Home",
    Category.SPORTS: "Sports",
}


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Invariants:
    - ``original_price``, when present, is strictly greater than ``price``
    - ``rating`` is within 0.0–5.0
    - ``reviews`` and ``stock`` are never negative
    """

    id: str
    name: str
    description: str
    price: Money
    category: Category
    rating: float
    reviews: int
    image: str
    stock: int
    original_price: Money | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("Product id is required")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError(f"Product {self.id}: name is required")
        if not isinstance(self.category, Category):
            raise ValidationError(
                f"Product {self.id}: unknown category {self.category!r}"
            )
        if self.original_price is not None and self.original_price <= self.price:
            raise ValidationError(
                f"Product {self.id}: original price {self.original_price} "
                f"must be greater than price {self.price}"
            )
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError(
                f"Product {self.id}: rating {self.rating} outside "
                f"{MIN_RATING}-{MAX_RATING}"
            )
        if self.reviews < 0:
            raise ValidationError(f"Product {self.id}: reviews cannot be negative")
        if self.stock < 0:
            raise ValidationError(f"Product {self.id}: stock cannot be negative")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @property
    def discount_percent(self) -> int:
        """Whole-number discount relative to ``original_price`` (0 if none)."""
        if self.original_price is None:
            return 0
        ratio = (self.original_price.amount - self.price.amount) / self.original_price.amount
        return int((ratio * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
