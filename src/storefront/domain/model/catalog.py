"""Catalog — read-only queries over the fixed product collection.

Every query returns a fresh list so callers cannot reach the catalog's
own storage. The individual filters are meant to be combined with a
logical AND; ``filter()`` does exactly that in one pass.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money


class Catalog:

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[str, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise ValidationError(f"Duplicate product id in catalog: '{product.id}'")
            self._by_id[product.id] = product

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def all(self) -> list[Product]:
        return list(self._products)

    def by_id(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    def search(self, term: str) -> list[Product]:
        """Case-insensitive substring match on name or description."""
        needle = (term or "").strip().lower()
        if not needle:
            return self.all()
        return [p for p in self._products if _matches(p, needle)]

    def by_category(self, category: Category) -> list[Product]:
        return [p for p in self._products if p.category == category]

    def by_price_range(self, min_price: Money, max_price: Money) -> list[Product]:
        """Products whose price lies within ``[min_price, max_price]``."""
        return [p for p in self._products if min_price <= p.price <= max_price]

    def by_min_rating(self, min_rating: float) -> list[Product]:
        return [p for p in self._products if p.rating >= min_rating]

    def filter(
        self,
        term: str | None = None,
        category: Category | None = None,
        min_price: Money | None = None,
        max_price: Money | None = None,
        min_rating: float | None = None,
    ) -> list[Product]:
        """Apply every given criterion at once; ``None`` means "don't filter"."""
        needle = (term or "").strip().lower()
        result = []
        for p in self._products:
            if needle and not _matches(p, needle):
                continue
            if category is not None and p.category != category:
                continue
            if min_price is not None and p.price < min_price:
                continue
            if max_price is not None and p.price > max_price:
                continue
            if min_rating is not None and p.rating < min_rating:
                continue
            result.append(p)
        return result

    def categories(self) -> list[Category]:
        present = {p.category for p in self._products}
        return [c for c in Category if c in present]


def _matches(product: Product, needle: str) -> bool:
    return needle in product.name.lower() or needle in product.description.lower()
