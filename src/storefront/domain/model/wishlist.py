"""Wishlist — product ids marked for later, in insertion order."""

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain.model.catalog import Catalog
from storefront.domain.model.product import Product


class Wishlist:

    def __init__(self, product_ids: Iterable[str] = ()) -> None:
        # dict keys give set semantics while keeping insertion order
        self._ids: dict[str, None] = dict.fromkeys(product_ids)

    def __len__(self) -> int:
        return len(self._ids)

    def ids(self) -> list[str]:
        return list(self._ids)

    def contains(self, product_id: str) -> bool:
        return product_id in self._ids

    def add(self, product_id: str) -> bool:
        if product_id in self._ids:
            return False
        self._ids[product_id] = None
        return True

    def remove(self, product_id: str) -> bool:
        if product_id not in self._ids:
            return False
        del self._ids[product_id]
        return True

    def toggle(self, product_id: str) -> bool:
        """Flip membership and return the new state."""
        if self.remove(product_id):
            return False
        self.add(product_id)
        return True

    def products(self, catalog: Catalog) -> list[Product]:
        """Resolve ids against the catalog, skipping ids it no longer has."""
        resolved = (catalog.by_id(product_id) for product_id in self._ids)
        return [p for p in resolved if p is not None]
