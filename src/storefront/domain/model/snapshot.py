"""StoreSnapshot — the persisted unit: cart, wishlist and orders.

The catalog is static configuration and is never part of a snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import Order


@dataclass(frozen=True)
class StoreSnapshot:

    cart: tuple[CartLine, ...] = ()
    wishlist: tuple[str, ...] = ()
    orders: tuple[Order, ...] = ()

    @staticmethod
    def empty() -> StoreSnapshot:
        return StoreSnapshot()
