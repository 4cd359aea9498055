"""OrderHistory — append-only list of orders placed in this session.

Placing an order takes a snapshot of the cart and clears it in the same
step, so no caller can observe the new order next to a still-full cart.
"""

from __future__ import annotations

import secrets
import string
import time
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from storefront.domain.model.cart import Cart
from storefront.domain.model.order import CustomerInfo, Order, OrderStatus

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]

_BASE36 = string.digits + string.ascii_lowercase


def generate_order_id() -> str:
    """``order_<epoch-ms>_<9 random base36 chars>``."""
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"order_{millis}_{suffix}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderHistory:

    def __init__(
        self,
        orders: Iterable[Order] = (),
        id_factory: IdFactory = generate_order_id,
        clock: Clock = utc_now,
    ) -> None:
        self._orders: list[Order] = list(orders)
        self._id_factory = id_factory
        self._clock = clock

    def __len__(self) -> int:
        return len(self._orders)

    # --- Factory --------------------------------------------------------------

    def create(self, cart: Cart, customer_info: CustomerInfo) -> Order | None:
        """Turn the cart into a pending order; ``None`` if the cart is empty.

        The order is fully built before anything is mutated; appending it
        and clearing the cart then happen back to back.
        """
        if cart.is_empty:
            return None

        items = tuple(cart.lines())
        order = Order(
            id=self._next_id(),
            items=items,
            total=cart.total(),
            status=OrderStatus.PENDING,
            created_at=self._clock(),
            customer_info=customer_info,
        )

        self._orders.append(order)
        cart.clear()
        return order

    # --- Queries --------------------------------------------------------------

    def list_orders(self) -> list[Order]:
        """Most recent first; orders with the same timestamp, last placed first."""
        return sorted(reversed(self._orders), key=lambda o: o.created_at, reverse=True)

    def all(self) -> list[Order]:
        """Orders in the order they were placed (the persisted order)."""
        return list(self._orders)

    def by_id(self, order_id: str) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def by_status(self, status: OrderStatus) -> list[Order]:
        return [o for o in self.list_orders() if o.status == status]

    # --- State transitions ----------------------------------------------------

    def update_status(self, order_id: str, status: OrderStatus) -> bool:
        """Set any status from any status; unknown ids are refused."""
        for i, order in enumerate(self._orders):
            if order.id == order_id:
                self._orders[i] = order.with_status(status)
                return True
        return False

    # --- Internal helpers -----------------------------------------------------

    def _next_id(self) -> str:
        taken = {o.id for o in self._orders}
        order_id = self._id_factory()
        while order_id in taken:
            order_id = self._id_factory()
        return order_id
