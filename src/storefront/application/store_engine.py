"""StoreEngine — the single API the presentation layer talks to.

Read methods pass straight through to the catalog and the three mutable
stores. Every mutating method follows the same sequence: mutate, and on
success notify all listeners and then write the snapshot. A refusal
(unknown id, not enough stock, empty cart) returns ``False``/``None``
and triggers neither.

One engine is built by the composition root and handed to its
consumers; there is no module-level instance.
"""

from __future__ import annotations

import logging
import threading

from storefront.application.subscriptions import (
    Listener,
    SubscriptionRegistry,
    Unsubscribe,
)
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.catalog import Catalog
from storefront.domain.model.order import CustomerInfo, Order, OrderStatus
from storefront.domain.model.order_history import (
    Clock,
    IdFactory,
    OrderHistory,
    generate_order_id,
    utc_now,
)
from storefront.domain.model.product import Category, Product
from storefront.domain.model.snapshot import StoreSnapshot
from storefront.domain.model.value_objects import Money
from storefront.domain.model.wishlist import Wishlist
from storefront.domain.repository.snapshot_repository import SnapshotRepository

logger = logging.getLogger(__name__)


class StoreEngine:

    def __init__(
        self,
        catalog: Catalog,
        gateway: SnapshotRepository,
        cart: Cart | None = None,
        wishlist: Wishlist | None = None,
        orders: OrderHistory | None = None,
    ) -> None:
        self._catalog = catalog
        self._gateway = gateway
        self._cart = cart if cart is not None else Cart(catalog)
        self._wishlist = wishlist if wishlist is not None else Wishlist()
        self._orders = orders if orders is not None else OrderHistory()
        self._subscriptions = SubscriptionRegistry()
        # one logical writer at a time; re-entrant so listeners may read
        self._lock = threading.RLock()

    # --- Factory --------------------------------------------------------------

    @classmethod
    def load(
        cls,
        catalog: Catalog,
        gateway: SnapshotRepository,
        id_factory: IdFactory = generate_order_id,
        clock: Clock = utc_now,
    ) -> StoreEngine:
        """Build an engine rehydrated from the persisted snapshot."""
        snapshot = gateway.load()
        cart = Cart.restore(
            catalog,
            ((line.product_id, line.quantity.value) for line in snapshot.cart),
        )
        engine = cls(
            catalog,
            gateway,
            cart=cart,
            wishlist=Wishlist(snapshot.wishlist),
            orders=OrderHistory(snapshot.orders, id_factory=id_factory, clock=clock),
        )
        logger.debug(
            "Store loaded: %d cart lines, %d wishlist ids, %d orders",
            len(snapshot.cart), len(snapshot.wishlist), len(snapshot.orders),
        )
        return engine

    # --- Notification ---------------------------------------------------------

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._subscriptions.subscribe(listener)

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return StoreSnapshot(
                cart=tuple(self._cart.lines()),
                wishlist=tuple(self._wishlist.ids()),
                orders=tuple(self._orders.all()),
            )

    # --- Catalog queries ------------------------------------------------------

    def all_products(self) -> list[Product]:
        return self._catalog.all()

    def product_by_id(self, product_id: str) -> Product | None:
        return self._catalog.by_id(product_id)

    def search(self, term: str) -> list[Product]:
        return self._catalog.search(term)

    def filter_by_category(self, category: Category) -> list[Product]:
        return self._catalog.by_category(category)

    def filter_by_price_range(self, min_price: Money, max_price: Money) -> list[Product]:
        return self._catalog.by_price_range(min_price, max_price)

    def filter_by_rating(self, min_rating: float) -> list[Product]:
        return self._catalog.by_min_rating(min_rating)

    def filter_products(
        self,
        term: str | None = None,
        category: Category | None = None,
        min_price: Money | None = None,
        max_price: Money | None = None,
        min_rating: float | None = None,
    ) -> list[Product]:
        return self._catalog.filter(term, category, min_price, max_price, min_rating)

    def categories(self) -> list[Category]:
        return self._catalog.categories()

    # --- Cart -----------------------------------------------------------------

    def get_cart(self) -> list[CartLine]:
        with self._lock:
            return self._cart.lines()

    def cart_total(self) -> Money:
        with self._lock:
            return self._cart.total()

    def cart_item_count(self) -> int:
        with self._lock:
            return self._cart.item_count()

    def add_to_cart(self, product_id: str, quantity: int = 1) -> bool:
        with self._lock:
            ok = self._cart.add(product_id, quantity)
            if not ok:
                logger.info(
                    "Refused to add %r x %s to cart (unknown product or insufficient stock)",
                    quantity, product_id,
                )
            return self._committed(ok)

    def update_cart_item_quantity(self, product_id: str, quantity: int) -> bool:
        with self._lock:
            ok = self._cart.set_quantity(product_id, quantity)
            if not ok:
                logger.info("Refused to set quantity of %s to %r", product_id, quantity)
            return self._committed(ok)

    def remove_from_cart(self, product_id: str) -> bool:
        with self._lock:
            return self._committed(self._cart.remove(product_id))

    def clear_cart(self) -> bool:
        with self._lock:
            self._cart.clear()
            return self._committed(True)

    # --- Wishlist -------------------------------------------------------------

    def get_wishlist(self) -> list[str]:
        with self._lock:
            return self._wishlist.ids()

    def wishlist_products(self) -> list[Product]:
        with self._lock:
            return self._wishlist.products(self._catalog)

    def is_in_wishlist(self, product_id: str) -> bool:
        with self._lock:
            return self._wishlist.contains(product_id)

    def toggle_wishlist(self, product_id: str) -> bool:
        """Flip membership; returns the new state (always a mutation)."""
        with self._lock:
            member = self._wishlist.toggle(product_id)
            self._committed(True)
            return member

    def add_to_wishlist(self, product_id: str) -> bool:
        with self._lock:
            return self._committed(self._wishlist.add(product_id))

    def remove_from_wishlist(self, product_id: str) -> bool:
        with self._lock:
            return self._committed(self._wishlist.remove(product_id))

    # --- Orders ---------------------------------------------------------------

    def list_orders(self) -> list[Order]:
        with self._lock:
            return self._orders.list_orders()

    def order_by_id(self, order_id: str) -> Order | None:
        with self._lock:
            return self._orders.by_id(order_id)

    def orders_by_status(self, status: OrderStatus) -> list[Order]:
        with self._lock:
            return self._orders.by_status(status)

    def create_order(self, customer_info: CustomerInfo) -> Order | None:
        with self._lock:
            order = self._orders.create(self._cart, customer_info)
            if order is None:
                logger.info("Refused to create order: cart is empty")
                return None
            logger.info("Order %s created, total %s", order.id, order.total)
            self._committed(True)
            return order

    def update_order_status(self, order_id: str, status: OrderStatus) -> bool:
        with self._lock:
            ok = self._orders.update_status(order_id, status)
            if not ok:
                logger.info("Refused to update status of unknown order %s", order_id)
            return self._committed(ok)

    # --- Internal helpers -----------------------------------------------------

    def _committed(self, success: bool) -> bool:
        """Run notify-then-persist after a successful mutation."""
        if success:
            self._subscriptions.notify_all()
            self._gateway.save(self.snapshot())
        return success
