"""Key-value-backed implementation of SnapshotRepository.

Two independent keys are used:

- ``storefront_store_data``: the JSON snapshot
  ``{"cart": [...], "wishlist": [...], "orders": [...]}``
- ``storefront_dark_mode``: the presentation layer's theme flag

Storage and decoding faults stop here. They are logged and masked
behind empty defaults so nothing above this layer ever sees them.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from storefront.domain.exceptions import DomainException, PersistenceError, ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import CustomerInfo, Order, OrderStatus
from storefront.domain.model.product import Category, Product
from storefront.domain.model.snapshot import StoreSnapshot
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.key_value_store import KeyValueStore
from storefront.domain.repository.snapshot_repository import SnapshotRepository

logger = logging.getLogger(__name__)

STORE_DATA_KEY = "storefront_store_data"
DARK_MODE_KEY = "storefront_dark_mode"

# Anything a malformed payload can raise while being decoded.
_DECODE_ERRORS = (
    DomainException, ValueError, KeyError, TypeError, AttributeError, ArithmeticError,
)


class SnapshotGateway(SnapshotRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    # --- SnapshotRepository interface -----------------------------------------

    def load(self) -> StoreSnapshot:
        try:
            payload = self._store.get(STORE_DATA_KEY)
        except PersistenceError:
            logger.exception("Could not read stored data; starting empty")
            return StoreSnapshot.empty()
        if payload is None:
            return StoreSnapshot.empty()

        try:
            return self._to_domain(json.loads(payload))
        except _DECODE_ERRORS:
            logger.exception("Stored data is corrupt; starting empty")
            return StoreSnapshot.empty()

    def save(self, snapshot: StoreSnapshot) -> bool:
        try:
            payload = json.dumps(self._to_raw(snapshot))
            self._store.set(STORE_DATA_KEY, payload)
        except (PersistenceError, TypeError, ValueError):
            logger.exception("Could not save store data")
            return False
        return True

    def clear(self) -> None:
        for key in (DARK_MODE_KEY, STORE_DATA_KEY):
            try:
                self._store.delete(key)
            except PersistenceError:
                logger.exception("Could not clear %s", key)

    # --- Theme flag -----------------------------------------------------------

    def load_dark_mode(self, default: bool = False) -> bool:
        try:
            payload = self._store.get(DARK_MODE_KEY)
            value = json.loads(payload) if payload is not None else default
        except (PersistenceError, ValueError, TypeError):
            logger.exception("Could not read theme flag")
            return default
        return value if isinstance(value, bool) else default

    def save_dark_mode(self, enabled: bool) -> bool:
        try:
            self._store.set(DARK_MODE_KEY, json.dumps(bool(enabled)))
        except PersistenceError:
            logger.exception("Could not save theme flag")
            return False
        return True

    # --- Serialization --------------------------------------------------------

    @classmethod
    def _to_raw(cls, snapshot: StoreSnapshot) -> dict:
        return {
            "cart": [cls._line_to_raw(line) for line in snapshot.cart],
            "wishlist": list(snapshot.wishlist),
            "orders": [
                {
                    "id": order.id,
                    "items": [cls._line_to_raw(line) for line in order.items],
                    "total": str(order.total.amount),
                    "currency": order.total.currency,
                    "status": order.status.value,
                    "created_at": order.created_at.isoformat(),
                    "customer_info": {
                        "name": order.customer_info.name,
                        "email": order.customer_info.email,
                        "phone": order.customer_info.phone,
                        "address": order.customer_info.address,
                        "city": order.customer_info.city,
                        "zip_code": order.customer_info.zip_code,
                    },
                }
                for order in snapshot.orders
            ],
        }

    @classmethod
    def _to_domain(cls, raw: object) -> StoreSnapshot:
        if not isinstance(raw, dict):
            raise ValidationError(f"Expected a JSON object, got {type(raw).__name__}")
        wishlist = raw.get("wishlist", [])
        if not isinstance(wishlist, list) or not all(
            isinstance(product_id, str) for product_id in wishlist
        ):
            raise ValidationError("Wishlist entries must be product ids")
        return StoreSnapshot(
            cart=tuple(cls._line_to_domain(r) for r in raw.get("cart", [])),
            wishlist=tuple(dict.fromkeys(wishlist)),
            orders=tuple(cls._order_to_domain(r) for r in raw.get("orders", [])),
        )

    @staticmethod
    def _line_to_raw(line: CartLine) -> dict:
        p = line.product
        return {
            "product": {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "original_price": (
                    str(p.original_price.amount) if p.original_price is not None else None
                ),
                "category": p.category.value,
                "rating": p.rating,
                "reviews": p.reviews,
                "image": p.image,
                "stock": p.stock,
            },
            "quantity": line.quantity.value,
        }

    @staticmethod
    def _line_to_domain(raw: object) -> CartLine:
        p = _expect_dict(_expect_dict(raw, "cart line")["product"], "product")
        currency = p.get("currency", "BRL")
        original = p.get("original_price")
        product = Product(
            id=_expect_str(p["id"], "product id"),
            name=_expect_str(p["name"], "product name"),
            description=_expect_str(p.get("description", ""), "description"),
            price=Money.of(p["price"], currency),
            original_price=Money.of(original, currency) if original is not None else None,
            category=Category(p["category"]),
            rating=float(p.get("rating", 0.0)),
            reviews=int(p.get("reviews", 0)),
            image=_expect_str(p.get("image", ""), "image"),
            stock=int(p.get("stock", 0)),
        )
        return CartLine(product=product, quantity=Quantity(raw["quantity"]))

    @classmethod
    def _order_to_domain(cls, raw: object) -> Order:
        raw = _expect_dict(raw, "order")
        info = _expect_dict(raw["customer_info"], "customer info")
        return Order(
            id=_expect_str(raw["id"], "order id"),
            items=tuple(cls._line_to_domain(r) for r in raw["items"]),
            total=Money.of(raw["total"], raw.get("currency", "BRL")),
            status=OrderStatus(raw["status"]),
            created_at=_parse_timestamp(raw["created_at"]),
            customer_info=CustomerInfo(
                name=_expect_str(info["name"], "name"),
                email=_expect_str(info["email"], "email"),
                phone=_expect_str(info["phone"], "phone"),
                address=_expect_str(info["address"], "address"),
                city=_expect_str(info["city"], "city"),
                zip_code=_expect_str(info["zip_code"], "zip_code"),
            ),
        )


def _expect_dict(value: object, what: str) -> dict:
    if not isinstance(value, dict):
        raise ValidationError(f"Expected {what} to be an object, got {type(value).__name__}")
    return value


def _expect_str(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"Expected {what} to be a string, got {type(value).__name__}")
    return value


def _parse_timestamp(value: object) -> datetime:
    """ISO-8601 timestamp; one without an offset is taken to be UTC."""
    created_at = datetime.fromisoformat(_expect_str(value, "created_at"))
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at
