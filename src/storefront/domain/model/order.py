"""Order — an immutable record of a checkout.

An order captures the cart lines and the total at the moment it was
placed. The dataclass is frozen: the only thing that may change over an
order's life is its status, and that is done by building a replacement
with ``with_status()`` so items, total, date and customer info stay
exactly as they were snapshotted.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class CustomerInfo:
    """Checkout details, validated by the presentation layer beforehand."""

    name: str
    email: str
    phone: str
    address: str
    city: str
    zip_code: str


@dataclass(frozen=True)
class Order:

    id: str
    items: tuple[CartLine, ...]
    total: Money
    status: OrderStatus
    created_at: datetime
    customer_info: CustomerInfo

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.items)

    def with_status(self, status: OrderStatus) -> Order:
        return replace(self, status=status)
