"""Cart aggregate — the in-progress selection for the current session.

Invariants:
- every line has ``1 <= quantity <= product.stock``
- at most one line per product id

Mutations that would break an invariant are refused: the method returns
``False`` and the cart is left untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from storefront.domain.model.catalog import Catalog
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    """A product and how many units of it are in the cart.

    Also used as the line type of an order snapshot; being frozen, a
    line handed to an order can never be altered by later cart activity.
    """

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._lines: list[CartLine] = []

    # --- Factory (used for rehydration only) ----------------------------------

    @classmethod
    def restore(cls, catalog: Catalog, lines: Iterable[tuple[str, int]]) -> Cart:
        """Rebuild a cart from persisted ``(product_id, quantity)`` pairs.

        Persisted state may be older than the catalog, so each line is
        re-resolved: unknown products are dropped and quantities are
        clamped to the current stock.
        """
        cart = cls(catalog)
        for product_id, quantity in lines:
            product = catalog.by_id(product_id)
            if product is None:
                logger.warning("Dropping cart line for unknown product '%s'", product_id)
                continue
            wanted = cart.quantity_of(product_id) + quantity
            allowed = min(wanted, product.stock)
            if allowed < wanted:
                logger.warning(
                    "Clamping restored quantity of '%s' from %d to %d (stock)",
                    product_id, wanted, allowed,
                )
            if allowed <= 0:
                continue
            cart._put(CartLine(product=product, quantity=Quantity(allowed)))
        return cart

    # --- Queries --------------------------------------------------------------

    def lines(self) -> list[CartLine]:
        return list(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def quantity_of(self, product_id: str) -> int:
        line = self._find(product_id)
        return line.quantity.value if line is not None else 0

    def total(self) -> Money:
        """Sum of ``price * quantity`` using the products' current prices."""
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    def item_count(self) -> int:
        """Total units in the cart (not the number of lines)."""
        return sum(line.quantity.value for line in self._lines)

    # --- Mutations ------------------------------------------------------------

    def add(self, product_id: str, quantity: int = 1) -> bool:
        """Add ``quantity`` units, merging into an existing line if present."""
        if not _is_positive_int(quantity):
            return False
        product = self._catalog.by_id(product_id)
        if product is None:
            return False

        new_quantity = self.quantity_of(product_id) + quantity
        if new_quantity > product.stock:
            return False

        self._put(CartLine(product=product, quantity=Quantity(new_quantity)))
        return True

    def set_quantity(self, product_id: str, quantity: int) -> bool:
        """Overwrite a line's quantity; zero or less removes the line."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            return False
        line = self._find(product_id)
        if line is None:
            return False

        if quantity <= 0:
            return self.remove(product_id)

        if quantity > line.product.stock:
            return False

        self._put(CartLine(product=line.product, quantity=Quantity(quantity)))
        return True

    def remove(self, product_id: str) -> bool:
        before = len(self._lines)
        self._lines = [line for line in self._lines if line.product_id != product_id]
        return len(self._lines) < before

    def clear(self) -> None:
        self._lines = []

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: str) -> CartLine | None:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    def _put(self, new_line: CartLine) -> None:
        """Replace the line for the same product in place, or append."""
        for i, line in enumerate(self._lines):
            if line.product_id == new_line.product_id:
                self._lines[i] = new_line
                return
        self._lines.append(new_line)


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
