"""Unit tests for the Cart aggregate and its stock rules."""

import random
from decimal import Decimal

import pytest

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from tests.fakes import make_catalog


def _cart() -> Cart:
    return Cart(make_catalog())


def _state(cart: Cart) -> list[tuple[str, int]]:
    return [(line.product_id, line.quantity.value) for line in cart.lines()]


class TestCartAdd:

    def test_add_new_line(self):
        cart = _cart()
        assert cart.add("p1", 5)
        assert _state(cart) == [("p1", 5)]

    def test_default_quantity_is_one(self):
        cart = _cart()
        cart.add("p1")
        assert cart.quantity_of("p1") == 1

    def test_add_merges_into_existing_line(self):
        cart = _cart()
        cart.add("p1", 2)
        cart.add("p1", 3)
        assert _state(cart) == [("p1", 5)]

    def test_unknown_product_refused(self):
        cart = _cart()
        assert not cart.add("nope")
        assert cart.is_empty

    def test_out_of_stock_product_refused(self):
        cart = _cart()
        assert not cart.add("p4")
        assert cart.is_empty

    def test_exceeding_stock_with_existing_quantity_refused(self):
        cart = _cart()
        assert cart.add("p1", 5)
        assert not cart.add("p1", 11)  # 5 + 11 > 15
        assert _state(cart) == [("p1", 5)]

    def test_add_up_to_exact_stock(self):
        cart = _cart()
        assert cart.add("p2", 3)
        assert not cart.add("p2", 1)

    @pytest.mark.parametrize("qty", [0, -1, 1.5, True])
    def test_non_positive_or_non_integer_quantity_refused(self, qty):
        cart = _cart()
        assert not cart.add("p1", qty)
        assert cart.is_empty

    def test_lines_keep_insertion_order(self):
        cart = _cart()
        cart.add("p3")
        cart.add("p1")
        cart.add("p3")
        assert [line.product_id for line in cart.lines()] == ["p3", "p1"]


class TestCartSetQuantity:

    def test_overwrites_quantity(self):
        cart = _cart()
        cart.add("p1", 2)
        assert cart.set_quantity("p1", 7)
        assert cart.quantity_of("p1") == 7

    def test_zero_removes_line(self):
        cart = _cart()
        cart.add("p1", 5)
        assert cart.set_quantity("p1", 0)
        assert cart.is_empty

    def test_negative_removes_line(self):
        cart = _cart()
        cart.add("p1", 5)
        assert cart.set_quantity("p1", -3)
        assert cart.is_empty

    def test_above_stock_refused(self):
        cart = _cart()
        cart.add("p2", 1)
        assert not cart.set_quantity("p2", 4)
        assert cart.quantity_of("p2") == 1

    def test_line_not_in_cart_refused(self):
        cart = _cart()
        assert not cart.set_quantity("p1", 2)
        assert cart.is_empty


class TestCartRemoveAndClear:

    def test_remove_reports_removal(self):
        cart = _cart()
        cart.add("p1")
        assert cart.remove("p1")
        assert not cart.remove("p1")

    def test_clear(self):
        cart = _cart()
        cart.add("p1")
        cart.add("p3")
        cart.clear()
        assert cart.is_empty
        assert cart.item_count() == 0


class TestCartTotals:

    def test_total_and_item_count(self):
        cart = _cart()
        cart.add("p1", 3)   # 30.00
        cart.add("p2", 2)   # 51.00
        assert cart.total() == Money.of("81.00")
        assert cart.item_count() == 5

    def test_empty_cart_totals(self):
        cart = _cart()
        assert cart.total() == Money.zero()
        assert cart.item_count() == 0

    def test_lines_is_a_defensive_copy(self):
        cart = _cart()
        cart.add("p1")
        cart.lines().clear()
        assert cart.quantity_of("p1") == 1


class TestCartRestore:

    def test_restores_lines(self):
        cart = Cart.restore(make_catalog(), [("p1", 2), ("p3", 1)])
        assert _state(cart) == [("p1", 2), ("p3", 1)]

    def test_drops_unknown_products(self):
        cart = Cart.restore(make_catalog(), [("gone", 2), ("p1", 1)])
        assert _state(cart) == [("p1", 1)]

    def test_clamps_to_stock(self):
        cart = Cart.restore(make_catalog(), [("p2", 10)])
        assert _state(cart) == [("p2", 3)]

    def test_drops_out_of_stock_lines(self):
        cart = Cart.restore(make_catalog(), [("p4", 1)])
        assert cart.is_empty

    def test_merges_duplicates(self):
        cart = Cart.restore(make_catalog(), [("p1", 2), ("p1", 3)])
        assert _state(cart) == [("p1", 5)]


class TestCartProperties:
    """Randomized operation sequences checked against the cart invariants."""

    @pytest.mark.parametrize("seed", range(20))
    def test_invariants_hold_under_random_operations(self, seed):
        rng = random.Random(seed)
        catalog = make_catalog()
        cart = Cart(catalog)
        ids = [p.id for p in catalog.all()] + ["unknown"]

        for _ in range(200):
            product_id = rng.choice(ids)
            before = _state(cart)
            op = rng.choice(["add", "set", "remove"])
            if op == "add":
                ok = cart.add(product_id, rng.randint(-2, 8))
            elif op == "set":
                ok = cart.set_quantity(product_id, rng.randint(-2, 20))
            else:
                ok = cart.remove(product_id)
            if not ok:
                assert _state(cart) == before

            seen = [line.product_id for line in cart.lines()]
            assert len(seen) == len(set(seen))
            for line in cart.lines():
                assert 1 <= line.quantity.value <= line.product.stock

            expected = sum(
                (line.product.price.amount * line.quantity.value for line in cart.lines()),
                Decimal("0"),
            )
            assert cart.total().amount == expected
            assert cart.item_count() == sum(q for _, q in _state(cart))
