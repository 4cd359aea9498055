"""End-to-end tests of the CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return invoke


_CHECKOUT = [
    "order", "create",
    "--name", "Alice",
    "--email", "alice@example.com",
    "--phone", "555-0100",
    "--address", "1 Main St",
    "--city", "Springfield",
    "--zip", "12345",
]


class TestProductCommands:

    def test_list_all(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "10 products found" in result.output

    def test_list_filters_combine(self, run):
        result = run("product", "list", "--category", "electronics", "--max-price", "1000")
        assert result.exit_code == 0
        assert "prod_3" in result.output
        assert "prod_1" not in result.output

    def test_list_no_match(self, run):
        result = run("product", "list", "--search", "submarine")
        assert "No products found." in result.output

    def test_bad_price_rejected(self, run):
        result = run("product", "list", "--min-price", "cheap")
        assert result.exit_code != 0
        assert "Invalid money amount" in result.output

    def test_show(self, run):
        result = run("product", "show", "--id", "prod_7")
        assert result.exit_code == 0
        assert "Clean Code" in result.output

    def test_show_unknown(self, run):
        result = run("product", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCartCommands:

    def test_add_persists_between_invocations(self, run):
        assert run("cart", "add", "--id", "prod_1", "--qty", "5").exit_code == 0
        result = run("cart", "show")
        assert "Smartphone Premium X1" in result.output
        assert "R$ 17499.50" in result.output

    def test_add_above_stock_refused(self, run):
        run("cart", "add", "--id", "prod_1", "--qty", "5")
        result = run("cart", "add", "--id", "prod_1", "--qty", "11")
        assert result.exit_code == 1
        assert "stock 15, in cart 5" in result.output

    def test_update_to_zero_removes(self, run):
        run("cart", "add", "--id", "prod_1", "--qty", "5")
        assert run("cart", "update", "--id", "prod_1", "--qty", "0").exit_code == 0
        assert "Your cart is empty." in run("cart", "show").output

    def test_remove_missing_line(self, run):
        assert run("cart", "remove", "--id", "prod_1").exit_code == 1

    def test_clear(self, run):
        run("cart", "add", "--id", "prod_2")
        run("cart", "clear")
        assert "Your cart is empty." in run("cart", "show").output


class TestWishlistCommands:

    def test_toggle(self, run):
        assert "Added prod_3" in run("wishlist", "toggle", "--id", "prod_3").output
        assert "Premium Bluetooth Headphones" in run("wishlist", "show").output
        assert "Removed prod_3" in run("wishlist", "toggle", "--id", "prod_3").output
        assert "Your wishlist is empty." in run("wishlist", "show").output

    def test_toggle_unknown_product(self, run):
        assert run("wishlist", "toggle", "--id", "nope").exit_code == 1


class TestOrderCommands:

    def test_checkout_flow(self, run):
        run("cart", "add", "--id", "prod_7", "--qty", "2")
        result = run(*_CHECKOUT)
        assert result.exit_code == 0
        assert "Order placed successfully!" in result.output
        assert "R$ 159.80" in result.output
        assert "Your cart is empty." in run("cart", "show").output

        listing = run("order", "list")
        assert "pending" in listing.output
        order_id = listing.output.splitlines()[2].split()[0]

        assert run("order", "status", "--id", order_id, "--status", "completed").exit_code == 0
        assert "status=completed" in run("order", "show", "--id", order_id).output
        assert order_id in run("order", "list", "--status", "completed").output

    def test_checkout_with_empty_cart(self, run):
        result = run(*_CHECKOUT)
        assert result.exit_code == 1
        assert "cart is empty" in result.output

    def test_checkout_requires_valid_email(self, run):
        run("cart", "add", "--id", "prod_7")
        args = list(_CHECKOUT)
        args[args.index("alice@example.com")] = "not-an-email"
        result = run(*args)
        assert result.exit_code == 2
        assert "valid email" in result.output

    def test_checkout_requires_non_blank_fields(self, run):
        run("cart", "add", "--id", "prod_7")
        args = list(_CHECKOUT)
        args[args.index("Springfield")] = "  "
        result = run(*args)
        assert result.exit_code == 2
        assert "city is required" in result.output

    def test_status_unknown_order(self, run):
        assert run("order", "status", "--id", "nope", "--status", "pending").exit_code == 1

    def test_list_empty(self, run):
        assert "No orders found." in run("order", "list").output


class TestReset:

    def test_reset_clears_everything(self, run):
        run("cart", "add", "--id", "prod_1")
        run("wishlist", "toggle", "--id", "prod_1")
        assert run("reset", "--yes").exit_code == 0
        assert "Your cart is empty." in run("cart", "show").output
        assert "Your wishlist is empty." in run("wishlist", "show").output
