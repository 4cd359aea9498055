"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.context import CliContext


@click.command("show")
@click.pass_obj
def cart_show(app: CliContext) -> None:
    """Show the cart contents and total."""
    lines = app.engine.get_cart()

    if not lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<9} {'Product':<30} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*72}")
    for line in lines:
        click.echo(
            f"  {line.product_id:<9} {line.product.name:<30} {line.quantity.value:>5} "
            f"{str(line.product.price):>12} {str(line.line_total):>12}"
        )
    click.echo(f"  {'-'*72}")
    click.echo(f"  {'Items':<46} {app.engine.cart_item_count():>5}")
    click.echo(f"  {'Cart Total':<46} {str(app.engine.cart_total()):>25}")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", type=int, default=1, show_default=True, help="Units to add.")
@click.pass_obj
def cart_add(app: CliContext, product_id: str, quantity: int) -> None:
    """Add a product to the cart."""
    if not app.engine.add_to_cart(product_id, quantity):
        product = app.engine.product_by_id(product_id)
        if product is None:
            raise click.ClickException(f"Product '{product_id}' not found")
        raise click.ClickException(
            f"Cannot add {quantity} of {product.name} "
            f"(stock {product.stock}, in cart {_in_cart(app, product_id)})"
        )

    click.echo(f"Added {quantity} x {product_id}. Cart has {app.engine.cart_item_count()} items.")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", type=int, required=True, help="New quantity (0 removes).")
@click.pass_obj
def cart_update(app: CliContext, product_id: str, quantity: int) -> None:
    """Change the quantity of a cart line."""
    if not app.engine.update_cart_item_quantity(product_id, quantity):
        raise click.ClickException(
            f"Cannot set quantity of '{product_id}' to {quantity} "
            f"(not in cart or above stock)"
        )

    if quantity <= 0:
        click.echo(f"Removed {product_id} from cart.")
    else:
        click.echo(f"Quantity of {product_id} set to {quantity}.")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(app: CliContext, product_id: str) -> None:
    """Remove a product from the cart."""
    if not app.engine.remove_from_cart(product_id):
        raise click.ClickException(f"Product '{product_id}' is not in the cart")
    click.echo(f"Removed {product_id} from cart.")


@click.command("clear")
@click.pass_obj
def cart_clear(app: CliContext) -> None:
    """Empty the cart."""
    app.engine.clear_cart()
    click.echo("Cart cleared.")


def _in_cart(app: CliContext, product_id: str) -> int:
    for line in app.engine.get_cart():
        if line.product_id == product_id:
            return line.quantity.value
    return 0
