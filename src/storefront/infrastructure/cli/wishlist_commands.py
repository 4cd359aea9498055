"""CLI commands for the wishlist."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.context import CliContext
from storefront.infrastructure.cli.product_commands import display_products


@click.command("show")
@click.pass_obj
def wishlist_show(app: CliContext) -> None:
    """Show wishlisted products."""
    products = app.engine.wishlist_products()

    if not products:
        click.echo("Your wishlist is empty.")
        return

    display_products(products)


@click.command("toggle")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def wishlist_toggle(app: CliContext, product_id: str) -> None:
    """Add a product to the wishlist, or remove it if already there."""
    if app.engine.product_by_id(product_id) is None:
        raise click.ClickException(f"Product '{product_id}' not found")

    if app.engine.toggle_wishlist(product_id):
        click.echo(f"Added {product_id} to wishlist.")
    else:
        click.echo(f"Removed {product_id} from wishlist.")
