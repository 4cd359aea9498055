import logging
from pathlib import Path

import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.context import CliContext
from storefront.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import product_list, product_show
from storefront.infrastructure.cli.wishlist_commands import wishlist_show, wishlist_toggle

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Where the store file lives (default: $STOREFRONT_DATA_DIR or ./data).",
)
@click.option("-v", "--verbose", count=True, help="-v for info, -vv for debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: int) -> None:
    """Storefront — catalog, cart, wishlist and orders"""
    # Without -v, warnings still reach stderr through logging's last-resort handler
    if verbose:
        logging.basicConfig(
            level=_LOG_LEVELS[min(verbose, len(_LOG_LEVELS) - 1)],
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = CliContext(data_dir)


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def wishlist() -> None:
    """Manage the wishlist."""


@cli.group()
def order() -> None:
    """Check out and review orders."""


@cli.command("reset")
@click.confirmation_option(prompt="Discard cart, wishlist and orders?")
@click.pass_obj
def reset(app: CliContext) -> None:
    """Forget all saved store data."""
    app.gateway.clear()
    click.echo("Store data cleared.")


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
cart.add_command(cart_show)
cart.add_command(cart_add)
cart.add_command(cart_update)
cart.add_command(cart_remove)
cart.add_command(cart_clear)
wishlist.add_command(wishlist_show)
wishlist.add_command(wishlist_toggle)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
