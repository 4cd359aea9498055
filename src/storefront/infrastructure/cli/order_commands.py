"""CLI commands for checkout and order history."""

from __future__ import annotations

import re

import click

from storefront.domain.model.order import CustomerInfo, Order, OrderStatus
from storefront.infrastructure.cli.context import CliContext

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")


def _validate_customer(info: CustomerInfo) -> None:
    """Checkout form check: every field filled, email roughly well-formed."""
    for field_name, value in vars(info).items():
        if not value.strip():
            raise click.BadParameter(
                f"{field_name.replace('_', ' ')} is required",
                param_hint=f"--{field_name.replace('_', '-')}",
            )
    if not _EMAIL_RE.fullmatch(info.email.strip()):
        raise click.BadParameter("a valid email is required", param_hint="--email")


def _display_order(order: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {order.id}  (status={order.status.value})")
    click.echo(f"Customer: {order.customer_info.name} <{order.customer_info.email}>")
    click.echo(f"Ship to:  {order.customer_info.address}, {order.customer_info.city} "
               f"{order.customer_info.zip_code}")
    click.echo(f"Created:  {order.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*62}")
    for line in order.items:
        click.echo(
            f"  {line.product.name:<30} {line.quantity.value:>5} "
            f"{str(line.product.price):>12} {str(line.line_total):>12}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Order Total':<36} {str(order.total):>25}")


@click.command("create")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--phone", required=True, help="Phone number.")
@click.option("--address", required=True, help="Street address.")
@click.option("--city", required=True, help="City.")
@click.option("--zip", "zip_code", required=True, help="Postal code.")
@click.pass_obj
def order_create(
    app: CliContext,
    name: str,
    email: str,
    phone: str,
    address: str,
    city: str,
    zip_code: str,
) -> None:
    """Check out: turn the cart into a new order."""
    info = CustomerInfo(
        name=name, email=email, phone=phone, address=address, city=city, zip_code=zip_code,
    )
    _validate_customer(info)

    order = app.engine.create_order(info)
    if order is None:
        raise click.ClickException("Your cart is empty")

    click.echo("Order placed successfully!")
    _display_order(order)


@click.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus]),
    default=None,
    help="Only orders with this status.",
)
@click.pass_obj
def order_list(app: CliContext, status: str | None) -> None:
    """List orders, most recent first."""
    if status is None:
        orders = app.engine.list_orders()
    else:
        orders = app.engine.orders_by_status(OrderStatus(status))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<32} {'Date':<17} {'Status':<11} {'Items':>5} {'Total':>14}")
    click.echo("-" * 83)
    for order in orders:
        click.echo(
            f"{order.id:<32} {order.created_at.strftime('%Y-%m-%d %H:%M'):<17} "
            f"{order.status.value:<11} {order.item_count:>5} {str(order.total):>14}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(app: CliContext, order_id: str) -> None:
    """Show details of an existing order."""
    order = app.engine.order_by_id(order_id)
    if order is None:
        raise click.ClickException(f"Order {order_id} not found")
    _display_order(order)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus]),
    required=True,
    help="New status.",
)
@click.pass_obj
def order_status(app: CliContext, order_id: str, status: str) -> None:
    """Change the status of an order."""
    if not app.engine.update_order_status(order_id, OrderStatus(status)):
        raise click.ClickException(f"Order {order_id} not found")
    click.echo(f"Order {order_id} is now {status}.")
