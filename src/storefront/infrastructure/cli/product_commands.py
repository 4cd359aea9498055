"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.cli.context import CliContext


def _parse_money(value: str | None, option: str) -> Money | None:
    if value is None:
        return None
    try:
        return Money.of(value)
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint=option)


def display_products(products: list[Product]) -> None:
    """Shared table layout for product listings."""
    click.echo(f"{'ID':<9} {'Name':<30} {'Category':<12} {'Price':>12} {'Rating':>6} {'Stock':>6}")
    click.echo("-" * 80)
    for p in products:
        price = str(p.price)
        if p.discount_percent:
            price = f"{price} -{p.discount_percent}%"
        click.echo(
            f"{p.id:<9} {p.name:<30} {p.category.label:<12} "
            f"{price:>12} {p.rating:>6.1f} {p.stock:>6}"
        )


@click.command("list")
@click.option("--search", "term", default=None, help="Match name or description.")
@click.option(
    "--category",
    type=click.Choice([c.value for c in Category]),
    default=None,
    help="Only this category.",
)
@click.option("--min-price", default=None, help="Lowest price (inclusive).")
@click.option("--max-price", default=None, help="Highest price (inclusive).")
@click.option("--min-rating", type=click.FloatRange(0.0, 5.0), default=None, help="Minimum rating.")
@click.pass_obj
def product_list(
    app: CliContext,
    term: str | None,
    category: str | None,
    min_price: str | None,
    max_price: str | None,
    min_rating: float | None,
) -> None:
    """List catalog products, optionally filtered."""
    products = app.engine.filter_products(
        term=term,
        category=Category(category) if category else None,
        min_price=_parse_money(min_price, "--min-price"),
        max_price=_parse_money(max_price, "--max-price"),
        min_rating=min_rating,
    )

    if not products:
        click.echo("No products found.")
        return

    display_products(products)
    click.echo(f"\n{len(products)} products found")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(app: CliContext, product_id: str) -> None:
    """Show one product in detail."""
    product = app.engine.product_by_id(product_id)
    if product is None:
        raise click.ClickException(f"Product '{product_id}' not found")

    marker = " ♥" if app.engine.is_in_wishlist(product.id) else ""
    click.echo(f"{product.image}  {product.name}{marker}")
    click.echo(f"   {product.description}")
    click.echo(f"   Category: {product.category.label}")
    if product.original_price is not None:
        click.echo(
            f"   Price:    {product.price} (was {product.original_price}, "
            f"-{product.discount_percent}%)"
        )
    else:
        click.echo(f"   Price:    {product.price}")
    click.echo(f"   Rating:   {product.rating:.1f} ({product.reviews} reviews)")
    click.echo(f"   Stock:    {product.stock}")
