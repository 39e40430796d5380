"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.application.add_cart_line import AddCartLineHandler
from storefront.application.change_cart_quantity import ChangeCartQuantityHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_cart_line import RemoveCartLineHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container

_UNCHANGED_MESSAGES = {
    "BELOW_MINIMUM": "Quantity cannot go below 1 - use 'cart remove' instead.",
    "EXCEEDS_STOCK": "Not enough stock!",
}


def _display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Line':<10} {'Product':<20} {'Variant':<26} {'Qty':>4} {'Price':>11} {'Subtotal':>12}")
    click.echo(f"  {'-'*88}")
    for line in dto.lines:
        click.echo(
            f"  {line.id:<10} {line.product_name:<20} {line.variant_name:<26} "
            f"{line.quantity:>4} {line.unit_price:>11} {line.subtotal:>12}"
        )
    click.echo(f"  {'-'*88}")
    click.echo(f"  {'Total (' + str(dto.item_count) + ' items)':<62} {dto.total:>26}")


@click.command("add")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--variant", "variant_id", default=None, help="Variant ID to add.")
@click.option("--product", "product_id", default=None, help="Product ID; adds its first in-stock variant.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.pass_obj
def cart_add(
    container: Container,
    customer: str,
    variant_id: str | None,
    product_id: str | None,
    quantity: int,
) -> None:
    """Add a product variant to the cart."""
    if (variant_id is None) == (product_id is None):
        raise click.UsageError("Give exactly one of --variant or --product.")
    handler = AddCartLineHandler(container.cart_repo, container.catalog_repo)

    try:
        if variant_id is not None:
            dto = handler.handle(customer, variant_id, quantity)
        else:
            dto = handler.handle_product(customer, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} x {variant_id or product_id} to cart.")
    _display_cart(dto)


@click.command("change")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--line", "line_id", required=True, help="Cart line ID.")
@click.option("--delta", required=True, type=int, help="Units to add (positive) or take away (negative).")
@click.pass_obj
def cart_change(container: Container, customer: str, line_id: str, delta: int) -> None:
    """Change the quantity of a cart line."""
    handler = ChangeCartQuantityHandler(container.cart_repo, container.catalog_repo)

    try:
        result = handler.handle(customer, line_id, delta)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.changed:
        click.echo(_UNCHANGED_MESSAGES[result.outcome], err=True)
    _display_cart(result.cart)


@click.command("remove")
@click.option("--customer", required=True, help="Customer ID.")
@click.option("--line", "line_id", required=True, help="Cart line ID.")
@click.pass_obj
def cart_remove(container: Container, customer: str, line_id: str) -> None:
    """Remove a line from the cart."""
    dto = RemoveCartLineHandler(container.cart_repo).handle(customer, line_id)
    click.echo("Item removed from cart.")
    _display_cart(dto)


@click.command("show")
@click.option("--customer", required=True, help="Customer ID.")
@click.pass_obj
def cart_show(container: Container, customer: str) -> None:
    """Show the cart."""
    _display_cart(ShowCartHandler(container.cart_repo).handle(customer))


@click.command("clear")
@click.option("--customer", required=True, help="Customer ID.")
@click.pass_obj
def cart_clear(container: Container, customer: str) -> None:
    """Empty the cart."""
    ClearCartHandler(container.cart_repo).handle(customer)
    click.echo("Cart cleared.")
