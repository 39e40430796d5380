"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.append_note import AppendNoteHandler
from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.complete_order import CompleteOrderHandler
from storefront.application.confirm_order import ConfirmOrderHandler
from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.submit_order import SubmitOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.actor import Actor, Role
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import Address
from storefront.infrastructure.bootstrap import Container


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} ({dto.customer_id})")
    click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Variant':<26} {'Qty':>4} {'Price':>11} {'Subtotal':>12}")
    click.echo(f"  {'-'*77}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.variant_name:<26} {line.quantity:>4} "
            f"{line.unit_price:>11} {line.subtotal:>12}"
        )
    click.echo(f"  {'-'*77}")
    click.echo(f"  {'Order Total (cash on delivery)':<50} {dto.total:>26}")

    if dto.notes:
        click.echo()
        click.echo("Staff notes:")
        for note in dto.notes:
            click.echo(f"  [{note.created_at}] {note.author}: {note.content}")


@click.command("submit")
@click.option("--customer", required=True, help="Customer ID whose cart is ordered.")
@click.option("--recipient", required=True, help="Recipient name.")
@click.option("--phone", required=True, help="Recipient phone.")
@click.option("--address", "address_line", required=True, help="Street address.")
@click.option("--city", required=True, help="City.")
@click.option("--name", "customer_name", default=None, help="Customer display name (defaults to the recipient).")
@click.pass_obj
def order_submit(
    container: Container,
    customer: str,
    recipient: str,
    phone: str,
    address_line: str,
    city: str,
    customer_name: str | None,
) -> None:
    """Place an order for everything in the cart (cash on delivery)."""
    handler = SubmitOrderHandler(container.cart_repo, container.ledger)

    try:
        address = Address(
            recipient_name=recipient, phone=phone, address_line=address_line, city=city
        )
        dto = handler.handle(customer, address, customer_name=customer_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed (status={dto.status}).")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(container.order_repo)

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--customer", default=None, help="Only this customer's orders.")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    default=None,
    help="Only orders in this status.",
)
@click.pass_obj
def order_list(container: Container, customer: str | None, status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(container.order_repo)
    orders = handler.handle(
        customer_id=customer,
        status=OrderStatus(status.upper()) if status else None,
    )

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<12} {'Status':<10} {'Items':>5} {'Total':>14}  Created")
    click.echo("-" * 70)
    for dto in orders:
        items = sum(line.quantity for line in dto.lines)
        click.echo(
            f"{dto.id:<6} {dto.customer_id:<12} {dto.status:<10} {items:>5} {dto.total:>14}  {dto.created_at}"
        )


_note_options = [
    click.option("--note", default=None, help="Note recorded with the status change."),
    click.option("--author", default=None, help="Staff member making the change."),
]


def _with_note_options(func):
    for option in reversed(_note_options):
        func = option(func)
    return func


def _staff(author: str | None) -> Actor | None:
    if author is None:
        return None
    return Actor(id=author, name=author, role=Role.STAFF)


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
@_with_note_options
@click.pass_obj
def order_confirm(container: Container, order_id: int, note: str | None, author: str | None) -> None:
    """Confirm a pending order (deducts stock)."""
    handler = ConfirmOrderHandler(container.state_machine)

    try:
        handler.handle(order_id, actor=_staff(author), note=note)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} confirmed - stock deducted.")


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to complete.")
@_with_note_options
@click.pass_obj
def order_complete(container: Container, order_id: int, note: str | None, author: str | None) -> None:
    """Mark a confirmed order as delivered."""
    handler = CompleteOrderHandler(container.state_machine)

    try:
        handler.handle(order_id, actor=_staff(author), note=note)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} completed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.option("--customer", default=None, help="Cancel on behalf of this customer (pending orders only).")
@_with_note_options
@click.pass_obj
def order_cancel(
    container: Container,
    order_id: int,
    customer: str | None,
    note: str | None,
    author: str | None,
) -> None:
    """Cancel an order (restores stock if it was confirmed)."""
    if customer is not None and author is not None:
        raise click.UsageError("Use either --customer or --author, not both.")
    actor = Actor(id=customer, name=customer, role=Role.CUSTOMER) if customer else _staff(author)
    handler = CancelOrderHandler(container.state_machine)

    try:
        handler.handle(order_id, actor=actor, note=note)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")


@click.command("note")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--author", required=True, help="Staff member writing the note.")
@click.option("--text", required=True, help="Note content.")
@click.pass_obj
def order_note(container: Container, order_id: int, author: str, text: str) -> None:
    """Add an internal staff note to an order."""
    handler = AppendNoteHandler(container.ledger)

    try:
        note = handler.handle(order_id, author, text)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Note #{note.id} added to order #{order_id}.")
