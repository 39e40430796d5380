"""CLI commands for stock management."""

from __future__ import annotations

import click

from storefront.application.adjust_stock import AdjustStockHandler
from storefront.application.show_inventory import ShowInventoryHandler, StockHistoryHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.actor import Actor, Role
from storefront.infrastructure.bootstrap import Container

LOW_STOCK_THRESHOLD = 5


@click.command("set")
@click.option("--variant", "variant_id", required=True, help="Variant ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
@click.option("--note", default="", help="Why the level changed (restock, count, ...).")
@click.option("--author", default=None, help="User making the adjustment.")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role], case_sensitive=False),
    default=Role.ADMIN.value,
    show_default=True,
    help="Role of --author; only ADMIN may adjust stock.",
)
@click.pass_obj
def inventory_set(
    container: Container,
    variant_id: str,
    quantity: int,
    note: str,
    author: str | None,
    role: str,
) -> None:
    """Set the stock level of a variant."""
    actor = Actor(id=author, name=author, role=Role(role.upper())) if author else None
    handler = AdjustStockHandler(container.catalog_repo, container.reconciler)

    try:
        dto = handler.handle(variant_id, quantity, actor=actor, note=note)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for {dto.product_name} ({dto.variant_name}) set to {dto.stock}")


@click.command("show")
@click.pass_obj
def inventory_show(container: Container) -> None:
    """Show current stock levels."""
    lines = ShowInventoryHandler(container.catalog_repo).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'Variant':<8} {'Product':<20} {'Variant name':<26} {'Price':>11} {'Stock':>6}")
    click.echo("-" * 75)
    for line in lines:
        flag = "  LOW" if line.stock < LOW_STOCK_THRESHOLD else ""
        click.echo(
            f"{line.variant_id:<8} {line.product_name:<20} {line.variant_name:<26} "
            f"{line.price:>11} {line.stock:>6}{flag}"
        )


@click.command("history")
@click.option("--variant", "variant_id", required=True, help="Variant ID.")
@click.pass_obj
def inventory_history(container: Container, variant_id: str) -> None:
    """Show every recorded stock change for a variant."""
    handler = StockHistoryHandler(container.catalog_repo, container.movement_repo)

    try:
        movements = handler.handle(variant_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not movements:
        click.echo("No stock movements recorded.")
        return

    click.echo(f"{'When':<22} {'Change':>7}  {'Reason':<18} {'Order':>6}  Note")
    click.echo("-" * 70)
    for m in movements:
        order = str(m.order_id) if m.order_id is not None else "-"
        click.echo(f"{m.created_at:<22} {m.quantity_change:>+7}  {m.reason:<18} {order:>6}  {m.note}")
