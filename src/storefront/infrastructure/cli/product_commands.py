"""CLI commands for the catalog."""

from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.seed import demo_catalog


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products and their variants."""
    products = container.catalog_repo.list_products()

    if not products:
        click.echo("No products found. Run 'storefront product seed' to load the demo catalog.")
        return

    for p in products:
        availability = f"{p.total_stock} available" if p.in_stock else "Unavailable"
        click.echo(f"{p.id:<6} {p.brand:<10} {p.name:<24} {availability}")
        for v in p.variants:
            click.echo(f"    {v.id:<6} {v.name:<28} {str(v.price):>11} {v.stock_quantity:>5} in stock")


@click.command("seed")
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Add missing demo products to a non-empty catalog.",
)
@click.pass_obj
def product_seed(container: Container, force: bool) -> None:
    """Load the demo catalog.

    Existing products are never overwritten: their stock belongs to the
    orders and adjustments already recorded against it.
    """
    existing = {p.id for p in container.catalog_repo.list_products()}
    if existing and not force:
        raise click.ClickException("Catalog is not empty; use --force to add missing products.")

    added = [p for p in demo_catalog() if p.id not in existing]
    for p in added:
        container.catalog_repo.save_product(p)
    click.echo(f"Loaded {len(added)} products.")
