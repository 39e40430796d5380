import click

from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_change,
    cart_clear,
    cart_remove,
    cart_show,
)
from storefront.infrastructure.cli.inventory_commands import (
    inventory_history,
    inventory_set,
    inventory_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_complete,
    order_confirm,
    order_list,
    order_note,
    order_show,
    order_submit,
)
from storefront.infrastructure.cli.product_commands import product_list, product_seed
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront: cash-on-delivery order pipeline"""
    settings = Settings.from_env()
    configure_logging(settings)
    ctx.obj = build_container(settings)


@cli.group()
def cart() -> None:
    """Manage a customer's cart."""


@cli.group()
def order() -> None:
    """Place and process orders."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def inventory() -> None:
    """Inspect and adjust stock."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_change)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_cancel)
order.add_command(order_complete)
order.add_command(order_confirm)
order.add_command(order_list)
order.add_command(order_note)
order.add_command(order_show)
order.add_command(order_submit)
product.add_command(product_list)
product.add_command(product_seed)
inventory.add_command(inventory_history)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
