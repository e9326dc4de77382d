import logging

import click

from freshcart.infrastructure.bootstrap import settings
from freshcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_clear,
    cart_dec,
    cart_inc,
    cart_remove,
    cart_set,
    cart_show,
)
from freshcart.infrastructure.cli.order_commands import (
    order_delete,
    order_list,
    order_show,
    order_status,
)
from freshcart.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_seed,
    product_update,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """FreshCart: grocery ordering with cash on delivery"""
    level = logging.INFO if verbose else settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


@cli.group()
def cart() -> None:
    """Build an order in a shopping session."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_dec)
cart.add_command(cart_inc)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)

order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)

product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_seed)
product.add_command(product_update)
