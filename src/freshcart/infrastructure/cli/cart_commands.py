"""CLI commands for a shopping session's cart.

Every command loads the cart owned by ``--session``, applies one change
and saves it back.  Quantities below a product's minimum are clamped,
not rejected.
"""

from __future__ import annotations

from typing import Callable

import click

from freshcart.application.checkout import CheckoutHandler
from freshcart.application.create_order import CreateOrderHandler
from freshcart.domain.exceptions import DomainException, EntityNotFoundError
from freshcart.domain.model.cart import Cart
from freshcart.infrastructure.bootstrap import (
    cart_store,
    order_repository,
    product_repository,
)
from freshcart.infrastructure.cli.order_commands import display_order

session_option = click.option(
    "--session",
    envvar="FRESHCART_SESSION",
    default="default",
    show_default=True,
    help="Shopping session that owns the cart.",
)
product_option = click.option("--product-id", required=True, help="Product ID.")


def _display_cart(cart: Cart) -> None:
    if cart.is_empty:
        click.echo("Cart is empty.")
        return
    click.echo(f"  {'ID':<6} {'Product':<20} {'Kg':>6} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for line in cart.lines:
        click.echo(
            f"  {line.product_id:<6} {line.product_name:<20} {str(line.quantity):>6} "
            f"{str(line.unit_price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*55}")
    click.echo(f"  {'Cart Total':<34} {str(cart.total_price()):>21}")


def _update_cart(session: str, change: Callable[[Cart], None]) -> None:
    store = cart_store()
    try:
        cart = store.load(session)
        change(cart)
        store.save(session, cart)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_cart(cart)


@click.command("show")
@session_option
def cart_show(session: str) -> None:
    """Show the cart and its total."""
    try:
        cart = cart_store().load(session)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_cart(cart)


@click.command("add")
@product_option
@click.option("--quantity", default=None, help="Kilograms; defaults to the product minimum.")
@session_option
def cart_add(product_id: str, quantity: str | None, session: str) -> None:
    """Add a product to the cart."""

    def change(cart: Cart) -> None:
        product = product_repository().get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if product_id in cart:
            click.echo(f"{product.name} is already in the cart; use 'cart set' to change it.")
        requested = quantity if quantity is not None else product.min_quantity
        cart.add_item(product, requested)

    _update_cart(session, change)


@click.command("set")
@product_option
@click.option("--quantity", required=True, help="New weight in kg.")
@session_option
def cart_set(product_id: str, quantity: str, session: str) -> None:
    """Change the weight of a product already in the cart."""
    _update_cart(session, lambda cart: cart.set_quantity(product_id, quantity))


@click.command("inc")
@product_option
@session_option
def cart_inc(product_id: str, session: str) -> None:
    """Add half a kilogram."""
    _update_cart(session, lambda cart: cart.increase(product_id))


@click.command("dec")
@product_option
@session_option
def cart_dec(product_id: str, session: str) -> None:
    """Take away half a kilogram (never below the product minimum)."""
    _update_cart(session, lambda cart: cart.decrease(product_id))


@click.command("remove")
@product_option
@session_option
def cart_remove(product_id: str, session: str) -> None:
    """Remove a product from the cart."""
    _update_cart(session, lambda cart: cart.remove_item(product_id))


@click.command("clear")
@session_option
def cart_clear(session: str) -> None:
    """Empty the cart."""
    _update_cart(session, lambda cart: cart.clear())


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--phone", required=True, help="WhatsApp number, e.g. +79991234567.")
@click.option("--address", required=True, help="Delivery address.")
@session_option
def cart_checkout(customer: str, phone: str, address: str, session: str) -> None:
    """Place a cash-on-delivery order for everything in the cart."""
    store = cart_store()
    handler = CheckoutHandler(
        CreateOrderHandler(
            order_repo=order_repository(),
            product_repo=product_repository(),
        )
    )
    try:
        cart = store.load(session)
        dto = handler.handle(
            cart,
            customer_name=customer,
            contact_number=phone,
            delivery_address=address,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed (status={dto.status}). Pay cash on delivery.")
    click.echo()
    display_order(dto)

    # The order is stored at this point; report it even if cleanup fails.
    try:
        store.discard(session)
    except DomainException as exc:
        raise click.ClickException(
            f"Order #{dto.id} was placed, but the cart could not be cleared: {exc}. "
            f"Run 'freshcart cart clear --session {session}' before ordering again."
        )
