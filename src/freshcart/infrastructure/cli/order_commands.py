"""CLI commands for the Order aggregate (administrative surface)."""

from __future__ import annotations

import json

import click

from freshcart.application.delete_order import DeleteOrderHandler
from freshcart.application.dto import OrderDTO
from freshcart.application.list_orders import ListOrdersHandler
from freshcart.application.show_order import ShowOrderHandler
from freshcart.application.update_order_status import UpdateOrderStatusHandler
from freshcart.domain.exceptions import DomainException
from freshcart.domain.model.order import OrderStatus
from freshcart.infrastructure.bootstrap import order_repository
from freshcart.infrastructure.cli.admin import require_admin, token_option

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}  {dto.contact_number}")
    click.echo(f"Address:  {dto.delivery_address}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Kg':>6} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*48}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>6} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*48}")
    click.echo(f"  {'Order Total':<27} {dto.total:>21}")


@click.command("list")
@click.option("--status", type=_STATUS_CHOICE, default=None, help="Only orders in this status.")
def order_list(status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())
    try:
        orders = handler.handle(status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<11} {'Customer':<20} {'Total':>10}  Created")
    click.echo("-" * 75)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.status:<11} {dto.customer_name:<20} {dto.total:>10}  {dto.created_at}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the order as JSON.")
def order_show(order_id: int, as_json: bool) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())
    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2, ensure_ascii=False))
    else:
        display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--to", "new_status", required=True, type=_STATUS_CHOICE, help="New status.")
@token_option
def order_status(order_id: int, new_status: str, token: str | None) -> None:
    """Move an order to a new status (PENDING -> PROCESSING -> DELIVERED, or CANCELLED)."""
    require_admin(token)
    handler = UpdateOrderStatusHandler(order_repo=order_repository())
    try:
        dto = handler.handle(order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@token_option
def order_delete(order_id: int, token: str | None) -> None:
    """Delete an order and its items."""
    require_admin(token)
    handler = DeleteOrderHandler(order_repo=order_repository())
    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Order #{order_id} deleted.")
