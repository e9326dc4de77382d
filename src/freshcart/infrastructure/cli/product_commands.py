"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from freshcart.application.add_product import AddProductHandler
from freshcart.application.delete_product import DeleteProductHandler
from freshcart.application.seed_catalog import SeedCatalogHandler
from freshcart.application.update_product import UpdateProductHandler
from freshcart.domain.exceptions import DomainException
from freshcart.infrastructure.bootstrap import product_repository
from freshcart.infrastructure.cli.admin import require_admin, token_option


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    try:
        products = repo.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price/kg':>10} {'Min kg':>7}  {'Category':<12} Stock")
    click.echo("-" * 68)
    for p in products:
        stock = "yes" if p.in_stock else "no"
        click.echo(
            f"{p.id:<6} {p.name:<20} {str(p.price):>10} {str(p.min_quantity):>7}  {p.category:<12} {stock}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price per kg (e.g. 45.00).")
@click.option("--min-quantity", default="0.5", show_default=True, help="Minimum order weight in kg.")
@click.option("--category", default="other", show_default=True, help="Catalog category.")
@click.option("--description", default="", help="Short description.")
@click.option("--out-of-stock", is_flag=True, default=False, help="Add as unavailable.")
@token_option
def product_add(
    name: str,
    price: str,
    min_quantity: str,
    category: str,
    description: str,
    out_of_stock: bool,
    token: str | None,
) -> None:
    """Add a new product to the catalog."""
    require_admin(token)
    handler = AddProductHandler(product_repo=product_repository())
    try:
        product = handler.handle(
            name=name,
            price=price,
            min_quantity=min_quantity,
            in_stock=not out_of_stock,
            description=description,
            category=category,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}/kg")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price per kg (e.g. 49.90).")
@click.option("--min-quantity", default=None, help="New minimum order weight in kg.")
@click.option("--in-stock/--out-of-stock", default=None, help="Change availability.")
@click.option("--category", default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
@token_option
def product_update(
    product_id: str,
    name: str | None,
    price: str | None,
    min_quantity: str | None,
    in_stock: bool | None,
    category: str | None,
    description: str | None,
    token: str | None,
) -> None:
    """Update a product.  Existing orders keep the price they were placed at."""
    require_admin(token)
    handler = UpdateProductHandler(product_repo=product_repository())
    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            price=price,
            min_quantity=min_quantity,
            in_stock=in_stock,
            category=category,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product.id} '{product.name}' updated ({product.price}/kg)")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@token_option
def product_delete(product_id: str, token: str | None) -> None:
    """Remove a product from the catalog."""
    require_admin(token)
    handler = DeleteProductHandler(product_repo=product_repository())
    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product_id} deleted.")


@click.command("seed")
@token_option
def product_seed(token: str | None) -> None:
    """Fill an empty catalog with sample produce."""
    require_admin(token)
    handler = SeedCatalogHandler(product_repo=product_repository())
    try:
        added = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    if not added:
        click.echo("Catalog already has products; nothing seeded.")
        return
    click.echo(f"Seeded {len(added)} products.")
