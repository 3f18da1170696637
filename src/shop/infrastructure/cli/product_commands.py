"""CLI commands for the product catalog (listing is public, the rest admin)."""

from __future__ import annotations

import click

from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import product_ledger

_admin_option = click.option(
    "--admin", "admin_id", required=True, help="ID of the admin making the change."
)


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_ledger().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 78)
    for p in products:
        click.echo(f"{p.id:<38} {p.name:<20} {str(p.price):>10} {p.stock_quantity:>7}")


@click.command("add")
@_admin_option
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Initial stock quantity.")
def product_add(admin_id: str, name: str, price: str, stock: int) -> None:
    """Add a new product to the catalog."""
    try:
        product = product_ledger().create(admin_id, name, price, stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("price")
@_admin_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_price(admin_id: str, product_id: str, price: str) -> None:
    """Change a product's price."""
    try:
        product = product_ledger().change_price(product_id, price, admin_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} price updated to {product.price}")


@click.command("stock")
@_admin_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
def product_stock(admin_id: str, product_id: str, quantity: int) -> None:
    """Set a product's stock level."""
    try:
        product_ledger().change_stock(product_id, quantity, admin_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} stock set to {quantity}")


@click.command("delete")
@_admin_option
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(admin_id: str, product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        product_ledger().delete_by_id(product_id, admin_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
