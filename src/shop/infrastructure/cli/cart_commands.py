"""CLI commands for a user's cart."""

from __future__ import annotations

import click

from shop.domain.exceptions import DomainException
from shop.domain.model.cart import Cart
from shop.infrastructure.bootstrap import cart_manager

_user_option = click.option("--user", "user_id", required=True, help="User ID.")
_product_option = click.option("--product", "product_id", required=True, help="Product ID.")


def _display_cart(cart: Cart) -> None:
    if cart.is_empty:
        click.echo("Cart is empty.")
        return
    click.echo(f"  {'Product':<38} {'Qty':>5}")
    click.echo(f"  {'-'*44}")
    for line in cart.lines:
        click.echo(f"  {line.product_id:<38} {line.quantity:>5}")


@click.command("show")
@_user_option
def cart_show(user_id: str) -> None:
    """Show the user's cart."""
    _display_cart(cart_manager().get_cart(user_id))


@click.command("add")
@_user_option
@_product_option
@click.option("--quantity", required=True, type=int, help="Units to add.")
def cart_add(user_id: str, product_id: str, quantity: int) -> None:
    """Add units of a product to the cart."""
    try:
        cart = cart_manager().add_to_cart(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(cart)


@click.command("update")
@_user_option
@_product_option
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_update(user_id: str, product_id: str, quantity: int) -> None:
    """Set the quantity of a cart line."""
    try:
        cart = cart_manager().update_cart_item(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(cart)


@click.command("remove")
@_user_option
@_product_option
def cart_remove(user_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    _display_cart(cart_manager().remove_from_cart(user_id, product_id))


@click.command("clear")
@_user_option
def cart_clear(user_id: str) -> None:
    """Empty the cart."""
    cart_manager().clear_cart(user_id)
    click.echo("Cart cleared.")
