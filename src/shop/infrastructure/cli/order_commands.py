"""CLI commands for checkout and order history."""

from __future__ import annotations

import click

from shop.application.dto import OrderDTO, order_to_dto, payment_to_dto
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import checkout_handler, order_queries

_user_option = click.option("--user", "user_id", required=True, help="User ID.")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Placed:  {dto.order_date}")
    click.echo()
    click.echo(f"  {'Product':<38} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*65}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<38} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Order Total':<45} {dto.total:>20}")


@click.command("checkout")
@_user_option
def order_checkout(user_id: str) -> None:
    """Buy everything in the user's cart."""
    try:
        result = checkout_handler().handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order_to_dto(result.order))
    payment = payment_to_dto(result.payment)
    click.echo()
    click.echo(f"Payment {payment.id}: {payment.amount} via {payment.method} ({payment.status})")


@click.command("list")
@_user_option
def order_list(user_id: str) -> None:
    """List the user's orders."""
    orders = [order_to_dto(o) for o in order_queries().list_for_user(user_id)]

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<38} {'Placed':<22} {'Status':<8} {'Total':>10}")
    click.echo("-" * 81)
    for dto in orders:
        click.echo(f"{dto.id:<38} {dto.order_date:<22} {dto.status:<8} {dto.total:>10}")


@click.command("show")
@_user_option
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(user_id: str, order_id: str) -> None:
    """Show details of one of the user's orders."""
    try:
        order = order_queries().get_order(order_id, user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order_to_dto(order))


@click.command("payments")
@_user_option
@click.option("--id", "order_id", required=True, help="Order ID.")
def order_payments(user_id: str, order_id: str) -> None:
    """Show the payments recorded for one of the user's orders."""
    try:
        payments = order_queries().get_payments(order_id, user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for dto in (payment_to_dto(p) for p in payments):
        click.echo(f"{dto.id}  {dto.payment_date}  {dto.method:<6} {dto.amount:>10}  {dto.status}")
