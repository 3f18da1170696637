"""CLI commands for users and their notifications."""

from __future__ import annotations

import click

from shop.domain.exceptions import DomainException
from shop.domain.model.notification import Notification
from shop.domain.model.user import UserRole
from shop.infrastructure.bootstrap import notification_inbox, user_directory


def _display_notifications(notifications: list[Notification]) -> None:
    if not notifications:
        click.echo("No notifications.")
        return
    for n in notifications:
        marker = " " if n.seen else "*"
        click.echo(f"{marker} {n.id}  {n.type.value:<15} {n.text}")


@click.command("add")
@click.option("--email", required=True, help="Email address.")
@click.option(
    "--role",
    type=click.Choice(["client", "admin"]),
    default="client",
    show_default=True,
)
def user_add(email: str, role: str) -> None:
    """Register a new user."""
    user_role = UserRole.ADMIN if role == "admin" else UserRole.CLIENT
    try:
        user = user_directory().register(email, user_role)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.id} registered ({role})")


@click.command("list")
def user_list() -> None:
    """List registered users."""
    users = user_directory().list_all()

    if not users:
        click.echo("No users found.")
        return

    for u in users:
        click.echo(f"{u.id:<38} {u.email:<30} {u.role.name.lower()}")


@click.command("list")
@click.option("--user", "user_id", required=True, help="User ID.")
def notification_list(user_id: str) -> None:
    """List the user's notifications (* marks unseen)."""
    _display_notifications(notification_inbox().list_for_user(user_id))


@click.command("seen")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--id", "notification_id", required=True, help="Notification ID.")
def notification_seen(user_id: str, notification_id: str) -> None:
    """Mark one of the user's notifications as seen."""
    try:
        notification_inbox().mark_seen(notification_id, user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Notification {notification_id} marked as seen.")
