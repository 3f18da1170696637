"""CLI commands for admin read-only reports."""

from __future__ import annotations

import click

from shop.infrastructure.bootstrap import admin_reports


@click.command("audit")
def admin_audit() -> None:
    """Show the catalog audit trail."""
    entries = admin_reports().audit_trail()

    if not entries:
        click.echo("Audit trail is empty.")
        return

    for e in entries:
        click.echo(
            f"{e.timestamp:%Y-%m-%d %H:%M:%S}  {e.admin_id:<38} {e.action.value:<13} "
            f"{e.target_id}  {e.old_value!r} -> {e.new_value!r}"
        )


@click.command("reorders")
def admin_reorders() -> None:
    """Show reorder requests raised by low stock."""
    requests = admin_reports().reorder_requests()

    if not requests:
        click.echo("No reorder requests.")
        return

    click.echo(f"{'Requested':<20} {'Product':<38} {'Stock':>6} {'Threshold':>10}")
    click.echo("-" * 77)
    for r in requests:
        click.echo(
            f"{r.requested_at:%Y-%m-%d %H:%M:%S}  {r.product_id:<38} "
            f"{r.stock_quantity:>6} {r.threshold:>10}"
        )


@click.command("notifications")
def admin_notifications() -> None:
    """Show every notification for every user."""
    notifications = admin_reports().all_notifications()

    if not notifications:
        click.echo("No notifications.")
        return

    for n in notifications:
        seen = "seen" if n.seen else "new"
        click.echo(f"{n.user_id:<38} {n.type.value:<15} {seen:<5} {n.text}")
