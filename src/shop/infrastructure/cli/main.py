import click

from shop.infrastructure.cli.account_commands import (
    notification_list,
    notification_seen,
    user_add,
    user_list,
)
from shop.infrastructure.cli.admin_commands import (
    admin_audit,
    admin_notifications,
    admin_reorders,
)
from shop.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from shop.infrastructure.cli.order_commands import (
    order_checkout,
    order_list,
    order_payments,
    order_show,
)
from shop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_price,
    product_stock,
)
from shop.infrastructure.logging_config import LOG_LEVEL_ENV, setup_logging


@click.group()
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Verbosity of log output on stderr.",
)
def cli(log_level: str) -> None:
    """Shop: catalog, carts and checkout over CSV tables."""
    setup_logging(log_level)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Check out and browse orders."""


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def notification() -> None:
    """Read notifications."""


@cli.group()
def admin() -> None:
    """Admin reports."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_price)
product.add_command(product_stock)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_checkout)
order.add_command(order_list)
order.add_command(order_payments)
order.add_command(order_show)
user.add_command(user_add)
user.add_command(user_list)
notification.add_command(notification_list)
notification.add_command(notification_seen)
admin.add_command(admin_audit)
admin.add_command(admin_notifications)
admin.add_command(admin_reorders)
