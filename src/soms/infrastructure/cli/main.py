import click

from soms.infrastructure.cli.cart_commands import (
    cart_create,
    cart_delete,
    cart_list,
    cart_show,
    cart_update,
)
from soms.infrastructure.cli.sale_commands import (
    sale_create,
    sale_delete,
    sale_list,
    sale_show,
    sale_update,
)
from soms.infrastructure.config import get_settings
from soms.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """SOMS: Sales Order Management System."""
    configure_logging(get_settings().log_level)


@cli.group()
def sale() -> None:
    """Manage sales."""


@cli.group()
def cart() -> None:
    """Manage carts."""


# Register subcommands
sale.add_command(sale_create)
sale.add_command(sale_delete)
sale.add_command(sale_list)
sale.add_command(sale_show)
sale.add_command(sale_update)
cart.add_command(cart_create)
cart.add_command(cart_delete)
cart.add_command(cart_list)
cart.add_command(cart_show)
cart.add_command(cart_update)
