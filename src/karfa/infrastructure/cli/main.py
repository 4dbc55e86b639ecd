import click

from karfa.config import get_settings
from karfa.infrastructure.cli.order_commands import order
from karfa.infrastructure.cli.product_commands import product_add, product_list
from karfa.infrastructure.cli.shell_command import shell
from karfa.infrastructure.observability import setup_logging


@click.group()
def cli() -> None:
    """Karfa — console shopping cart"""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)


@cli.group()
def product() -> None:
    """Browse and add products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
cli.add_command(order)
cli.add_command(shell)
