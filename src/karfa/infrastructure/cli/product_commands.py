"""CLI commands for the Product aggregate.

The catalog is process-local, so ``add`` only validates and shows the
product it would create on top of the starting catalog.
"""

from __future__ import annotations

import click

from karfa.application.add_product import AddProductHandler
from karfa.application.formatting import format_product_line
from karfa.application.list_products import ListProductsHandler
from karfa.domain.exceptions import DomainException
from karfa.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price in whole krónur (e.g. 5000).")
def product_add(title: str, description: str, price: str) -> None:
    """Validate a new product and show it."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(title=title, description=description, price_text=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Vöru bætt við:\n#{product.id} {format_product_line(product)}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    lines = ListProductsHandler(product_repo=product_repository()).handle()

    if not lines:
        click.echo("Engar vörur.")
        return

    for line in lines:
        click.echo(line)
