"""CLI command for a one-shot order: fill a cart and check out."""

from __future__ import annotations

import click

from karfa.application.add_to_cart import AddToCartHandler
from karfa.application.checkout import CheckoutHandler
from karfa.application.dto import CartItemSpec
from karfa.domain.exceptions import DomainException
from karfa.infrastructure.bootstrap import build_shop


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '2:3,1:1' into CartItemSpec list.

    Only the shape is checked here; the ID and quantity are validated
    by the add-to-cart use case.
    """
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'.",
                param_hint="'--items'",
            )
        product_id, qty = pair.rsplit(":", 1)
        specs.append(CartItemSpec(product_id=product_id.strip(), quantity=qty.strip()))
    return specs


@click.command("order")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--name", required=True, help="Buyer name.")
@click.option("--address", required=True, help="Shipping address.")
def order(items: str, name: str, address: str) -> None:
    """Put items in a cart, check out and print the receipt."""
    specs = _parse_items(items)

    shop = build_shop()
    add_handler = AddToCartHandler(shop.catalog, shop.cart)
    checkout_handler = CheckoutHandler(shop.cart)

    try:
        for spec in specs:
            add_handler.handle(spec.product_id, spec.quantity)
        receipt = checkout_handler.handle(name, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(receipt)
