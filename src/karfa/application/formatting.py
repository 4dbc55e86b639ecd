"""Text rendering for products, carts and receipts.

Everything here is a pure function of its arguments.  Example output::

    HTML húfa — 5.000 kr.
    CSS sokkar — 2x3.000 kr. samtals 6.000 kr.
    Samtals: 11.000 kr.
"""

from __future__ import annotations

from karfa.domain.model.cart import Cart
from karfa.domain.model.product import Product
from karfa.domain.model.value_objects import Money
from karfa.domain.validation import is_valid_integer

EMPTY_CART_TEXT = "Karfan er tóm."


def format_currency(amount: int) -> str:
    """Render a whole-krona amount, e.g. ``123000 -> "123.000 kr."``."""
    return str(Money(amount))


def format_product_line(product: Product, quantity: int | None = None) -> str:
    """Render a product, with quantity and line total when *quantity* >= 1.

    A quantity of zero or below is treated the same as no quantity.
    """
    price = product.price
    if quantity is None or not is_valid_integer(quantity, 1):
        return f"{product.title} — {price}"

    quantity = int(quantity)  # 2.0 renders as "2x"
    total = price * quantity
    return f"{product.title} — {quantity}x{price} samtals {total}"


def format_cart_summary(cart: Cart) -> str:
    output = ""
    for line in cart.lines:
        output += format_product_line(line.product, line.quantity.value) + "\n"
    output += f"Samtals: {cart.total}"
    return output


def format_catalog_entry(product: Product) -> str:
    return f"#{product.id} {product.title} — {product.description} — {product.price}"


def format_receipt(cart: Cart) -> str:
    """Render the confirmation shown after a successful checkout."""
    return (
        f"Pöntun móttekin {cart.name}.\n"
        f"Vörur verða sendar á {cart.address}.\n"
        f"\n"
        f"{format_cart_summary(cart)}"
    )
