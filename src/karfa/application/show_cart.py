"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from karfa.application.formatting import EMPTY_CART_TEXT, format_cart_summary
from karfa.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> str:
        if self._cart.is_empty:
            return EMPTY_CART_TEXT
        return format_cart_summary(self._cart)
