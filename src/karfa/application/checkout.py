"""Application service: Checkout use case.

Stores the buyer on the cart and renders a receipt.  The cart is not
cleared afterwards; a second checkout with the same lines is allowed.
"""

from __future__ import annotations

import logging

from karfa.application.formatting import format_receipt
from karfa.domain.exceptions import EmptyCartError, MissingNameError
from karfa.domain.model.cart import Cart

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, name: str | None, address: str | None) -> str:
        self.ensure_ready()
        self._cart.assign_buyer(name or "", address or "")
        logger.info(
            "Checked out %d line(s), total %s", len(self._cart.lines), self._cart.total
        )
        return format_receipt(self._cart)

    def ensure_ready(self) -> None:
        """Raise EmptyCartError before the caller asks for buyer details."""
        if self._cart.is_empty:
            raise EmptyCartError()

    @staticmethod
    def check_name(name: str | None) -> None:
        if not name or not name.strip():
            raise MissingNameError()
