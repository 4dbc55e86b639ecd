"""Application service: Add To Cart use case.

Orchestrates the flow between the catalog and the Cart aggregate.
The checks run in a fixed order (ID, lookup, quantity) and the cart is
only touched once all of them pass.
"""

from __future__ import annotations

import logging

from karfa.application.dto import AddToCartResult
from karfa.application.formatting import format_product_line
from karfa.domain.exceptions import (
    InvalidIdError,
    InvalidQuantityError,
    ProductNotFoundError,
)
from karfa.domain.model.cart import Cart
from karfa.domain.model.product import Product
from karfa.domain.model.value_objects import Quantity
from karfa.domain.repository.product_repository import ProductRepository
from karfa.domain.validation import is_valid_integer, parse_integer

logger = logging.getLogger(__name__)

# Inclusive bounds for a single add; a merged line may grow past the max.
MIN_ADD_QUANTITY = 1
MAX_ADD_QUANTITY = 99


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository, cart: Cart) -> None:
        self._product_repo = product_repo
        self._cart = cart

    def handle(self, id_text: str | None, quantity_text: str | None) -> AddToCartResult:
        product = self.check_product_id(id_text)
        quantity = self.check_quantity(quantity_text)

        line, merged = self._cart.add(product, quantity)
        logger.info(
            "%s product #%d, line quantity now %d",
            "Merged" if merged else "Added",
            product.id,
            line.quantity.value,
        )
        return AddToCartResult(
            product_id=product.id,
            quantity=line.quantity.value,
            merged=merged,
            display=format_product_line(line.product, line.quantity.value),
        )

    # --- Field checks ---------------------------------------------------------

    def check_product_id(self, id_text: str | None) -> Product:
        """Resolve *id_text* to a catalog product."""
        product_id = parse_integer(id_text)
        if product_id is None or not is_valid_integer(
            product_id, 1, self._product_repo.count()
        ):
            logger.debug("Rejected product ID %r", id_text)
            raise InvalidIdError()

        # Unreachable while IDs stay contiguous, but the repository may disagree.
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError()
        return product

    @staticmethod
    def check_quantity(quantity_text: str | None) -> Quantity:
        quantity = parse_integer(quantity_text)
        if quantity is None or not is_valid_integer(
            quantity, MIN_ADD_QUANTITY, MAX_ADD_QUANTITY
        ):
            logger.debug("Rejected quantity %r", quantity_text)
            raise InvalidQuantityError()
        return Quantity(quantity)
