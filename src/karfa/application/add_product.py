"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from karfa.domain.exceptions import EmptyInputError, InvalidIntegerError
from karfa.domain.model.product import Product
from karfa.domain.model.value_objects import Money
from karfa.domain.repository.product_repository import ProductRepository
from karfa.domain.validation import is_valid_integer, parse_integer

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        title: str | None,
        description: str | None,
        price_text: str | None,
    ) -> Product:
        """Add a new product to the catalog.

        Fields are checked in prompt order so the first problem is the
        one reported.
        """
        title = self.check_title(title)
        description = self.check_description(description)
        price = self.check_price(price_text)

        product = Product(
            id=self._product_repo.next_id(),
            title=title,
            description=description,
            price=Money(price),
        )
        self._product_repo.add(product)
        logger.info("Added product #%d %r", product.id, product.title)
        return product

    # --- Field checks ---------------------------------------------------------

    @staticmethod
    def check_title(title: str | None) -> str:
        if not title or not title.strip():
            raise EmptyInputError("Titill má ekki vera tómur.")
        return title.strip()

    @staticmethod
    def check_description(description: str | None) -> str:
        if not description or not description.strip():
            raise EmptyInputError("Lýsing má ekki vera tóm.")
        return description.strip()

    @staticmethod
    def check_price(price_text: str | None) -> int:
        if not price_text or not price_text.strip():
            raise EmptyInputError("Verð má ekki vera tómt.")
        price = parse_integer(price_text)
        if price is None or not is_valid_integer(price, 1):
            logger.debug("Rejected product price %r", price_text)
            raise InvalidIntegerError("Verð verður að vera jákvæð heiltala.")
        return price
