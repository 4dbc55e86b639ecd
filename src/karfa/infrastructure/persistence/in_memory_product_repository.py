"""Process-local implementation of ProductRepository.

The catalog lives only as long as the process; nothing is written to disk.
"""

from __future__ import annotations

from karfa.domain.exceptions import ValidationError
from karfa.domain.model.product import Product
from karfa.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: list[Product] = []
        for product in products or []:
            self.add(product)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        return len(self._store) + 1

    def count(self) -> int:
        return len(self._store)

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self._store:
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._store)

    def add(self, product: Product) -> None:
        if self.get_by_id(product.id) is not None:
            raise ValidationError(f"Product ID {product.id} is already in use")
        self._store.append(product)
