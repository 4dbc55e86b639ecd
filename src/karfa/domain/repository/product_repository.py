"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The catalog is append-only: there is no delete, so
``count() + 1`` is always an unused ID.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from karfa.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Return the ID the next added product will receive."""

    @abstractmethod
    def count(self) -> int:
        """Return how many products are in the catalog."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Append a new product to the catalog."""
