"""Product aggregate.

Products are created once, through the add-product use case, and never
change afterwards.  Cart lines hold a reference to the product itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from karfa.domain.exceptions import ValidationError
from karfa.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: int
    title: str
    description: str
    price: Money

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValidationError("Product ID must be greater than zero")
        if not self.title:
            raise ValidationError("Product title is required")
        if not self.description:
            raise ValidationError("Product description is required")
        if self.price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
