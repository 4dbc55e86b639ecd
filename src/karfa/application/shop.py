"""The explicit state handle every use case operates on."""

from __future__ import annotations

from dataclasses import dataclass, field

from karfa.domain.model.cart import Cart
from karfa.domain.repository.product_repository import ProductRepository


@dataclass
class Shop:
    """One catalog and the single cart that shops from it."""

    catalog: ProductRepository
    cart: Cart = field(default_factory=Cart)
