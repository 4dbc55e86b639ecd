"""Cart aggregate.

The Cart owns its lines.  A product appears on at most one line: adding
it again grows the existing line instead of appending a duplicate.
Lines are never removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from karfa.domain.exceptions import (
    EmptyCartError,
    MissingAddressError,
    MissingNameError,
)
from karfa.domain.model.product import Product
from karfa.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """One product and how many of it the buyer wants."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    def increase(self, quantity: Quantity) -> None:
        self.quantity = self.quantity + quantity


@dataclass
class Cart:
    """Aggregate root for the buyer's cart.

    ``name`` and ``address`` stay ``None`` until a checkout succeeds.
    """

    lines: list[CartLine] = field(default_factory=list)
    name: str | None = None
    address: str | None = None

    # --- Commands -------------------------------------------------------------

    def add(self, product: Product, quantity: Quantity) -> tuple[CartLine, bool]:
        """Add *quantity* of *product*, merging into an existing line.

        Returns the affected line and True if it already existed.
        """
        line = self.find_line(product.id)
        if line is not None:
            line.increase(quantity)
            return line, True

        line = CartLine(product=product, quantity=quantity)
        self.lines.append(line)
        return line, False

    def assign_buyer(self, name: str, address: str) -> None:
        """Record who the order ships to.

        Checks run before anything is stored, so a rejected call leaves
        the cart untouched.
        """
        if self.is_empty:
            raise EmptyCartError()
        if not name or not name.strip():
            raise MissingNameError()
        if not address or not address.strip():
            raise MissingAddressError()
        self.name = name.strip()
        self.address = address.strip()

    # --- Queries --------------------------------------------------------------

    def find_line(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product.id == product_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result
