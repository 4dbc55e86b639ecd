"""Products every fresh shop starts with."""

from __future__ import annotations

from karfa.domain.model.product import Product
from karfa.domain.model.value_objects import Money


def default_products() -> list[Product]:
    return [
        Product(
            id=1,
            title="HTML húfa",
            description=(
                "Húfa sem heldur hausnum heitum og hvíslar hugsanlega að þér "
                "hvaða element væri best að nota."
            ),
            price=Money(5_000),
        ),
        Product(
            id=2,
            title="CSS sokkar",
            description="Sokkar sem skalast vel með hvaða fótum sem er.",
            price=Money(3_000),
        ),
        Product(
            id=3,
            title="JavaScript jakki",
            description="Mjög töff jakki fyrir öll sem skrifa JavaScript reglulega.",
            price=Money(20_000),
        ),
    ]
