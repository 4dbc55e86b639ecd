"""Unit tests for product, cart and receipt rendering."""

import pytest

from karfa.application.formatting import (
    format_cart_summary,
    format_catalog_entry,
    format_currency,
    format_product_line,
    format_receipt,
)
from karfa.domain.model.cart import Cart
from karfa.domain.model.product import Product
from karfa.domain.model.value_objects import Money, Quantity

HUFA = Product(id=1, title="HTML húfa", description="Hlý húfa.", price=Money(5000))
SOKKAR = Product(id=2, title="CSS sokkar", description="Skalast vel.", price=Money(3000))


class TestFormatCurrency:

    def test_groups_thousands(self):
        assert format_currency(123000) == "123.000 kr."

    def test_matches_money_str(self):
        assert format_currency(20000) == str(Money(20000))


class TestFormatProductLine:

    def test_without_quantity(self):
        assert format_product_line(HUFA) == "HTML húfa — 5.000 kr."

    def test_with_quantity(self):
        assert format_product_line(SOKKAR, 2) == (
            "CSS sokkar — 2x3.000 kr. samtals 6.000 kr."
        )

    def test_quantity_one_still_shows_total(self):
        assert format_product_line(HUFA, 1) == "HTML húfa — 1x5.000 kr. samtals 5.000 kr."

    def test_integral_float_quantity_renders_as_int(self):
        assert format_product_line(SOKKAR, 2.0) == (  # type: ignore[arg-type]
            "CSS sokkar — 2x3.000 kr. samtals 6.000 kr."
        )

    @pytest.mark.parametrize("quantity", [0, -1, -50])
    def test_non_positive_quantity_falls_back(self, quantity):
        assert format_product_line(HUFA, quantity) == "HTML húfa — 5.000 kr."


class TestFormatCartSummary:

    def test_empty_cart_shows_zero_total(self):
        assert format_cart_summary(Cart()) == "Samtals: 0 kr."

    def test_lines_then_total(self):
        cart = Cart()
        cart.add(HUFA, Quantity(1))
        cart.add(SOKKAR, Quantity(2))
        assert format_cart_summary(cart) == (
            "HTML húfa — 1x5.000 kr. samtals 5.000 kr.\n"
            "CSS sokkar — 2x3.000 kr. samtals 6.000 kr.\n"
            "Samtals: 11.000 kr."
        )


class TestCatalogEntryAndReceipt:

    def test_catalog_entry(self):
        assert format_catalog_entry(HUFA) == "#1 HTML húfa — Hlý húfa. — 5.000 kr."

    def test_receipt(self):
        cart = Cart()
        cart.add(SOKKAR, Quantity(4))
        cart.assign_buyer("Jón", "Laugavegur 1")
        assert format_receipt(cart) == (
            "Pöntun móttekin Jón.\n"
            "Vörur verða sendar á Laugavegur 1.\n"
            "\n"
            "CSS sokkar — 4x3.000 kr. samtals 12.000 kr.\n"
            "Samtals: 12.000 kr."
        )
