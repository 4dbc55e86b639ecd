"""Unit tests for the Cart aggregate and its merge rule."""

import pytest

from karfa.domain.exceptions import (
    EmptyCartError,
    MissingAddressError,
    MissingNameError,
    ValidationError,
)
from karfa.domain.model.cart import Cart
from karfa.domain.model.product import Product
from karfa.domain.model.value_objects import Money, Quantity


def _make_product(pid: int = 1, title: str = "Húfa", price: int = 5000) -> Product:
    """Helper to build a valid product."""
    return Product(id=pid, title=title, description="Lýsing", price=Money(price))


class TestProduct:

    def test_is_immutable(self):
        product = _make_product()
        with pytest.raises(AttributeError):
            product.title = "Annað"  # type: ignore[misc]

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _make_product(price=0)

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError, match="title"):
            Product(id=1, title="", description="x", price=Money(1))


class TestCartAdd:

    def test_new_cart_is_empty(self):
        cart = Cart()
        assert cart.is_empty
        assert cart.name is None
        assert cart.address is None

    def test_first_add_appends_line(self):
        cart = Cart()
        line, merged = cart.add(_make_product(), Quantity(2))
        assert merged is False
        assert cart.lines == [line]
        assert line.quantity == Quantity(2)

    def test_same_product_merges_into_one_line(self):
        cart = Cart()
        product = _make_product()
        cart.add(product, Quantity(3))
        line, merged = cart.add(product, Quantity(1))
        assert merged is True
        assert len(cart.lines) == 1
        assert line.quantity.value == 4

    def test_lines_keep_insertion_order(self):
        cart = Cart()
        cart.add(_make_product(2, "B"), Quantity(1))
        cart.add(_make_product(1, "A"), Quantity(1))
        cart.add(_make_product(2, "B"), Quantity(1))
        assert [line.product.id for line in cart.lines] == [2, 1]

    def test_merged_quantity_may_exceed_single_add_limit(self):
        cart = Cart()
        product = _make_product()
        cart.add(product, Quantity(99))
        line, _ = cart.add(product, Quantity(99))
        assert line.quantity.value == 198


class TestCartTotal:

    def test_empty_total_is_zero(self):
        assert Cart().total == Money(0)

    def test_total_is_sum_of_line_totals(self):
        cart = Cart()
        cart.add(_make_product(1, price=5000), Quantity(1))
        cart.add(_make_product(2, price=3000), Quantity(2))
        assert cart.total == Money(11000)


class TestAssignBuyer:

    def _filled_cart(self) -> Cart:
        cart = Cart()
        cart.add(_make_product(), Quantity(1))
        return cart

    def test_stores_name_and_address(self):
        cart = self._filled_cart()
        cart.assign_buyer("Jóna", "Laugavegur 1")
        assert cart.name == "Jóna"
        assert cart.address == "Laugavegur 1"

    def test_empty_cart_rejected_first(self):
        with pytest.raises(EmptyCartError):
            Cart().assign_buyer("", "")

    def test_missing_name(self):
        cart = self._filled_cart()
        with pytest.raises(MissingNameError):
            cart.assign_buyer("  ", "Laugavegur 1")
        assert cart.name is None

    def test_missing_address_leaves_cart_untouched(self):
        cart = self._filled_cart()
        with pytest.raises(MissingAddressError):
            cart.assign_buyer("Jóna", "")
        assert cart.name is None
        assert cart.address is None
