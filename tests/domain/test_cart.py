"""Unit tests for the Cart aggregate."""

from decimal import Decimal

import pytest

from freshcart.domain.exceptions import ValidationError
from freshcart.domain.model.cart import Cart
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import LineItem, Money, Quantity


def _potato() -> Product:
    return Product(id="1", name="Potato", price=Money.of("45"), min_quantity=Decimal("1"))


def _carrot() -> Product:
    return Product(id="2", name="Carrot", price=Money.of("60"), min_quantity=Decimal("0.5"))


class TestAddItem:

    def test_new_line_at_requested_quantity(self):
        cart = Cart()
        line = cart.add_item(_potato(), "2")
        assert line.quantity == Quantity.of("2")
        assert len(cart) == 1

    @pytest.mark.parametrize("requested", ["0", "0.2", "-4", "0.99", "1.01", "3.3", "7"])
    def test_quantity_is_at_least_minimum_and_on_step(self, requested):
        cart = Cart()
        line = cart.add_item(_potato(), requested)
        assert line.quantity.value >= Decimal("1")
        assert line.quantity.value % Decimal("0.5") == 0

    def test_below_minimum_clamps_to_minimum(self):
        cart = Cart()
        line = cart.add_item(_potato(), "0.5")
        assert line.quantity == Quantity.of("1")

    def test_price_is_captured_when_added(self):
        potato = _potato()
        cart = Cart()
        cart.add_item(potato, "1")
        potato.update_price(Money.of("99"))
        assert cart.get("1").unit_price == Money.of("45")

    def test_adding_existing_product_is_a_no_op(self):
        cart = Cart()
        cart.add_item(_potato(), "2")
        line = cart.add_item(_potato(), "5")
        assert line.quantity == Quantity.of("2")
        assert len(cart) == 1

    def test_out_of_stock_product_rejected(self):
        product = _potato()
        product.in_stock = False
        with pytest.raises(ValidationError, match="not available"):
            Cart().add_item(product, "1")


class TestSetQuantity:

    def test_sets_quantity(self):
        cart = Cart()
        cart.add_item(_carrot(), "0.5")
        cart.set_quantity("2", "3")
        assert cart.get("2").quantity == Quantity.of("3")

    def test_below_minimum_clamps(self):
        cart = Cart()
        cart.add_item(_potato(), "3")
        cart.set_quantity("1", "0.5")
        assert cart.get("1").quantity == Quantity.of("1")

    def test_snaps_to_step(self):
        cart = Cart()
        cart.add_item(_carrot(), "1")
        cart.set_quantity("2", "1.2")
        assert cart.get("2").quantity == Quantity.of("1.5")

    def test_clamping_valid_quantity_is_no_op(self):
        cart = Cart()
        cart.add_item(_potato(), "2.5")
        cart.set_quantity("1", "2.5")
        assert cart.get("1").quantity == Quantity.of("2.5")

    def test_any_sequence_stays_orderable(self):
        cart = Cart()
        cart.add_item(_potato(), "1")
        for value in ["5", "-1", "0.3", "2.7", "0", "1.5", "0.9"]:
            cart.set_quantity("1", value)
            assert cart.get("1").quantity.value >= Decimal("1")
            assert cart.get("1").quantity.value % Decimal("0.5") == 0

    def test_absent_product_is_ignored(self):
        cart = Cart()
        cart.set_quantity("missing", "2")
        assert cart.is_empty


class TestStepping:

    def test_increase_twice(self):
        cart = Cart()
        cart.add_item(_potato(), "1")
        cart.increase("1")
        cart.increase("1")
        assert cart.get("1").quantity == Quantity.of("2.0")
        assert cart.total_price() == Money.of("90")

    def test_decrease_stops_at_minimum(self):
        cart = Cart()
        cart.add_item(_potato(), "1.5")
        cart.decrease("1")
        cart.decrease("1")
        cart.decrease("1")
        assert cart.get("1").quantity == Quantity.of("1")

    def test_up_and_down_returns_to_exact_value(self):
        cart = Cart()
        cart.add_item(_carrot(), "0.5")
        for _ in range(7):
            cart.increase("2")
        for _ in range(7):
            cart.decrease("2")
        assert cart.get("2").quantity.value == Decimal("0.5")
        assert cart.total_price() == Money.of("30")


class TestRemoveAndClear:

    def test_remove_deletes_line(self):
        cart = Cart()
        cart.add_item(_potato(), "1")
        cart.remove_item("1")
        assert "1" not in cart
        assert cart.is_empty

    def test_remove_is_idempotent(self):
        cart = Cart()
        cart.remove_item("1")
        cart.remove_item("1")
        assert cart.is_empty

    def test_add_then_remove_restores_total(self):
        cart = Cart()
        cart.add_item(_potato(), "2")
        before = cart.total_price()
        cart.add_item(_carrot(), "1.5")
        cart.remove_item("2")
        assert cart.total_price() == before

    def test_clear(self):
        cart = Cart()
        cart.add_item(_potato(), "1")
        cart.add_item(_carrot(), "1")
        cart.clear()
        assert cart.is_empty
        assert cart.total_price() == Money.zero()


class TestTotalsAndOrderItems:

    def test_empty_cart_total_is_zero(self):
        assert Cart().total_price() == Money.zero()

    def test_total_is_sum_of_lines(self):
        cart = Cart()
        cart.add_item(_potato(), "2")  # 90
        cart.add_item(_carrot(), "1.5")  # 90
        assert cart.total_price() == Money.of("180")

    def test_to_order_items_in_insertion_order(self):
        cart = Cart()
        cart.add_item(_carrot(), "1")
        cart.add_item(_potato(), "2")
        assert cart.to_order_items() == [
            LineItem("2", Quantity.of("1"), Money.of("60")),
            LineItem("1", Quantity.of("2"), Money.of("45")),
        ]
