"""Unit tests for the shared pricing helpers."""

from freshcart.domain.model.cart import Cart
from freshcart.domain.model.order import Order, OrderItem
from freshcart.domain.model.product import Product
from freshcart.domain.model.value_objects import Money, Quantity
from freshcart.domain.service.pricing import total_of, totals_match


def test_total_of_nothing_is_zero():
    assert total_of([]) == Money.zero()


def test_cart_and_order_agree_on_total():
    cart = Cart()
    cart.add_item(Product(id="1", name="Tomato", price=Money.of("179.90")), "1.5")
    cart.add_item(Product(id="2", name="Onion", price=Money.of("39.99")), "2.5")

    items = [
        OrderItem(li.product_id, "x", li.quantity, li.unit_price)
        for li in cart.to_order_items()
    ]
    order = Order.create("Ivan", "+79991234567", "Main St 1", items)

    assert order.total_amount == cart.total_price()
    assert total_of(cart.to_order_items()) == cart.total_price()


def test_totals_match():
    assert totals_match(None, Money.of("10"))
    assert totals_match(Money.of("10.00"), Money.of("10"))
    assert not totals_match(Money.of("9.99"), Money.of("10"))


def test_line_total_uses_exact_decimal():
    item = OrderItem("1", "Tomato", Quantity.of("1.5"), Money.of("0.10"))
    assert item.line_total.amount == Money.of("0.15").amount
