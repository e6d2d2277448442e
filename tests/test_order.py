"""Tests for clients, the mediator, orders and the order command."""

import pytest

from cafeteria.patterns import (
    ConcreteClient, ConcreteMediator, Order, OrderCommand, CommandInvoker,
    Coffee, Tea, Cookie, OrderStatus
)


def test_client_announcements(capsys):
    client = ConcreteClient()
    client.place_order()
    client.view_order_history()
    assert capsys.readouterr().out == "Order placed\nOrder history viewed\n"


def test_mediator_notifies_without_storing_client(capsys):
    mediator = ConcreteMediator()
    mediator.notify(ConcreteClient(), "Your coffee is ready")
    mediator.notify(None, "Closing soon")

    out = capsys.readouterr().out
    assert out == "Notification to client: Your coffee is ready\nNotification to client: Closing soon\n"
    assert vars(mediator) == {}


def test_add_product_appends_in_call_order():
    order = Order(ConcreteClient())
    coffee = Coffee()
    items = [coffee, Tea(), coffee, Cookie()]

    for expected_count, product in enumerate(items, start=1):
        order.add_product(product)
        assert order.product_count() == expected_count

    assert order.products == tuple(items)
    assert order.product_count() == 4


def test_products_snapshot_is_not_the_backing_list():
    order = Order()
    order.add_product(Coffee())
    snapshot = order.products
    order.add_product(Tea())
    assert len(snapshot) == 1


def test_empty_order_is_truthy():
    order = Order()
    assert order
    assert order.product_count() == 0


def test_new_order_starts_created():
    assert Order().status is OrderStatus.CREATED


@pytest.mark.parametrize("n_products", [0, 1, 5])
def test_command_output_independent_of_contents(n_products, capsys):
    order = Order(ConcreteClient())
    for _ in range(n_products):
        order.add_product(Coffee())

    OrderCommand(order).execute()
    assert capsys.readouterr().out == "Order executed\n"


def test_invoker_records_history(capsys):
    invoker = CommandInvoker()
    invoker.execute_command(OrderCommand(Order()))
    invoker.execute_command(OrderCommand(Order()))

    assert invoker.get_history() == ["OrderCommand", "OrderCommand"]
    assert capsys.readouterr().out == "Order executed\nOrder executed\n"
