"""Shared BDD fixtures and step definitions for the ordering context."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then, when

from breadboard.catalogue.inventory import AdjustInventory
from breadboard.catalogue.product import Product
from breadboard.errors import BreadboardError
from breadboard.ordering.cart.engine import add_to_cart, get_cart
from breadboard.ordering.order.engine import place_order


@pytest.fixture()
def error():
    """Container for capturing the error raised by a When step."""
    return {"exc": None}


@pytest.fixture()
def placed():
    return {"order": None}


def _product_named(name):
    for product in current_domain.repository_for(Product).all_products():
        if product.name == name:
            return product
    raise AssertionError(f"No product named {name!r}")


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the demo buyer is signed in")
def demo_buyer(buyer_id):
    return buyer_id


@given(parsers.cfparse('the cart holds {qty:d} of "{name}"'))
def cart_holds(buyer_id, qty, name):
    add_to_cart(buyer_id, _product_named(name).id, qty)


@given(parsers.cfparse('the stock of "{name}" drops to {inventory:d}'))
def stock_drops(name, inventory):
    current_domain.process(
        AdjustInventory(product_id=_product_named(name).id, inventory=inventory),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the buyer adds {qty:d} of "{name}" to the cart'))
def buyer_adds(buyer_id, qty, name, error):
    try:
        add_to_cart(buyer_id, _product_named(name).id, qty)
    except BreadboardError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the buyer places an order for delivery to "{address_id}"'))
def buyer_places_order(buyer_id, address_id, error, placed):
    try:
        placed["order"] = place_order(buyer_id, address_id)
    except BreadboardError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the request is rejected with "{code}"'))
def rejected_with(error, code):
    assert error["exc"] is not None
    assert error["exc"].code == code


@then(parsers.cfparse("the suggested quantity is {qty:d}"))
def suggested_quantity(error, qty):
    assert error["exc"].suggested == qty


@then(parsers.cfparse('the cart holds {qty:d} of "{name}" line'))
def cart_line_quantity(buyer_id, qty, name):
    quantities = {item.name: item.quantity for item in get_cart(buyer_id).lines}
    assert quantities.get(name) == qty


@then("the cart is empty")
def cart_is_empty(buyer_id):
    assert get_cart(buyer_id).is_empty


@then("the cart is not empty")
def cart_is_not_empty(buyer_id):
    assert not get_cart(buyer_id).is_empty


@then(parsers.cfparse("the cart totals are {subtotal:g} subtotal, {tax:g} tax, {shipping:g} shipping, {total:g} total"))
def cart_totals(buyer_id, subtotal, tax, shipping, total):
    cart = get_cart(buyer_id)
    assert (cart.subtotal, cart.tax, cart.shipping, cart.total) == (subtotal, tax, shipping, total)
