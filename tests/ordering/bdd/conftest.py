"""Shared BDD fixtures and step definitions for the Ordering context."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

from caterly.exceptions import NothingToUpdate, PermissionDenied
from caterly.ordering.catalogue import set_lookup
from caterly.ordering.catalogue.fake_adapter import FakeCatalogueLookup
from caterly.ordering.order.order import Order
from caterly.ordering.order.placement import PlaceOrder
from caterly.ordering.order.status import compute_overall_status

_ERROR_KINDS = {
    "permission": PermissionDenied,
    "validation": ValidationError,
    "nothing to update": NothingToUpdate,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for the first refused change in a scenario."""
    return {"exc": None}


@pytest.fixture()
def outcome():
    return {"updated": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.parse('an order with item "{first}" from "{first_caterer}" and item "{second}" from "{second_caterer}"'),
    target_fixture="order_id",
)
def order_with_two_caterers(first, first_caterer, second, second_caterer, delivery_address):
    lookup = FakeCatalogueLookup()
    lookup.add(first, owner_id=first_caterer)
    lookup.add(second, owner_id=second_caterer)
    set_lookup(lookup)

    command = PlaceOrder(
        buyer_id="buyer-1",
        items=json.dumps([{"recipe_id": first, "quantity": 1}, {"recipe_id": second, "quantity": 1}]),
        address=json.dumps(delivery_address),
        method="cod",
        total_amount=20.0,
    )
    return current_domain.process(command, asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
def _order(order_id):
    return current_domain.repository_for(Order).get(order_id)


@then(parsers.parse('item "{recipe_id}" is "{status}"'))
def item_has_status(order_id, recipe_id, status):
    item = next(item for item in _order(order_id).items if item.recipe_id == recipe_id)
    assert item.status == status


@then(parsers.parse('the overall status is "{status}"'))
def overall_status_is(order_id, status):
    assert compute_overall_status(_order(order_id).items) == status


@then(parsers.parse("{count:d} item is updated"))
def items_updated(outcome, count):
    assert outcome["updated"] == count


@then(parsers.parse('the change is refused as "{kind}"'))
def change_refused(error, kind):
    assert isinstance(error["exc"], _ERROR_KINDS[kind])
