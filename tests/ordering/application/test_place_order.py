"""Application tests for order placement via domain.process()."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from caterly.catalogue.management import UpdateRecipe
from caterly.ordering.order.order import Order
from caterly.ordering.order.placement import PlaceOrder


def _place(buyer_id, items, address, total_amount=20.0, method="cod"):
    command = PlaceOrder(
        buyer_id=buyer_id,
        items=json.dumps(items),
        address=json.dumps(address),
        method=method,
        total_amount=total_amount,
    )
    return current_domain.process(command, asynchronous=False)


def _all_orders():
    return current_domain.repository_for(Order)._dao.query.all().items


class TestPlaceOrder:
    def test_captures_catalogue_snapshot(self, create_recipe, delivery_address):
        recipe_id = create_recipe("caterer-1", name="Jollof", price=10.0)

        order_id = _place("buyer-1", [{"recipe_id": recipe_id, "quantity": 2}], delivery_address)

        order = current_domain.repository_for(Order).get(order_id)
        [item] = order.items
        assert (item.name, item.price, item.quantity, item.status) == ("Jollof", 10.0, 2, "pending")
        assert item.caterer_id == "caterer-1"
        assert order.address.city == "Lagos"
        assert order.total_amount == 20.0

    def test_later_price_change_does_not_touch_order(self, create_recipe, delivery_address):
        recipe_id = create_recipe("caterer-1", price=10.0)
        order_id = _place("buyer-1", [{"recipe_id": recipe_id, "quantity": 1}], delivery_address)

        current_domain.process(UpdateRecipe(recipe_id=recipe_id, owner_id="caterer-1", price=99.0), asynchronous=False)

        assert current_domain.repository_for(Order).get(order_id).items[0].price == 10.0

    def test_empty_items_writes_nothing(self, delivery_address):
        with pytest.raises(ValidationError):
            _place("buyer-1", [], delivery_address)
        assert _all_orders() == []

    def test_unknown_recipe_writes_nothing(self, create_recipe, delivery_address):
        known = create_recipe("caterer-1")
        with pytest.raises(ObjectNotFoundError):
            _place(
                "buyer-1",
                [{"recipe_id": known, "quantity": 1}, {"recipe_id": "ghost", "quantity": 1}],
                delivery_address,
            )
        assert _all_orders() == []

    def test_quantity_must_be_positive(self, create_recipe, delivery_address):
        recipe_id = create_recipe("caterer-1")
        with pytest.raises(ValidationError):
            _place("buyer-1", [{"recipe_id": recipe_id, "quantity": 0}], delivery_address)

    def test_only_cash_on_delivery(self, create_recipe, delivery_address):
        recipe_id = create_recipe("caterer-1")
        with pytest.raises(ValidationError):
            _place("buyer-1", [{"recipe_id": recipe_id, "quantity": 1}], delivery_address, method="card")

    def test_multi_caterer_order(self, create_recipe, delivery_address):
        a = create_recipe("caterer-1", name="A")
        b = create_recipe("caterer-2", name="B")
        order_id = _place("buyer-1", [{"recipe_id": a, "quantity": 1}, {"recipe_id": b, "quantity": 3}], delivery_address)

        order = current_domain.repository_for(Order).get(order_id)
        assert {item.caterer_id for item in order.items} == {"caterer-1", "caterer-2"}
