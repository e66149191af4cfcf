"""End-to-end cart reconciliation through HttpRemoteCart against the API app."""

import pytest

from storefront.api_client import StorefrontClient
from storefront.cart.http_adapter import HttpRemoteCart
from storefront.cart.local import LocalCartStore
from storefront.cart.session import CartSession
from storefront.catalogue import fetch_catalogue
from storefront.checkout import checkout
from storefront.exceptions import RequestRejected


@pytest.fixture()
def storefront(client):
    return StorefrontClient(client=client)


@pytest.fixture()
def recipes(client, signup):
    _, headers = signup(role="caterer")

    def _recipe(name, price):
        body = {"name": name, "description": f"{name} special", "price": price}
        return client.post("/recipes", json=body, headers=headers).json()["recipe_id"]

    return {"jollof": _recipe("Jollof", 10.0), "suya": _recipe("Suya", 4.0)}


@pytest.fixture()
def buyer_phone(signup):
    signup(role="user", phone="+1-555-0100", password="s3cret-pass")
    return "+1-555-0100"


class TestHttpReconciliation:
    def test_sign_in_merges_and_resyncs(self, storefront, recipes, buyer_phone):
        jollof, suya = recipes["jollof"], recipes["suya"]
        storefront.login(buyer_phone, "s3cret-pass")
        remote = HttpRemoteCart(storefront)
        remote.set_quantity(suya, 5)

        # Browsing anonymously
        session = CartSession(store=LocalCartStore())
        session.add_item(jollof)
        session.add_item(suya)

        session.attach(remote)
        assert session.fetch_server_cart() is True

        assert session.items == {jollof: 1, suya: 5}
        assert remote.fetch() == {jollof: 1, suya: 5}

    def test_checkout_round_trip(self, storefront, recipes, buyer_phone, delivery_address, client):
        storefront.login(buyer_phone, "s3cret-pass")
        session = CartSession(store=LocalCartStore(), remote=HttpRemoteCart(storefront))
        session.add_item(recipes["jollof"])
        session.add_item(recipes["jollof"])

        order_id = checkout(storefront, session, fetch_catalogue(storefront), delivery_address)

        [order] = storefront.get("/orders/mine")
        assert order["order_id"] == order_id
        assert order["total_amount"] == 27.0
        assert storefront.get("/cart") == {"items": {}}

    def test_signed_out_remote_reports_failure(self, storefront):
        session = CartSession(store=LocalCartStore(), remote=HttpRemoteCart(storefront))
        assert session.add_item("anything") is False
        assert session.items == {"anything": 1}

    def test_rejected_request_carries_message(self, storefront):
        with pytest.raises(RequestRejected) as exc:
            storefront.login("+1-555-9999", "nope")
        assert exc.value.status_code == 400
        assert exc.value.message == "Invalid phone or password"


class TestCataloguePricing:
    def test_large_catalogue_prices_every_recipe(self, storefront, create_recipe):
        recipe_ids = [create_recipe("caterer-1", name=f"Dish {n}", price=2.0) for n in range(105)]

        catalogue = fetch_catalogue(storefront)
        assert len(catalogue) == 105

        session = CartSession(store=LocalCartStore())
        session.add_item(recipe_ids[0])
        session.add_item(recipe_ids[-1])
        assert session.total_amount(catalogue) == 4.0
