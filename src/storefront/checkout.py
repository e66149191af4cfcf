"""Checkout: turn the signed-in buyer's cart into a cash-on-delivery order."""

import structlog

from storefront.api_client import StorefrontClient
from storefront.cart.session import CartSession
from storefront.catalogue import CatalogueSnapshot
from storefront.exceptions import EmptyCartError

logger = structlog.get_logger(__name__)

DELIVERY_FEE = 7.0
PAYMENT_METHOD = "cod"


def order_total(session: CartSession, catalogue: CatalogueSnapshot) -> float:
    return session.total_amount(catalogue) + DELIVERY_FEE


def checkout(client: StorefrontClient, session: CartSession, catalogue: CatalogueSnapshot, address: dict) -> str:
    """Place the order and clear the cart. Returns the new order id.

    API failures propagate; the cart is only cleared once the order exists.
    """
    if session.is_empty:
        raise EmptyCartError("Cannot check out an empty cart")

    payload = {
        "items": [{"recipe_id": recipe_id, "quantity": quantity} for recipe_id, quantity in session.items.items()],
        "address": address,
        "method": PAYMENT_METHOD,
        "total_amount": order_total(session, catalogue),
    }
    order_id = client.post("/orders", json=payload)["order_id"]
    logger.info("Order placed", order_id=order_id, total_amount=payload["total_amount"])

    session.clear()
    return order_id
