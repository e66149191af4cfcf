"""Order placement: command and handler."""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from caterly.domain import caterly
from caterly.ordering.catalogue import get_lookup
from caterly.ordering.order.order import DeliveryAddress, Order, PaymentMethod

logger = structlog.get_logger(__name__)


@caterly.command(part_of="Order")
class PlaceOrder:
    buyer_id: Identifier(required=True)
    items: Text(required=True)  # JSON: list of {recipe_id, quantity}
    address: Text(required=True)  # JSON: delivery address dict
    method: String(required=True, choices=PaymentMethod)
    total_amount: Float(required=True, min_value=0.0)


def _requested_items(raw) -> list[dict]:
    items = json.loads(raw) if isinstance(raw, str) else raw
    if not items:
        raise ValidationError({"items": ["An order needs at least one item"]})

    for item in items:
        if not item.get("recipe_id"):
            raise ValidationError({"items": ["Every item needs a recipe_id"]})
        if int(item.get("quantity", 0)) < 1:
            raise ValidationError({"items": [f"Quantity for {item['recipe_id']} must be at least 1"]})
    return items


@caterly.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        requested = _requested_items(command.items)
        address_data = json.loads(command.address) if isinstance(command.address, str) else command.address

        # Resolve every recipe before anything is written
        lookup = get_lookup()
        lines = []
        for item in requested:
            recipe = lookup.resolve(str(item["recipe_id"]))
            lines.append(
                {
                    "recipe_id": recipe.recipe_id,
                    "name": recipe.name,
                    "image": recipe.image,
                    "price": recipe.price,
                    "quantity": int(item["quantity"]),
                    "caterer_id": recipe.owner_id,
                }
            )

        order = Order.place(
            buyer_id=command.buyer_id,
            address=DeliveryAddress(**address_data),
            method=command.method,
            total_amount=command.total_amount,
            lines=lines,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            buyer_id=str(command.buyer_id),
            line_count=len(lines),
            total_amount=command.total_amount,
        )
        return str(order.id)
