"""Order aggregate: an immutable checkout record with per-item fulfilment status.

An order may hold items from several caterers. Each line item captures the
recipe's name, image, price and owning caterer at placement time, and moves
through its own status machine independently of the other lines:

    pending → accepted → preparing → shipped → delivered
    pending → rejected
    accepted → rejected

``rejected`` and ``delivered`` are terminal. Re-applying the current status is
allowed so repeated requests are idempotent.

The order-level ``status`` field is stored separately and is never derived
from the items; the buyer-facing summary is computed on read (see
``caterly.ordering.order.status``).
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from caterly.domain import caterly
from caterly.ordering.order.events import ItemsStatusChanged, OrderPlaced


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ItemStatus(Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    PREPARING = "preparing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    CASH_ON_DELIVERY = "cod"


# Item status transition map
_VALID_TRANSITIONS = {
    ItemStatus.PENDING: {ItemStatus.ACCEPTED, ItemStatus.REJECTED},
    ItemStatus.ACCEPTED: {ItemStatus.PREPARING, ItemStatus.REJECTED},
    ItemStatus.PREPARING: {ItemStatus.SHIPPED},
    ItemStatus.SHIPPED: {ItemStatus.DELIVERED},
    ItemStatus.REJECTED: set(),  # Terminal
    ItemStatus.DELIVERED: set(),  # Terminal
}


def can_transition(current: ItemStatus, target: ItemStatus) -> bool:
    return current == target or target in _VALID_TRANSITIONS[current]


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@caterly.value_object(part_of="Order")
class DeliveryAddress:
    """Where and to whom the order is delivered, as entered at checkout."""

    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    zipcode: String(max_length=20)
    country: String(required=True, max_length=100)
    phone: String(required=True, max_length=30)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@caterly.entity(part_of="Order")
class OrderLineItem:
    """One purchased recipe, with the details captured at checkout."""

    recipe_id: Identifier(required=True)
    name: String(required=True, max_length=200)
    image: Text()
    price: Float(required=True, min_value=0.0)
    quantity: Integer(required=True, min_value=1)
    status: String(choices=ItemStatus, default=ItemStatus.PENDING.value)
    caterer_id: Identifier(required=True)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@caterly.aggregate
class Order:
    buyer_id: Identifier(required=True)
    address: ValueObject(DeliveryAddress, required=True)
    method: String(required=True, choices=PaymentMethod)
    items: HasMany(OrderLineItem)
    total_amount: Float(required=True, min_value=0.0)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    placed_at: DateTime()

    @classmethod
    def place(cls, buyer_id, address, method, total_amount, lines):
        """Create an order from already-resolved lines.

        Args:
            lines: List of dicts with recipe_id, name, image, price, quantity
                   and caterer_id.
        """
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            buyer_id=str(buyer_id),
            address=address,
            method=method,
            total_amount=total_amount,
            status=OrderStatus.PENDING.value,
            placed_at=now,
        )
        for line in lines:
            order.add_items(
                OrderLineItem(
                    recipe_id=str(line["recipe_id"]),
                    name=line["name"],
                    image=line.get("image"),
                    price=line["price"],
                    quantity=line["quantity"],
                    status=ItemStatus.PENDING.value,
                    caterer_id=str(line["caterer_id"]),
                )
            )

        caterer_ids = list(dict.fromkeys(str(item.caterer_id) for item in order.items))
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                buyer_id=str(buyer_id),
                items=json.dumps(
                    [
                        {
                            "recipe_id": str(item.recipe_id),
                            "caterer_id": str(item.caterer_id),
                            "price": item.price,
                            "quantity": item.quantity,
                        }
                        for item in order.items
                    ]
                ),
                caterer_ids=json.dumps(caterer_ids),
                method=method,
                total_amount=total_amount,
                placed_at=now,
            )
        )
        return order

    def items_for_caterer(self, caterer_id) -> list[OrderLineItem]:
        return [item for item in self.items if str(item.caterer_id) == str(caterer_id)]

    def recipe_ids_for_caterer(self, caterer_id) -> set[str]:
        return {str(item.recipe_id) for item in self.items_for_caterer(caterer_id)}

    def set_items_status(self, caterer_id, recipe_ids, new_status) -> int:
        """Move the caterer's matching line items to ``new_status``.

        Every matched item is checked against the transition table before any
        is changed, so an illegal move leaves the whole order untouched.
        Returns the number of matched items (0 when nothing matched).
        """
        target = ItemStatus(new_status)
        requested = {str(recipe_id) for recipe_id in recipe_ids}
        matched = [item for item in self.items_for_caterer(caterer_id) if str(item.recipe_id) in requested]
        if not matched:
            return 0

        for item in matched:
            current = ItemStatus(item.status)
            if not can_transition(current, target):
                raise ValidationError(
                    {"status": [f"Cannot move item {item.recipe_id} from {current.value} to {target.value}"]}
                )

        for item in matched:
            item.status = target.value

        self.raise_(
            ItemsStatusChanged(
                order_id=str(self.id),
                caterer_id=str(caterer_id),
                recipe_ids=json.dumps(sorted(requested)),
                new_status=target.value,
                updated_count=len(matched),
                changed_at=datetime.now(UTC),
            )
        )
        return len(matched)
