"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from caterly.domain import caterly


@caterly.event(part_of="Order")
class OrderPlaced:
    """A buyer checked out. ``items`` is a JSON array of captured line items."""

    __version__ = 1

    order_id: Identifier(required=True)
    buyer_id: Identifier(required=True)
    items: Text(required=True)
    caterer_ids: Text(required=True)  # JSON array, distinct, in line order
    method: String(required=True)
    total_amount: Float(required=True)
    placed_at: DateTime(required=True)


@caterly.event(part_of="Order")
class ItemsStatusChanged:
    """A caterer moved some of their line items to a new status."""

    __version__ = 1

    order_id: Identifier(required=True)
    caterer_id: Identifier(required=True)
    recipe_ids: Text(required=True)  # JSON array
    new_status: String(required=True)
    updated_count: Integer(required=True)
    changed_at: DateTime(required=True)
