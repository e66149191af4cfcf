"""Pydantic request/response schemas for the Cart and Order APIs.

These are external contracts, kept separate from the internal Protean
commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from caterly.ordering.order.listing import OrderView
from caterly.ordering.order.order import OrderLineItem


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(BaseModel):
    first_name: str
    last_name: str
    email: str
    street: str
    city: str
    state: str | None = None
    zipcode: str | None = None
    country: str
    phone: str


class OrderItemRequest(BaseModel):
    recipe_id: str
    quantity: int = Field(ge=1, default=1)


# ---------------------------------------------------------------------------
# Cart Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    recipe_id: str


class UpdateCartItemRequest(BaseModel):
    quantity: int


class CartResponse(BaseModel):
    items: dict[str, int]


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [{"recipe_id": "rcp-001", "quantity": 2}],
                    "address": {
                        "first_name": "Ada",
                        "last_name": "Obi",
                        "email": "ada@example.com",
                        "street": "4 Palm Avenue",
                        "city": "Lagos",
                        "state": "LA",
                        "zipcode": "100001",
                        "country": "NG",
                        "phone": "+234-800-000-0000",
                    },
                    "method": "cod",
                    "total_amount": 32.0,
                }
            ]
        }
    }

    items: list[OrderItemRequest]
    address: AddressSchema
    method: str = "cod"
    total_amount: float = Field(ge=0)


class ItemSelectionRequest(BaseModel):
    recipe_ids: list[str]


class ItemStatusRequest(BaseModel):
    recipe_ids: list[str]
    status: str


# ---------------------------------------------------------------------------
# Order Response Schemas
# ---------------------------------------------------------------------------
class OrderIdResponse(BaseModel):
    order_id: str


class UpdatedCountResponse(BaseModel):
    updated_count: int


class LineItemResponse(BaseModel):
    recipe_id: str
    name: str
    image: str | None = None
    price: float
    quantity: int
    status: str
    caterer_id: str

    @classmethod
    def from_item(cls, item: OrderLineItem) -> "LineItemResponse":
        return cls(
            recipe_id=str(item.recipe_id),
            name=item.name,
            image=item.image,
            price=item.price,
            quantity=item.quantity,
            status=item.status,
            caterer_id=str(item.caterer_id),
        )


class OrderResponse(BaseModel):
    order_id: str
    buyer_id: str
    address: AddressSchema
    method: str
    status: str
    total_amount: float
    placed_at: datetime | None = None
    items: list[LineItemResponse]
    overall_status: str
    status_summary: str

    @classmethod
    def from_view(cls, view: OrderView) -> "OrderResponse":
        order = view.order
        address = order.address
        return cls(
            order_id=str(order.id),
            buyer_id=str(order.buyer_id),
            address=AddressSchema(
                first_name=address.first_name,
                last_name=address.last_name,
                email=address.email,
                street=address.street,
                city=address.city,
                state=address.state,
                zipcode=address.zipcode,
                country=address.country,
                phone=address.phone,
            ),
            method=order.method,
            status=order.status,
            total_amount=order.total_amount,
            placed_at=order.placed_at,
            items=[LineItemResponse.from_item(item) for item in view.items],
            overall_status=view.overall_status,
            status_summary=view.summary,
        )
