"""FastAPI endpoints for the server cart and orders."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from caterly.identity.api.dependencies import current_identity, require_role
from caterly.identity.authentication import Identity
from caterly.ordering.api.schemas import (
    AddToCartRequest,
    CartResponse,
    ItemSelectionRequest,
    ItemStatusRequest,
    OrderIdResponse,
    OrderResponse,
    PlaceOrderRequest,
    UpdateCartItemRequest,
    UpdatedCountResponse,
)
from caterly.ordering.cart.management import AddToCart, ClearCart, UpdateCartItem, get_cart_map
from caterly.ordering.order.fulfillment import SetItemsStatus
from caterly.ordering.order.listing import list_orders_for_caterer, list_orders_for_user
from caterly.ordering.order.order import ItemStatus
from caterly.ordering.order.placement import PlaceOrder

caterer_only = require_role("caterer")

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_cart(identity: Identity = Depends(current_identity)) -> CartResponse:
    return CartResponse(items=get_cart_map(identity.identity_id))


@cart_router.post("/items", response_model=CartResponse)
async def add_cart_item(body: AddToCartRequest, identity: Identity = Depends(current_identity)) -> CartResponse:
    current_domain.process(AddToCart(owner_id=identity.identity_id, recipe_id=body.recipe_id), asynchronous=False)
    return CartResponse(items=get_cart_map(identity.identity_id))


@cart_router.put("/items/{recipe_id}", response_model=CartResponse)
async def update_cart_item(
    recipe_id: str, body: UpdateCartItemRequest, identity: Identity = Depends(current_identity)
) -> CartResponse:
    command = UpdateCartItem(owner_id=identity.identity_id, recipe_id=recipe_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return CartResponse(items=get_cart_map(identity.identity_id))


@cart_router.delete("", response_model=CartResponse)
async def clear_cart(identity: Identity = Depends(current_identity)) -> CartResponse:
    current_domain.process(ClearCart(owner_id=identity.identity_id), asynchronous=False)
    return CartResponse(items={})


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest, identity: Identity = Depends(current_identity)) -> OrderIdResponse:
    command = PlaceOrder(
        buyer_id=identity.identity_id,
        items=json.dumps([item.model_dump() for item in body.items]),
        address=json.dumps(body.address.model_dump()),
        method=body.method,
        total_amount=body.total_amount,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("/mine", response_model=list[OrderResponse])
async def my_orders(status: str | None = None, identity: Identity = Depends(current_identity)) -> list[OrderResponse]:
    return [OrderResponse.from_view(view) for view in list_orders_for_user(identity.identity_id, status=status)]


@order_router.get("/caterer", response_model=list[OrderResponse])
async def caterer_orders(identity: Identity = Depends(caterer_only)) -> list[OrderResponse]:
    return [OrderResponse.from_view(view) for view in list_orders_for_caterer(identity.identity_id)]


def _set_status(order_id: str, caterer_id: str, recipe_ids: list[str], status: str) -> UpdatedCountResponse:
    command = SetItemsStatus(
        caterer_id=caterer_id,
        order_id=order_id,
        recipe_ids=json.dumps(recipe_ids),
        new_status=status,
    )
    updated = current_domain.process(command, asynchronous=False)
    return UpdatedCountResponse(updated_count=updated)


@order_router.put("/{order_id}/items/accept", response_model=UpdatedCountResponse)
async def accept_items(
    order_id: str, body: ItemSelectionRequest, identity: Identity = Depends(caterer_only)
) -> UpdatedCountResponse:
    return _set_status(order_id, identity.identity_id, body.recipe_ids, ItemStatus.ACCEPTED.value)


@order_router.put("/{order_id}/items/reject", response_model=UpdatedCountResponse)
async def reject_items(
    order_id: str, body: ItemSelectionRequest, identity: Identity = Depends(caterer_only)
) -> UpdatedCountResponse:
    return _set_status(order_id, identity.identity_id, body.recipe_ids, ItemStatus.REJECTED.value)


@order_router.put("/{order_id}/items/status", response_model=UpdatedCountResponse)
async def set_item_status(
    order_id: str, body: ItemStatusRequest, identity: Identity = Depends(caterer_only)
) -> UpdatedCountResponse:
    return _set_status(order_id, identity.identity_id, body.recipe_ids, body.status)
