"""Server cart commands and handler, plus the read helper."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from caterly.domain import caterly
from caterly.ordering.cart.cart import ServerCart


@caterly.command(part_of="ServerCart")
class AddToCart:
    owner_id: Identifier(required=True)
    recipe_id: Identifier(required=True)


@caterly.command(part_of="ServerCart")
class UpdateCartItem:
    """Set an exact quantity; zero or less removes the recipe."""

    owner_id: Identifier(required=True)
    recipe_id: Identifier(required=True)
    quantity: Integer(required=True)


@caterly.command(part_of="ServerCart")
class ClearCart:
    owner_id: Identifier(required=True)


def _load_or_create(owner_id) -> ServerCart:
    try:
        return current_domain.repository_for(ServerCart).get(owner_id)
    except ObjectNotFoundError:
        return ServerCart.create(owner_id)


@caterly.command_handler(part_of=ServerCart)
class ManageServerCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        cart = _load_or_create(command.owner_id)
        cart.increment(command.recipe_id)
        current_domain.repository_for(ServerCart).add(cart)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        cart = _load_or_create(command.owner_id)
        cart.set_quantity(command.recipe_id, command.quantity)
        current_domain.repository_for(ServerCart).add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        cart = _load_or_create(command.owner_id)
        cart.clear()
        current_domain.repository_for(ServerCart).add(cart)


def get_cart_map(owner_id) -> dict[str, int]:
    """Return the owner's quantity map; a cart never written reads as empty."""
    try:
        cart = current_domain.repository_for(ServerCart).get(owner_id)
    except ObjectNotFoundError:
        return {}
    return cart.as_map()
