"""Domain events for the ServerCart aggregate."""

from protean.fields import Identifier, Integer

from caterly.domain import caterly


@caterly.event(part_of="ServerCart")
class CartQuantityChanged:
    """A recipe's quantity changed; ``quantity == 0`` means the line was removed."""

    __version__ = 1

    owner_id: Identifier(required=True)
    recipe_id: Identifier(required=True)
    quantity: Integer(required=True)


@caterly.event(part_of="ServerCart")
class CartCleared:
    __version__ = 1

    owner_id: Identifier(required=True)
