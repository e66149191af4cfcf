"""Server-side cart: one quantity map per authenticated identity.

The cart is keyed by its owner's identity id and is created lazily on the
first write. A line never holds a quantity below 1; setting a quantity of
zero or less removes the line.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer

from caterly.domain import caterly
from caterly.ordering.cart.events import CartCleared, CartQuantityChanged


@caterly.entity(part_of="ServerCart")
class CartLine:
    recipe_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)


@caterly.aggregate
class ServerCart:
    owner_id: Identifier(identifier=True)
    lines: HasMany(CartLine)
    updated_at: DateTime()

    @classmethod
    def create(cls, owner_id):
        return cls(owner_id=str(owner_id), updated_at=datetime.now(UTC))

    def _line_for(self, recipe_id):
        return next((line for line in self.lines if str(line.recipe_id) == str(recipe_id)), None)

    def as_map(self) -> dict[str, int]:
        return {str(line.recipe_id): line.quantity for line in self.lines}

    def increment(self, recipe_id, by=1):
        """Add ``by`` units of a recipe, creating the line at ``by``."""
        line = self._line_for(recipe_id)
        if line is None:
            self.add_lines(CartLine(recipe_id=str(recipe_id), quantity=by))
            quantity = by
        else:
            line.quantity += by
            quantity = line.quantity
        self._changed(recipe_id, quantity)

    def set_quantity(self, recipe_id, quantity):
        line = self._line_for(recipe_id)
        if quantity <= 0:
            if line is None:
                return
            self.remove_lines(line)
            quantity = 0
        elif line is None:
            self.add_lines(CartLine(recipe_id=str(recipe_id), quantity=quantity))
        else:
            line.quantity = quantity
        self._changed(recipe_id, quantity)

    def clear(self):
        for line in list(self.lines):
            self.remove_lines(line)
        self.updated_at = datetime.now(UTC)
        self.raise_(CartCleared(owner_id=str(self.owner_id)))

    def _changed(self, recipe_id, quantity):
        self.updated_at = datetime.now(UTC)
        self.raise_(CartQuantityChanged(owner_id=str(self.owner_id), recipe_id=str(recipe_id), quantity=quantity))
