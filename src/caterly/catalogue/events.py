"""Domain events for the Recipe aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from caterly.domain import caterly


@caterly.event(part_of="Recipe")
class RecipeCreated:
    """A caterer published a new recipe."""

    __version__ = 1

    recipe_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Float(required=True)
    created_at: DateTime(required=True)


@caterly.event(part_of="Recipe")
class RecipeUpdated:
    __version__ = 1

    recipe_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Float(required=True)
