"""Recipe aggregate: a dish a caterer sells.

Placed orders capture name, image, price and owner at checkout, so nothing on
this aggregate is referenced by an order after placement.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, Text

from caterly.catalogue.events import RecipeCreated, RecipeUpdated
from caterly.domain import caterly

DEFAULT_CATEGORY = "Uncategorized"


@caterly.aggregate
class Recipe:
    name: String(required=True, max_length=200)
    description: Text(required=True)
    ingredients: Text()  # JSON array of strings
    category: String(max_length=100, default=DEFAULT_CATEGORY)
    image: Text()  # encoded image payload
    price: Float(required=True, min_value=0.0)
    owner_id: Identifier(required=True)
    created_at: DateTime()

    @classmethod
    def create(cls, owner_id, name, description, price, ingredients=None, category=None, image=None):
        now = datetime.now(UTC)
        recipe = cls(
            owner_id=owner_id,
            name=name,
            description=description,
            price=price,
            ingredients=json.dumps(list(ingredients or [])),
            category=category or DEFAULT_CATEGORY,
            image=image,
            created_at=now,
        )
        recipe.raise_(
            RecipeCreated(
                recipe_id=str(recipe.id),
                owner_id=str(owner_id),
                name=recipe.name,
                category=recipe.category,
                price=recipe.price,
                created_at=now,
            )
        )
        return recipe

    @property
    def ingredient_list(self) -> list[str]:
        return json.loads(self.ingredients) if self.ingredients else []

    def is_owned_by(self, identity_id) -> bool:
        return str(self.owner_id) == str(identity_id)

    def update(self, name=None, description=None, price=None, ingredients=None, category=None, image=None):
        """Apply a partial update; ``None`` leaves a field unchanged."""
        if name is not None:
            if not name.strip():
                raise ValidationError({"name": ["Recipe name cannot be blank"]})
            self.name = name
        if description is not None:
            if not description.strip():
                raise ValidationError({"description": ["Recipe description cannot be blank"]})
            self.description = description
        if price is not None:
            self.price = price
        if ingredients is not None:
            self.ingredients = json.dumps(list(ingredients))
        if category is not None:
            self.category = category or DEFAULT_CATEGORY
        if image is not None:
            self.image = image

        self.raise_(
            RecipeUpdated(
                recipe_id=str(self.id),
                owner_id=str(self.owner_id),
                name=self.name,
                category=self.category,
                price=self.price,
            )
        )
