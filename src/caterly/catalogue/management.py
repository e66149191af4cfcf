"""Recipe management: commands, handler and read helpers."""

import json

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from caterly.catalogue.recipe import Recipe
from caterly.domain import caterly
from caterly.exceptions import PermissionDenied


@caterly.command(part_of="Recipe")
class CreateRecipe:
    owner_id: Identifier(required=True)
    name: String(required=True, max_length=200)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    ingredients: Text()  # JSON array of strings
    category: String(max_length=100)
    image: Text()


@caterly.command(part_of="Recipe")
class UpdateRecipe:
    recipe_id: Identifier(required=True)
    owner_id: Identifier(required=True)
    name: String(max_length=200)
    description: Text()
    price: Float(min_value=0.0)
    ingredients: Text()  # JSON array of strings
    category: String(max_length=100)
    image: Text()


@caterly.command(part_of="Recipe")
class DeleteRecipe:
    recipe_id: Identifier(required=True)
    owner_id: Identifier(required=True)


def _owned_recipe(recipe_id, owner_id) -> Recipe:
    recipe = current_domain.repository_for(Recipe).get(recipe_id)
    if not recipe.is_owned_by(owner_id):
        raise PermissionDenied("You can only modify your own recipes")
    return recipe


@caterly.command_handler(part_of=Recipe)
class ManageRecipeHandler:
    @handle(CreateRecipe)
    def create_recipe(self, command):
        recipe = Recipe.create(
            owner_id=command.owner_id,
            name=command.name,
            description=command.description,
            price=command.price,
            ingredients=json.loads(command.ingredients) if command.ingredients else None,
            category=command.category,
            image=command.image,
        )
        current_domain.repository_for(Recipe).add(recipe)
        return str(recipe.id)

    @handle(UpdateRecipe)
    def update_recipe(self, command):
        recipe = _owned_recipe(command.recipe_id, command.owner_id)
        recipe.update(
            name=command.name,
            description=command.description,
            price=command.price,
            ingredients=json.loads(command.ingredients) if command.ingredients else None,
            category=command.category,
            image=command.image,
        )
        current_domain.repository_for(Recipe).add(recipe)

    @handle(DeleteRecipe)
    def delete_recipe(self, command):
        recipe = _owned_recipe(command.recipe_id, command.owner_id)
        current_domain.repository_for(Recipe)._dao.delete(recipe)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
def _newest_first(recipes):
    return sorted(recipes, key=lambda r: r.created_at, reverse=True)


def list_recipes() -> list[Recipe]:
    return _newest_first(current_domain.repository_for(Recipe)._dao.query.limit(None).all().items)


def list_recipes_by_owner(owner_id) -> list[Recipe]:
    repo = current_domain.repository_for(Recipe)
    return _newest_first(repo._dao.query.filter(owner_id=str(owner_id)).limit(None).all().items)


def list_recipes_by_category(category: str) -> list[Recipe]:
    """Case-insensitive exact match on the category label."""
    wanted = category.strip().lower()
    return [recipe for recipe in list_recipes() if (recipe.category or "").lower() == wanted]
