"""Favorite recipes: add, remove and list."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from caterly.catalogue.recipe import Recipe
from caterly.domain import caterly
from caterly.identity.account import Account


@caterly.command(part_of="Account")
class AddFavorite:
    account_id: Identifier(required=True)
    recipe_id: Identifier(required=True)


@caterly.command(part_of="Account")
class RemoveFavorite:
    account_id: Identifier(required=True)
    recipe_id: Identifier(required=True)


@caterly.command_handler(part_of=Account)
class FavoritesHandler:
    @handle(AddFavorite)
    def add_favorite(self, command):
        # Only existing recipes can be favorited
        current_domain.repository_for(Recipe).get(command.recipe_id)

        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.add_favorite(command.recipe_id)
        repo.add(account)

    @handle(RemoveFavorite)
    def remove_favorite(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.remove_favorite(command.recipe_id)
        repo.add(account)


def list_favorites(account_id: str) -> list[Recipe]:
    """Resolve an account's favorites to recipes, silently dropping deleted ones."""
    account = current_domain.repository_for(Account).get(account_id)
    recipe_repo = current_domain.repository_for(Recipe)

    recipes = []
    for recipe_id in account.favorite_ids:
        matches = recipe_repo._dao.query.filter(id=recipe_id).all().items
        if matches:
            recipes.append(matches[0])
    return recipes
