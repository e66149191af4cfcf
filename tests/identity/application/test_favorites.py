"""Application tests for favorites via domain.process()."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from caterly.catalogue.management import DeleteRecipe
from caterly.identity.account import Account
from caterly.identity.favorites import AddFavorite, RemoveFavorite, list_favorites


@pytest.fixture()
def buyer_id(register_account):
    return register_account()


@pytest.fixture()
def caterer_id(register_account):
    return register_account(role="caterer")


class TestFavoritesCommands:
    def test_add_and_list(self, buyer_id, caterer_id, create_recipe):
        recipe_id = create_recipe(caterer_id, name="Suya")
        current_domain.process(AddFavorite(account_id=buyer_id, recipe_id=recipe_id), asynchronous=False)

        favorites = list_favorites(buyer_id)
        assert [recipe.name for recipe in favorites] == ["Suya"]

    def test_unknown_recipe_cannot_be_favorited(self, buyer_id):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(AddFavorite(account_id=buyer_id, recipe_id="missing"), asynchronous=False)

    def test_duplicate_is_rejected(self, buyer_id, caterer_id, create_recipe):
        recipe_id = create_recipe(caterer_id)
        current_domain.process(AddFavorite(account_id=buyer_id, recipe_id=recipe_id), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(AddFavorite(account_id=buyer_id, recipe_id=recipe_id), asynchronous=False)

    def test_remove_is_idempotent(self, buyer_id, caterer_id, create_recipe):
        recipe_id = create_recipe(caterer_id)
        current_domain.process(AddFavorite(account_id=buyer_id, recipe_id=recipe_id), asynchronous=False)
        current_domain.process(RemoveFavorite(account_id=buyer_id, recipe_id=recipe_id), asynchronous=False)
        current_domain.process(RemoveFavorite(account_id=buyer_id, recipe_id=recipe_id), asynchronous=False)

        account = current_domain.repository_for(Account).get(buyer_id)
        assert account.favorite_ids == []

    def test_deleted_recipes_are_skipped(self, buyer_id, caterer_id, create_recipe):
        kept = create_recipe(caterer_id, name="Kept")
        dropped = create_recipe(caterer_id, name="Dropped")
        for recipe_id in (kept, dropped):
            current_domain.process(AddFavorite(account_id=buyer_id, recipe_id=recipe_id), asynchronous=False)

        current_domain.process(DeleteRecipe(recipe_id=dropped, owner_id=caterer_id), asynchronous=False)

        assert [recipe.name for recipe in list_favorites(buyer_id)] == ["Kept"]
