"""Catalogue lookup backed by the Recipe repository."""

from protean.utils.globals import current_domain

from caterly.catalogue.recipe import Recipe
from caterly.ordering.catalogue.port import CatalogueLookup, ResolvedRecipe


class RecipeRepositoryLookup(CatalogueLookup):
    def resolve(self, recipe_id: str) -> ResolvedRecipe:
        recipe = current_domain.repository_for(Recipe).get(recipe_id)
        return ResolvedRecipe(
            recipe_id=str(recipe.id),
            name=recipe.name,
            image=recipe.image,
            price=recipe.price,
            owner_id=str(recipe.owner_id),
        )

    def list_owned(self, caterer_id: str) -> set[str]:
        repo = current_domain.repository_for(Recipe)
        return {str(recipe.id) for recipe in repo._dao.query.filter(owner_id=str(caterer_id)).limit(None).all().items}
