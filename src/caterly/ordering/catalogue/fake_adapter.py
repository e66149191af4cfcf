"""In-memory catalogue lookup for tests."""

from protean.exceptions import ObjectNotFoundError

from caterly.ordering.catalogue.port import CatalogueLookup, ResolvedRecipe


class FakeCatalogueLookup(CatalogueLookup):
    def __init__(self, recipes: list[ResolvedRecipe] | None = None):
        self._recipes = {r.recipe_id: r for r in recipes or []}
        self.resolved: list[str] = []

    def add(self, recipe_id, name="Recipe", price=10.0, owner_id="caterer-1", image=None) -> ResolvedRecipe:
        recipe = ResolvedRecipe(recipe_id=recipe_id, name=name, image=image, price=price, owner_id=owner_id)
        self._recipes[recipe_id] = recipe
        return recipe

    def remove(self, recipe_id) -> None:
        self._recipes.pop(recipe_id, None)

    def resolve(self, recipe_id: str) -> ResolvedRecipe:
        self.resolved.append(recipe_id)
        try:
            return self._recipes[recipe_id]
        except KeyError:
            raise ObjectNotFoundError(f"Recipe with id {recipe_id} does not exist") from None

    def list_owned(self, caterer_id: str) -> set[str]:
        return {r.recipe_id for r in self._recipes.values() if r.owner_id == caterer_id}
