"""Client-side snapshot of the recipe catalogue, used to price the cart."""

from dataclasses import dataclass

from storefront.api_client import StorefrontClient


@dataclass(frozen=True)
class CatalogueEntry:
    recipe_id: str
    name: str
    price: float
    category: str = "Uncategorized"
    image: str | None = None


class CatalogueSnapshot:
    """Recipes as fetched at one moment. Unknown ids simply have no entry."""

    def __init__(self, entries=()):
        self._entries = {entry.recipe_id: entry for entry in entries}

    @classmethod
    def from_payload(cls, recipes: list[dict]) -> "CatalogueSnapshot":
        return cls(
            CatalogueEntry(
                recipe_id=recipe["recipe_id"],
                name=recipe["name"],
                price=float(recipe["price"]),
                category=recipe.get("category") or "Uncategorized",
                image=recipe.get("image"),
            )
            for recipe in recipes
        )

    def get(self, recipe_id: str) -> CatalogueEntry | None:
        return self._entries.get(recipe_id)

    def __contains__(self, recipe_id) -> bool:
        return recipe_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def fetch_catalogue(client: StorefrontClient) -> CatalogueSnapshot:
    return CatalogueSnapshot.from_payload(client.get("/recipes"))
