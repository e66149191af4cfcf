"""Catalogue lookup port: the ordering engine's only view of recipes.

Order placement captures a snapshot of each recipe through ``resolve`` and
item-status changes check ownership through ``list_owned``. Keeping the
contract this narrow lets tests pin prices and owners without a catalogue.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedRecipe:
    """Recipe details captured onto an order line at placement time."""

    recipe_id: str
    name: str
    image: str | None
    price: float
    owner_id: str


class CatalogueLookup(ABC):
    @abstractmethod
    def resolve(self, recipe_id: str) -> ResolvedRecipe:
        """Return the current snapshot of a recipe.

        Raises ``ObjectNotFoundError`` when the recipe does not exist.
        """
        ...

    @abstractmethod
    def list_owned(self, caterer_id: str) -> set[str]:
        """Return the ids of every recipe the caterer currently owns."""
        ...
