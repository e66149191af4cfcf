"""Catalogue lookup factory.

Provides get_lookup() / set_lookup() to swap implementations:
- RecipeRepositoryLookup reads the Recipe repository (default)
- FakeCatalogueLookup pins recipes in memory for tests
"""

from caterly.ordering.catalogue.port import CatalogueLookup
from caterly.ordering.catalogue.recipe_adapter import RecipeRepositoryLookup

_current_lookup: CatalogueLookup | None = None


def get_lookup() -> CatalogueLookup:
    """Return the active catalogue lookup. Defaults to the repository-backed one."""
    global _current_lookup
    if _current_lookup is None:
        _current_lookup = RecipeRepositoryLookup()
    return _current_lookup


def set_lookup(lookup: CatalogueLookup) -> None:
    global _current_lookup
    _current_lookup = lookup


def reset_lookup() -> None:
    global _current_lookup
    _current_lookup = None
