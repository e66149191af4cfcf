"""Remote cart port (abstract interface).

The server-side copy of a signed-in buyer's cart. Adapters raise
``StorefrontError`` subclasses on failure; callers decide whether to swallow.
"""

from abc import ABC, abstractmethod


class RemoteCart(ABC):
    @abstractmethod
    def fetch(self) -> dict[str, int]:
        """Return the server's quantity map."""
        ...

    @abstractmethod
    def increment(self, recipe_id: str) -> None:
        """Add one unit of a recipe."""
        ...

    @abstractmethod
    def set_quantity(self, recipe_id: str, quantity: int) -> None:
        """Set an exact quantity; zero or less removes the recipe."""
        ...

    @abstractmethod
    def clear(self) -> None:
        ...
