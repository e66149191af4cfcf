"""Cart session: the client-local cart reconciled with the server cart.

Every mutation lands in the local copy first and is then mirrored to the
server when a remote cart is attached (the buyer is signed in). Server
failures are logged and reported by a ``False`` return; the local change is
kept and nothing is retried.

On sign-in, ``fetch_server_cart`` merges the two copies with the server
winning per recipe (``{**local, **server}``) and, when the local copy had
anything in it, pushes the merged result back one recipe at a time.
"""

from dataclasses import dataclass

import structlog

from storefront.cart.local import LocalCartStore
from storefront.cart.port import RemoteCart
from storefront.catalogue import CatalogueSnapshot
from storefront.exceptions import StorefrontError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CartLineDetail:
    recipe_id: str
    name: str
    price: float
    quantity: int
    category: str

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


def merge_carts(local: dict[str, int], server: dict[str, int]) -> dict[str, int]:
    """Union of recipes; the server's quantity wins where both have one."""
    return {**local, **server}


class CartSession:
    def __init__(self, store: LocalCartStore | None = None, remote: RemoteCart | None = None):
        self._store = store or LocalCartStore()
        self._remote = remote
        self._items = self._store.load()

    # -------------------------------------------------------------------
    # Sign-in / sign-out
    # -------------------------------------------------------------------
    @property
    def remote(self) -> RemoteCart | None:
        return self._remote

    def attach(self, remote: RemoteCart) -> None:
        self._remote = remote

    def detach(self) -> None:
        """Stop mirroring to the server. The local copy is kept."""
        self._remote = None

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    @property
    def items(self) -> dict[str, int]:
        return dict(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def quantity_of(self, recipe_id: str) -> int:
        return self._items.get(recipe_id, 0)

    def total_count(self) -> int:
        return sum(self._items.values())

    def total_amount(self, catalogue: CatalogueSnapshot) -> float:
        """Sum of quantity times price; recipes missing from ``catalogue`` count as zero."""
        total = 0.0
        for recipe_id, quantity in self._items.items():
            entry = catalogue.get(recipe_id)
            if entry is not None:
                total += entry.price * quantity
        return total

    def details(self, catalogue: CatalogueSnapshot) -> list[CartLineDetail]:
        rows = []
        for recipe_id, quantity in self._items.items():
            entry = catalogue.get(recipe_id)
            if entry is None:
                continue
            rows.append(
                CartLineDetail(
                    recipe_id=recipe_id,
                    name=entry.name,
                    price=entry.price,
                    quantity=quantity,
                    category=entry.category,
                )
            )
        return rows

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_item(self, recipe_id: str) -> bool:
        """Add one unit. Returns ``False`` only when the server rejected or missed the change."""
        self._items[recipe_id] = self._items.get(recipe_id, 0) + 1
        self._store.save(self._items)
        return self._mirror("increment", recipe_id)

    def set_item_quantity(self, recipe_id: str, quantity: int) -> bool:
        """Set an exact quantity; zero or less removes the recipe."""
        if quantity <= 0:
            self._items.pop(recipe_id, None)
        else:
            self._items[recipe_id] = quantity
        self._store.save(self._items)
        return self._mirror("set_quantity", recipe_id, quantity)

    def clear(self) -> bool:
        self._items = {}
        self._store.delete()
        return self._mirror("clear")

    def fetch_server_cart(self) -> bool:
        """Merge the server cart into the local one and resync when needed.

        A failed fetch leaves the local cart untouched. A failed resync stops
        at the first failing recipe, leaving the server partly updated.
        """
        if self._remote is None:
            logger.debug("No remote cart attached; nothing to fetch")
            return False

        try:
            server = self._remote.fetch()
        except StorefrontError as exc:
            logger.warning("Fetching server cart failed", error=str(exc))
            return False

        had_local = bool(self._items)
        self._items = merge_carts(self._items, server)
        self._store.save(self._items)

        if not had_local:
            return True

        for recipe_id, quantity in self._items.items():
            try:
                self._remote.set_quantity(recipe_id, quantity)
            except StorefrontError as exc:
                logger.warning("Cart resync stopped", recipe_id=recipe_id, error=str(exc))
                return False
        return True

    def _mirror(self, operation: str, *args) -> bool:
        if self._remote is None:
            return True
        try:
            getattr(self._remote, operation)(*args)
        except StorefrontError as exc:
            logger.warning("Server cart update failed", operation=operation, args=args, error=str(exc))
            return False
        return True
