"""In-memory remote cart for tests and offline development.

Failures can be scripted per operation via ``fail_on`` (a set of method
names), for every call via ``offline``, or after a number of successful
``set_quantity`` calls via ``fail_after``.
"""

from storefront.cart.port import RemoteCart
from storefront.exceptions import UpstreamError


class FakeRemoteCart(RemoteCart):
    def __init__(
        self,
        items: dict[str, int] | None = None,
        fail_on=(),
        offline: bool = False,
        fail_after: int | None = None,
    ):
        self.items: dict[str, int] = dict(items or {})
        self.fail_on = set(fail_on)
        self.offline = offline
        self.calls: list[tuple] = []
        self.fail_after = fail_after  # succeed this many set_quantity calls, then fail

    def _check(self, operation: str) -> None:
        if self.offline or operation in self.fail_on:
            raise UpstreamError(f"{operation} failed")

    def fetch(self) -> dict[str, int]:
        self.calls.append(("fetch",))
        self._check("fetch")
        return dict(self.items)

    def increment(self, recipe_id: str) -> None:
        self.calls.append(("increment", recipe_id))
        self._check("increment")
        self.items[recipe_id] = self.items.get(recipe_id, 0) + 1

    def set_quantity(self, recipe_id: str, quantity: int) -> None:
        self.calls.append(("set_quantity", recipe_id, quantity))
        self._check("set_quantity")
        if self.fail_after is not None:
            if self.fail_after <= 0:
                raise UpstreamError("set_quantity failed")
            self.fail_after -= 1

        if quantity <= 0:
            self.items.pop(recipe_id, None)
        else:
            self.items[recipe_id] = quantity

    def clear(self) -> None:
        self.calls.append(("clear",))
        self._check("clear")
        self.items.clear()
