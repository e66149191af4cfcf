"""Remote cart over the Caterly HTTP API."""

from storefront.api_client import StorefrontClient
from storefront.cart.port import RemoteCart


class HttpRemoteCart(RemoteCart):
    def __init__(self, client: StorefrontClient):
        self._client = client

    def fetch(self) -> dict[str, int]:
        payload = self._client.get("/cart")
        return {str(recipe_id): int(quantity) for recipe_id, quantity in payload["items"].items()}

    def increment(self, recipe_id: str) -> None:
        self._client.post("/cart/items", json={"recipe_id": recipe_id})

    def set_quantity(self, recipe_id: str, quantity: int) -> None:
        self._client.put(f"/cart/items/{recipe_id}", json={"quantity": quantity})

    def clear(self) -> None:
        self._client.delete("/cart")
