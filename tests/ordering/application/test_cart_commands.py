"""Application tests for the server cart via domain.process()."""

from protean import current_domain

from caterly.ordering.cart.management import AddToCart, ClearCart, UpdateCartItem, get_cart_map


def _process(command):
    current_domain.process(command, asynchronous=False)


class TestServerCartCommands:
    def test_missing_cart_reads_empty(self):
        assert get_cart_map("buyer-1") == {}

    def test_add_creates_cart_lazily(self):
        _process(AddToCart(owner_id="buyer-1", recipe_id="x"))
        _process(AddToCart(owner_id="buyer-1", recipe_id="x"))
        assert get_cart_map("buyer-1") == {"x": 2}

    def test_update_sets_exact_quantity(self):
        _process(UpdateCartItem(owner_id="buyer-1", recipe_id="x", quantity=4))
        assert get_cart_map("buyer-1") == {"x": 4}

    def test_update_to_zero_removes(self):
        _process(AddToCart(owner_id="buyer-1", recipe_id="x"))
        _process(AddToCart(owner_id="buyer-1", recipe_id="y"))
        _process(UpdateCartItem(owner_id="buyer-1", recipe_id="x", quantity=0))
        assert get_cart_map("buyer-1") == {"y": 1}

    def test_clear(self):
        _process(AddToCart(owner_id="buyer-1", recipe_id="x"))
        _process(ClearCart(owner_id="buyer-1"))
        assert get_cart_map("buyer-1") == {}

    def test_carts_are_per_owner(self):
        _process(AddToCart(owner_id="buyer-1", recipe_id="x"))
        _process(AddToCart(owner_id="buyer-2", recipe_id="y"))
        assert get_cart_map("buyer-1") == {"x": 1}
        assert get_cart_map("buyer-2") == {"y": 1}
