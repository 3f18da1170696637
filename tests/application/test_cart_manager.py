"""Integration tests for the CartManager use cases."""

import pytest

from shop.domain.exceptions import EntityNotFoundError, InvalidQuantityError, NotInCartError
from tests.fakes import build_shop


def _setup():
    shop = build_shop()
    shop.add_product("p1")
    shop.add_product("p2")
    return shop


class TestAddToCart:

    def test_add_and_merge(self):
        shop = _setup()
        shop.cart_manager.add_to_cart("alice", "p1", 2)
        cart = shop.cart_manager.add_to_cart("alice", "p1", 3)
        assert cart.quantities() == {"p1": 5}
        assert shop.cart_manager.get_cart("alice").quantities() == {"p1": 5}

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity_rejected(self, qty):
        shop = _setup()
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            shop.cart_manager.add_to_cart("alice", "p1", qty)
        assert shop.cart_manager.get_cart("alice").is_empty

    def test_unknown_product_rejected(self):
        shop = _setup()
        with pytest.raises(EntityNotFoundError):
            shop.cart_manager.add_to_cart("alice", "ghost", 1)

    def test_other_users_lines_untouched(self):
        shop = _setup()
        shop.cart_manager.add_to_cart("bob", "p2", 4)
        shop.cart_manager.add_to_cart("alice", "p1", 1)
        shop.cart_manager.clear_cart("alice")
        assert shop.cart_manager.get_cart("bob").quantities() == {"p2": 4}


class TestUpdateAndRemove:

    def test_update_sets_quantity(self):
        shop = _setup()
        shop.cart_manager.add_to_cart("alice", "p1", 2)
        cart = shop.cart_manager.update_cart_item("alice", "p1", 9)
        assert cart.quantities() == {"p1": 9}

    def test_update_to_zero_removes_persisted_line(self):
        shop = _setup()
        shop.cart_manager.add_to_cart("alice", "p1", 2)
        shop.cart_manager.update_cart_item("alice", "p1", 0)
        assert shop.store.read_all("carts") == []

    def test_update_missing_line_rejected(self):
        shop = _setup()
        with pytest.raises(NotInCartError):
            shop.cart_manager.update_cart_item("alice", "p1", 1)

    def test_remove(self):
        shop = _setup()
        shop.cart_manager.add_to_cart("alice", "p1", 1)
        shop.cart_manager.add_to_cart("alice", "p2", 1)
        cart = shop.cart_manager.remove_from_cart("alice", "p1")
        assert cart.quantities() == {"p2": 1}


class TestGetCart:

    def test_repeated_reads_are_equivalent(self):
        shop = _setup()
        shop.cart_manager.add_to_cart("alice", "p1", 2)
        shop.cart_manager.add_to_cart("alice", "p2", 1)
        first = shop.cart_manager.get_cart("alice")
        second = shop.cart_manager.get_cart("alice")
        assert first.quantities() == second.quantities() == {"p1": 2, "p2": 1}

    def test_reads_are_not_cached(self):
        shop = _setup()
        cart = shop.cart_manager.get_cart("alice")
        cart.add_item("p1", 3)  # mutating a returned cart does not persist
        assert shop.cart_manager.get_cart("alice").is_empty
