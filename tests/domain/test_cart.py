"""Unit tests for the Cart aggregate."""

import pytest

from shop.domain.exceptions import NotInCartError
from shop.domain.model.cart import Cart


class TestCartAddItem:

    def test_appends_new_line(self):
        cart = Cart("u1")
        cart.add_item("p1", 2)
        assert cart.quantities() == {"p1": 2}

    def test_merges_same_product(self):
        cart = Cart("u1")
        cart.add_item("p1", 2)
        cart.add_item("p1", 3)
        assert cart.quantities() == {"p1": 5}
        assert len(cart.lines) == 1

    def test_keeps_insertion_order(self):
        cart = Cart("u1")
        cart.add_item("p2", 1)
        cart.add_item("p1", 1)
        cart.add_item("p2", 1)
        assert [line.product_id for line in cart.lines] == ["p2", "p1"]

    def test_merge_down_to_zero_drops_line(self):
        cart = Cart("u1")
        cart.add_item("p1", 2)
        cart.add_item("p1", -2)
        assert cart.is_empty

    def test_non_positive_new_line_is_not_added(self):
        cart = Cart("u1")
        cart.add_item("p1", 0)
        assert cart.is_empty


class TestCartUpdateItem:

    def test_sets_quantity(self):
        cart = Cart("u1")
        cart.add_item("p1", 2)
        cart.update_item("p1", 7)
        assert cart.quantities() == {"p1": 7}

    def test_zero_removes_line(self):
        cart = Cart("u1")
        cart.add_item("p1", 2)
        cart.update_item("p1", 0)
        assert cart.is_empty

    def test_missing_product_rejected(self):
        cart = Cart("u1")
        with pytest.raises(NotInCartError, match="not in cart"):
            cart.update_item("p1", 1)


class TestCartRemoveAndClear:

    def test_remove_item(self):
        cart = Cart("u1")
        cart.add_item("p1", 1)
        cart.add_item("p2", 1)
        cart.remove_item("p1")
        assert cart.quantities() == {"p2": 1}

    def test_remove_absent_item_is_a_no_op(self):
        cart = Cart("u1")
        cart.add_item("p1", 1)
        cart.remove_item("p9")
        assert cart.quantities() == {"p1": 1}

    def test_clear(self):
        cart = Cart("u1")
        cart.add_item("p1", 1)
        cart.clear()
        assert cart.is_empty
