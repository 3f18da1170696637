"""CSV-backed implementation of CartRepository.

All carts share one table, one row per (client, product) line.  Saving a
cart rewrites the table with the owner's old rows swapped for the new ones.
"""

from __future__ import annotations

from shop.domain.model.cart import Cart
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.row_store import RowStore

TABLE = "carts"


class CsvCartRepository(CartRepository):

    def __init__(self, store: RowStore) -> None:
        self._store = store

    def get_for_user(self, user_id: str) -> Cart:
        cart = Cart(user_id=user_id)
        for raw in self._store.read_all(TABLE):
            if raw["clientId"] == user_id:
                # add_item drops non-positive quantities
                cart.add_item(raw["productId"], int(raw["quantity"]))
        return cart

    def save(self, cart: Cart) -> None:
        own = [
            {
                "clientId": cart.user_id,
                "productId": line.product_id,
                "quantity": str(line.quantity),
            }
            for line in cart.lines
            if line.quantity > 0
        ]
        with self._store.lock(TABLE):
            others = [
                raw for raw in self._store.read_all(TABLE)
                if raw["clientId"] != cart.user_id
            ]
            self._store.write_all(TABLE, others + own)

    def delete_for_user(self, user_id: str) -> None:
        self.save(Cart(user_id=user_id))
