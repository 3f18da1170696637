"""Application service: Cart management use cases.

Every call rebuilds the cart from storage, applies one change and writes
the owner's lines back in a single whole-cart overwrite.
"""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError, InvalidQuantityError
from shop.domain.model.cart import Cart
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository


class CartManager:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def get_cart(self, user_id: str) -> Cart:
        return self._cart_repo.get_for_user(user_id)

    def add_to_cart(self, user_id: str, product_id: str, qty: int) -> Cart:
        """Add *qty* units of a product, merging into an existing line."""
        if not isinstance(qty, int) or qty <= 0:
            raise InvalidQuantityError("Quantity must be positive")
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product {product_id} not found")

        cart = self._cart_repo.get_for_user(user_id)
        cart.add_item(product_id, qty)
        self._cart_repo.save(cart)
        return cart

    def update_cart_item(self, user_id: str, product_id: str, new_qty: int) -> Cart:
        """Set a line's quantity; zero or less removes the line.

        Raises NotInCartError if the product has no line in the cart.
        """
        cart = self._cart_repo.get_for_user(user_id)
        cart.update_item(product_id, new_qty)
        self._cart_repo.save(cart)
        return cart

    def remove_from_cart(self, user_id: str, product_id: str) -> Cart:
        cart = self._cart_repo.get_for_user(user_id)
        cart.remove_item(product_id)
        self._cart_repo.save(cart)
        return cart

    def clear_cart(self, user_id: str) -> None:
        self._cart_repo.delete_for_user(user_id)
