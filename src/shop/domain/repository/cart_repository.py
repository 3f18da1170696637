"""Abstract repository for Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_for_user(self, user_id: str) -> Cart:
        """Return the user's cart; a user with no lines gets an empty cart."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Replace all of the cart owner's lines, leaving other users' alone."""

    @abstractmethod
    def delete_for_user(self, user_id: str) -> None:
        """Drop every line belonging to the user."""
