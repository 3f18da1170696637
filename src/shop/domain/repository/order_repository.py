"""Abstract repository for Order aggregate (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def append(self, order: Order) -> None:
        """Persist a newly placed order."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Order]:
        """Return every order placed by the user, oldest first."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""
