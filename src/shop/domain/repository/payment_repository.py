"""Abstract repository for Payment records (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.payment import Payment


class PaymentRepository(ABC):

    @abstractmethod
    def append(self, payment: Payment) -> None:
        """Persist a new payment."""

    @abstractmethod
    def list_for_order(self, order_id: str) -> list[Payment]:
        """Return the payments settling an order."""

    @abstractmethod
    def list_all(self) -> list[Payment]:
        """Return every payment."""
