"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The CSV implementation lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from shop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product; return False if there was nothing to remove."""

    @abstractmethod
    def locked(self) -> AbstractContextManager:
        """Hold exclusive access to the product table.

        Re-entrant, so ``save`` and ``delete`` may be called while held.
        A read-check-save sequence done under it cannot interleave with
        any other writer of the table in this process.
        """
