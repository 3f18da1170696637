"""CSV-backed implementation of ProductRepository."""

from __future__ import annotations

from contextlib import AbstractContextManager
from decimal import Decimal

from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.repository.row_store import Row, RowStore

TABLE = "products"


class CsvProductRepository(ProductRepository):

    def __init__(self, store: RowStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._store.read_all(TABLE):
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._store.read_all(TABLE)]

    def save(self, product: Product) -> None:
        with self._store.lock(TABLE):
            rows = self._store.read_all(TABLE)
            for i, raw in enumerate(rows):
                if raw["id"] == product.id:
                    rows[i] = self._to_raw(product)
                    break
            else:
                rows.append(self._to_raw(product))
            self._store.write_all(TABLE, rows)

    def delete(self, product_id: str) -> bool:
        with self._store.lock(TABLE):
            rows = self._store.read_all(TABLE)
            remaining = [raw for raw in rows if raw["id"] != product_id]
            if len(remaining) == len(rows):
                return False
            self._store.write_all(TABLE, remaining)
            return True

    def locked(self) -> AbstractContextManager:
        return self._store.lock(TABLE)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> Row:
        return {
            "id": product.id,
            "name": product.name,
            "price": product.price.to_text(),
            "stockQuantity": str(product.stock_quantity),
        }

    @staticmethod
    def _to_domain(raw: Row) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            stock_quantity=int(raw["stockQuantity"]),
        )
