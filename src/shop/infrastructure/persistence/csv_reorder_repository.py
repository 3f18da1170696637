"""CSV-backed implementation of ReorderRepository."""

from __future__ import annotations

from datetime import datetime

from shop.domain.model.reorder import ReorderRequest
from shop.domain.repository.reorder_repository import ReorderRepository
from shop.domain.repository.row_store import Row, RowStore

TABLE = "reorders"


class CsvReorderRepository(ReorderRepository):

    def __init__(self, store: RowStore) -> None:
        self._store = store

    def append(self, request: ReorderRequest) -> None:
        with self._store.lock(TABLE):
            rows = self._store.read_all(TABLE)
            rows.append(self._to_raw(request))
            self._store.write_all(TABLE, rows)

    def list_all(self) -> list[ReorderRequest]:
        return [self._to_domain(raw) for raw in self._store.read_all(TABLE)]

    @staticmethod
    def _to_raw(request: ReorderRequest) -> Row:
        return {
            "reorderId": request.id,
            "productId": request.product_id,
            "stockQuantity": str(request.stock_quantity),
            "threshold": str(request.threshold),
            "requestedAt": request.requested_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: Row) -> ReorderRequest:
        return ReorderRequest(
            id=raw["reorderId"],
            product_id=raw["productId"],
            stock_quantity=int(raw["stockQuantity"]),
            threshold=int(raw["threshold"]),
            requested_at=datetime.fromisoformat(raw["requestedAt"]),
        )
