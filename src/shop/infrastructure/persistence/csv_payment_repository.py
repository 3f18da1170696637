"""CSV-backed implementation of PaymentRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from shop.domain.model.payment import Payment
from shop.domain.model.value_objects import Money
from shop.domain.repository.payment_repository import PaymentRepository
from shop.domain.repository.row_store import Row, RowStore

TABLE = "payments"


class CsvPaymentRepository(PaymentRepository):

    def __init__(self, store: RowStore) -> None:
        self._store = store

    def append(self, payment: Payment) -> None:
        with self._store.lock(TABLE):
            rows = self._store.read_all(TABLE)
            rows.append(self._to_raw(payment))
            self._store.write_all(TABLE, rows)

    def list_for_order(self, order_id: str) -> list[Payment]:
        return [p for p in self.list_all() if p.order_id == order_id]

    def list_all(self) -> list[Payment]:
        return [self._to_domain(raw) for raw in self._store.read_all(TABLE)]

    @staticmethod
    def _to_raw(payment: Payment) -> Row:
        return {
            "paymentId": payment.id,
            "orderId": payment.order_id,
            "paymentDate": payment.payment_date.isoformat(),
            "paymentMethod": payment.method,
            "paymentAmount": payment.amount.to_text(),
            "status": payment.status,
        }

    @staticmethod
    def _to_domain(raw: Row) -> Payment:
        return Payment(
            id=raw["paymentId"],
            order_id=raw["orderId"],
            method=raw["paymentMethod"],
            amount=Money(Decimal(raw["paymentAmount"])),
            status=raw["status"],
            payment_date=datetime.fromisoformat(raw["paymentDate"]),
        )
