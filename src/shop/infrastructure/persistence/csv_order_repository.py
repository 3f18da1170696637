"""CSV-backed implementation of OrderRepository.

Line items are stored as a JSON array in the ``items`` cell; numeric
fields are stored as text and parsed back on read.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal

from shop.domain.model.order import Order, OrderLineItem, OrderStatus
from shop.domain.model.value_objects import Money, Quantity
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.row_store import Row, RowStore

TABLE = "orders"


class CsvOrderRepository(OrderRepository):

    def __init__(self, store: RowStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def append(self, order: Order) -> None:
        with self._store.lock(TABLE):
            rows = self._store.read_all(TABLE)
            rows.append(self._to_raw(order))
            self._store.write_all(TABLE, rows)

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._store.read_all(TABLE):
            if raw["orderId"] == order_id:
                return self._to_domain(raw)
        return None

    def list_for_user(self, user_id: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._store.read_all(TABLE)
            if raw["userId"] == user_id
        ]

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._store.read_all(TABLE)]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> Row:
        return {
            "orderId": order.id,
            "userId": order.user_id,
            "orderDate": order.order_date.isoformat(),
            "items": json.dumps(
                [
                    {
                        "productId": item.product_id,
                        "quantity": item.quantity.value,
                        "unitPrice": item.unit_price.to_text(),
                    }
                    for item in order.items
                ]
            ),
            "totalAmount": order.total_amount.to_text(),
            "status": order.status.value,
        }

    @staticmethod
    def _to_domain(raw: Row) -> Order:
        items = tuple(
            OrderLineItem(
                product_id=i["productId"],
                quantity=Quantity(int(i["quantity"])),
                unit_price=Money(Decimal(str(i["unitPrice"]))),
            )
            for i in json.loads(raw["items"])
        )
        return Order(
            id=raw["orderId"],
            user_id=raw["userId"],
            items=items,
            total_amount=Money(Decimal(raw["totalAmount"])),
            status=OrderStatus(raw["status"]),
            order_date=datetime.fromisoformat(raw["orderDate"]),
        )
