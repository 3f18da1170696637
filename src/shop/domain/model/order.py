"""Order aggregate: the immutable record of a completed checkout.

There is no update path: once appended, an order's lines, unit prices and
total never change, whatever happens to the catalog afterwards.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PAID = "PAID"


@dataclass(frozen=True)
class OrderLineItem:
    """Price snapshot of one product at checkout time."""

    product_id: str
    quantity: Quantity
    unit_price: Money  # frozen at checkout time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders; it generates the id and freezes
    ``total_amount`` from the line items.  The plain constructor is kept
    for the repository to reconstitute persisted rows.
    """

    id: str
    user_id: str
    items: tuple[OrderLineItem, ...]
    total_amount: Money
    status: OrderStatus = OrderStatus.PAID
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(user_id: str, items: list[OrderLineItem]) -> Order:
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(
            id=str(uuid.uuid4()),
            user_id=user_id,
            items=tuple(items),
            total_amount=sum_line_totals(items),
        )

    @property
    def short_id(self) -> str:
        return self.id[:8]


def sum_line_totals(items: Iterable[OrderLineItem]) -> Money:
    total = Money.zero()
    for item in items:
        total = total + item.line_total
    return total
