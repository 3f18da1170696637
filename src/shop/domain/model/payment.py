"""Payment record: created exactly once per successful checkout."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from shop.domain.model.order import Order
from shop.domain.model.value_objects import Money

STUB_METHOD = "STUB"
PAID = "PAID"


@dataclass(frozen=True)
class Payment:
    id: str
    order_id: str
    method: str
    amount: Money
    status: str
    payment_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def stub_for(order: Order) -> Payment:
        """Record a stub payment settling *order* in full.

        No money moves; the amount is the order's frozen total.
        """
        return Payment(
            id=str(uuid.uuid4()),
            order_id=order.id,
            method=STUB_METHOD,
            amount=order.total_amount,
            status=PAID,
        )
