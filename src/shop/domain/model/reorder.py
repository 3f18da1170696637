"""ReorderRequest: a log entry saying a product ran low.

Requests are never consumed or dequeued; they are an append-only trail
for whoever restocks.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

# Stock level at or below which low-stock signals fire.  Shared by the
# admin stock path and the checkout path.
REORDER_THRESHOLD = 5


@dataclass(frozen=True)
class ReorderRequest:
    id: str
    product_id: str
    stock_quantity: int  # snapshot at request time
    threshold: int
    requested_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def for_stock_level(product_id: str, stock_quantity: int) -> ReorderRequest:
        return ReorderRequest(
            id=str(uuid.uuid4()),
            product_id=product_id,
            stock_quantity=stock_quantity,
            threshold=REORDER_THRESHOLD,
        )


def is_low_stock(stock_quantity: int) -> bool:
    return stock_quantity <= REORDER_THRESHOLD
