"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry formatted data from the application layer to the CLI without
exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.order import Order
from shop.domain.model.payment import Payment

_DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    user_id: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    order_date: str


@dataclass(frozen=True)
class PaymentDTO:
    id: str
    order_id: str
    method: str
    amount: str
    status: str
    payment_date: str


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        order_date=order.order_date.strftime(_DATE_FORMAT),
    )


def payment_to_dto(payment: Payment) -> PaymentDTO:
    return PaymentDTO(
        id=payment.id,
        order_id=payment.order_id,
        method=payment.method,
        amount=str(payment.amount),
        status=payment.status,
        payment_date=payment.payment_date.strftime(_DATE_FORMAT),
    )
