"""Application service: order and payment queries with ownership guards.

``get_order`` distinguishes a missing order (EntityNotFoundError) from
someone else's order (ForbiddenError) so the boundary can answer 404 vs
403.  Payment visibility inherits order ownership.
"""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError, ForbiddenError
from shop.domain.model.order import Order
from shop.domain.model.payment import Payment
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.payment_repository import PaymentRepository


class OrderQueries:

    def __init__(
        self,
        order_repo: OrderRepository,
        payment_repo: PaymentRepository,
    ) -> None:
        self._order_repo = order_repo
        self._payment_repo = payment_repo

    def list_for_user(self, user_id: str) -> list[Order]:
        return self._order_repo.list_for_user(user_id)

    def get_order(self, order_id: str, user_id: str) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        if order.user_id != user_id:
            raise ForbiddenError(f"Order {order_id} belongs to another user")
        return order

    def get_payments(self, order_id: str, user_id: str) -> list[Payment]:
        self.get_order(order_id, user_id)
        return self._payment_repo.list_for_order(order_id)
