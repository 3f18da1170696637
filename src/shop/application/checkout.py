"""Application service: Checkout use case.

Turns a user's cart into a paid order without a transaction facility:

1. Decrement stock for every cart line, in cart order, remembering each
   applied decrement.  Lines that leave a product at or below the reorder
   threshold emit a reorder request and admin alerts on the spot.
2. Price every line at the product's *current* price and freeze the
   result into an Order, then record a stub Payment for its total.
3. Notify the buyer and clear the cart.

If anything fails after the first decrement, the applied decrements are
compensated with matching increments before the original error propagates.
The cart is left as it was so the user can retry.

Known gaps:
- compensation is best-effort: a failing increment is logged, not retried;
- low-stock alerts and reorder requests already emitted stay emitted;
- an order or payment row already appended before a later failure stays
  appended (there is no delete path for either).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shop.application.cart_manager import CartManager
from shop.application.product_ledger import ProductLedger
from shop.domain.exceptions import EmptyCartError
from shop.domain.model.cart import Cart
from shop.domain.model.notification import NotificationType
from shop.domain.model.order import Order, OrderLineItem
from shop.domain.model.payment import Payment
from shop.domain.model.reorder import is_low_stock
from shop.domain.model.value_objects import Quantity
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.payment_repository import PaymentRepository
from shop.domain.service.notification_emitter import NotificationEmitter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    order: Order
    payment: Payment


class CheckoutHandler:

    def __init__(
        self,
        cart_manager: CartManager,
        ledger: ProductLedger,
        order_repo: OrderRepository,
        payment_repo: PaymentRepository,
        emitter: NotificationEmitter,
    ) -> None:
        self._cart_manager = cart_manager
        self._ledger = ledger
        self._order_repo = order_repo
        self._payment_repo = payment_repo
        self._emitter = emitter

    def handle(self, user_id: str) -> CheckoutResult:
        """Check out the user's cart.

        Raises EmptyCartError (nothing touched) if the cart has no lines,
        InsufficientStockError if a line asks for more than is on hand, or
        whatever storage raised.  On every failure, stock is back to its
        pre-checkout level and the cart is unchanged.
        """
        cart = self._cart_manager.get_cart(user_id)
        if cart.is_empty:
            raise EmptyCartError("Cart is empty")

        decremented: list[tuple[str, int]] = []
        completed = False
        try:
            for line in cart.lines:
                product = self._ledger.decrement_stock(line.product_id, line.quantity)
                decremented.append((line.product_id, line.quantity))

                if is_low_stock(product.stock_quantity):
                    self._emitter.flag_low_stock(
                        product,
                        f'Product "{product.name}" (ID: {product.id}) is low on stock '
                        f"(remaining: {product.stock_quantity}).",
                    )

            order = Order.place(user_id, self._price_lines(cart))
            self._order_repo.append(order)

            payment = Payment.stub_for(order)
            self._payment_repo.append(payment)

            self._emitter.notify_user(
                user_id,
                NotificationType.ORDER_PLACED,
                f"Your order #{order.short_id}... has been placed successfully.",
            )
            self._cart_manager.clear_cart(user_id)
            completed = True
        finally:
            if not completed:
                self._roll_back(user_id, decremented)

        logger.info(
            "User %s checked out order %s: %d line(s), total %s",
            user_id, order.id, len(order.items), order.total_amount,
        )
        return CheckoutResult(order=order, payment=payment)

    # --- Internal helpers -----------------------------------------------------

    def _price_lines(self, cart: Cart) -> list[OrderLineItem]:
        """Snapshot each line at the price read now, not at add-to-cart time."""
        items: list[OrderLineItem] = []
        for line in cart.lines:
            product = self._ledger.get_by_id(line.product_id)
            items.append(
                OrderLineItem(
                    product_id=line.product_id,
                    quantity=Quantity(line.quantity),
                    unit_price=product.price,  # <-- price snapshot
                )
            )
        return items

    def _roll_back(self, user_id: str, decremented: list[tuple[str, int]]) -> None:
        if not decremented:
            return
        logger.warning(
            "Checkout for user %s failed; restoring stock for %d line(s)",
            user_id, len(decremented),
        )
        for product_id, qty in reversed(decremented):
            try:
                self._ledger.increment_stock(product_id, qty)
            except Exception:
                logger.exception(
                    "Could not restore %d unit(s) of %s after failed checkout",
                    qty, product_id,
                )
