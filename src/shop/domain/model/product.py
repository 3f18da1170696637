"""Product aggregate.

Products live independently of carts and orders.  Their price and stock
move over time; orders keep their own price snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import InsufficientStockError, InvalidQuantityError
from shop.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``stock_quantity`` is never negative
    - ``price`` is never negative (guaranteed by ``Money``)
    """

    id: str
    name: str
    price: Money
    stock_quantity: int

    def decrement_stock(self, qty: int) -> None:
        """Take *qty* units out of stock.

        Raises InsufficientStockError, leaving stock untouched, if fewer
        than *qty* units are on hand.
        """
        _require_positive(qty)
        if qty > self.stock_quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {qty}, have {self.stock_quantity})"
            )
        self.stock_quantity -= qty

    def increment_stock(self, qty: int) -> None:
        _require_positive(qty)
        self.stock_quantity += qty

    def set_stock(self, new_quantity: int) -> None:
        if new_quantity < 0:
            raise InvalidQuantityError("Stock cannot be negative")
        self.stock_quantity = new_quantity

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing orders are unaffected: they froze the unit price at
        checkout time.
        """
        self.price = new_price


def _require_positive(qty: int) -> None:
    if not isinstance(qty, int) or qty <= 0:
        raise InvalidQuantityError("Stock adjustment quantity must be positive")
