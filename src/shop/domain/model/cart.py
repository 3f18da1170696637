"""Cart aggregate: one user's pending (product, quantity) lines."""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.exceptions import NotInCartError


@dataclass
class CartLine:
    product_id: str
    quantity: int


@dataclass
class Cart:
    """A user's shopping cart.

    Built fresh from storage on every access and never cached.  Lines keep
    insertion order, which is also the order checkout processes them in.

    Invariant: no line ever holds a quantity <= 0.  Operations that would
    produce one drop the line instead.
    """

    user_id: str
    lines: list[CartLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def quantities(self) -> dict[str, int]:
        return {line.product_id: line.quantity for line in self.lines}

    def add_item(self, product_id: str, qty: int) -> None:
        """Merge *qty* into the existing line or append a new one.

        Rejecting non-positive quantities is the caller's job
        (``CartManager``); this primitive only keeps the invariant.
        """
        existing = self._find(product_id)
        if existing is None:
            if qty > 0:
                self.lines.append(CartLine(product_id=product_id, quantity=qty))
            return
        existing.quantity += qty
        if existing.quantity <= 0:
            self.remove_item(product_id)

    def update_item(self, product_id: str, new_qty: int) -> None:
        """Set a line's quantity; ``new_qty <= 0`` removes the line."""
        line = self._find(product_id)
        if line is None:
            raise NotInCartError(f"Product {product_id} not in cart")
        if new_qty <= 0:
            self.remove_item(product_id)
        else:
            line.quantity = new_qty

    def remove_item(self, product_id: str) -> None:
        self.lines = [line for line in self.lines if line.product_id != product_id]

    def clear(self) -> None:
        self.lines = []

    def _find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None
